"""
Wrapper - a registered dependency tagged with how the container resolves it.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

from wirebox.shared.errors import WrapperConstructionError


class WrapperKind(str, Enum):
    SERVICE = "service"      # invoked once, result cached
    FACTORY = "factory"      # invoked on every get
    PARAMETER = "parameter"  # returned as-is


@dataclass(frozen=True)
class Wrapper:
    """Immutable (kind, value) pair. SERVICE and FACTORY values must be callable."""

    kind: WrapperKind
    value: Any

    def __init__(self, kind: Union[WrapperKind, str], value: Any):
        try:
            kind = WrapperKind(kind)
        except ValueError:
            raise WrapperConstructionError(
                "Type must be either 'factory', 'parameter', or 'service'.",
                code="unknown-kind",
            ) from None
        if kind in (WrapperKind.SERVICE, WrapperKind.FACTORY) and not callable(value):
            raise WrapperConstructionError(
                f"The value to be wrapped as a {kind.value} must be callable.",
                code="not-callable",
            )
        object.__setattr__(self, "kind", kind)
        object.__setattr__(self, "value", value)

    @property
    def is_service(self) -> bool:
        return self.kind is WrapperKind.SERVICE

    @property
    def is_factory(self) -> bool:
        return self.kind is WrapperKind.FACTORY

    @property
    def is_parameter(self) -> bool:
        return self.kind is WrapperKind.PARAMETER
