# wirebox/shared/wrapper_factory.py
from typing import Any, Union

from wirebox.shared.wrapper import Wrapper, WrapperKind


class WrapperFactory:
    """Builds Wrapper instances for the container; swap it out in tests."""

    def make(self, kind: Union[WrapperKind, str], value: Any) -> Wrapper:
        return Wrapper(kind, value)
