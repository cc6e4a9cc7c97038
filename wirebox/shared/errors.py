# wirebox/shared/errors.py
from typing import Optional


class ContainerError(Exception):
    """Base class for every error raised by the container and its stores."""

    code: str = "container-error"

    def __init__(self, message: str, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code

    def __str__(self) -> str:
        return self.message


class InvalidArgumentError(ContainerError, TypeError):
    """Malformed input: bad name, bad tags, non-callable producer, absent value."""

    code = "invalid-argument"


class MissingArgumentError(ContainerError, TypeError):
    """A required argument was not supplied at all."""

    code = "missing-argument"


class NotFoundError(ContainerError, KeyError):
    """Lookup or removal of a name that is not registered."""

    code = "not-found"

    def __init__(self, name: str, message: Optional[str] = None):
        super().__init__(
            message
            or f'The requested dependency "{name}" has not been registered. '
            "Try checking spelling or correct use of upper and lower case characters."
        )
        self.name = name


class ProducerReturnedNothingError(ContainerError):
    """A service producer returned None, which cannot be cached."""

    code = "producer-returned-nothing"

    def __init__(self, name: str):
        super().__init__(f'The producer for service "{name}" returned None.')
        self.name = name


class WrapperConstructionError(ContainerError, TypeError):
    """A Wrapper was built with an unknown kind or a non-callable producer."""

    code = "wrapper-construction"
