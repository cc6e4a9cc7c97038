"""wirebox - a small named dependency injection container."""

from wirebox.registry import get_container, new_container, reset_container
from wirebox.shared.annotations import Factory, Inject, Parameter, Service
from wirebox.shared.container import MISSING, Container
from wirebox.shared.errors import (
    ContainerError,
    InvalidArgumentError,
    MissingArgumentError,
    NotFoundError,
    ProducerReturnedNothingError,
    WrapperConstructionError,
)
from wirebox.shared.storage.memory_store import MemoryStore
from wirebox.shared.tags.tag_index import TagIndex
from wirebox.shared.wrapper import Wrapper, WrapperKind
from wirebox.shared.wrapper_factory import WrapperFactory

__all__ = [
    "Container",
    "MISSING",
    "MemoryStore",
    "TagIndex",
    "Wrapper",
    "WrapperKind",
    "WrapperFactory",
    "ContainerError",
    "InvalidArgumentError",
    "MissingArgumentError",
    "NotFoundError",
    "ProducerReturnedNothingError",
    "WrapperConstructionError",
    "Service",
    "Factory",
    "Parameter",
    "Inject",
    "get_container",
    "new_container",
    "reset_container",
]
