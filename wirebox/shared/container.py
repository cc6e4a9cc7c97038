"""
Container - named dependency registry with lazy, cached resolution.

Registrations are wrapped as one of three kinds:

* service   - a producer called with the container on first ``get``; the result is cached.
* factory   - a producer called with the container on every ``get``; never cached.
* parameter - any value, handed back unchanged (even if it is callable).
"""

import contextlib
import threading
from typing import Any, Callable, Dict, List, Optional, Sequence

from wirebox.config.logger import get_logger
from wirebox.shared.errors import (
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


class _Missing:
    """Marks an argument that was not supplied."""

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()


class Container:
    """
    Dependency injection container.

    Collaborators are constructor-injected so tests can substitute them; any
    that are omitted are created fresh for this instance and never shared.

    One lock guards the stores and is never held while a producer runs.
    Building a service holds only that name's own lock, so its producer may
    resolve other names from any thread; a producer that waits on another
    thread resolving the same name deadlocks, like any other cycle.
    """

    def __init__(
        self,
        dependencies: Optional[MemoryStore] = None,
        cache: Optional[MemoryStore] = None,
        tags: Optional[TagIndex] = None,
        wrapper_factory: Optional[WrapperFactory] = None,
        logger=None,
        thread_safe: bool = True,
        track_retrievals: bool = True,
    ):
        self._dependencies = dependencies if dependencies is not None else MemoryStore()
        self._cache = cache if cache is not None else MemoryStore()
        self._tags = tags if tags is not None else TagIndex()
        self._wrapper_factory = wrapper_factory if wrapper_factory is not None else WrapperFactory()
        self.logger = logger if logger is not None else get_logger()
        self._new_lock = threading.RLock if thread_safe else contextlib.nullcontext
        self._lock = self._new_lock()
        self._service_locks: Dict[str, Any] = {}
        self._track_retrievals = track_retrievals
        self._retrieval_counter: Dict[str, int] = {}

    # ----------------------------
    # Wrapper builders
    # ----------------------------
    def service(self, fn: Callable[["Container"], Any]) -> Wrapper:
        """Wrap ``fn`` as a cached service producer. Does not register it."""
        if not callable(fn):
            raise InvalidArgumentError("The service must be a function.", code="service-not-callable")
        return self._wrapper_factory.make(WrapperKind.SERVICE, fn)

    def factory(self, fn: Callable[["Container"], Any]) -> Wrapper:
        """Wrap ``fn`` as a per-call factory producer. Does not register it."""
        if not callable(fn):
            raise InvalidArgumentError("The factory must be a function.", code="factory-not-callable")
        return self._wrapper_factory.make(WrapperKind.FACTORY, fn)

    def parameter(self, value: Any) -> Wrapper:
        """Wrap ``value`` so ``get`` returns it verbatim. Does not register it."""
        if value is None:
            raise InvalidArgumentError("The parameter value is required.", code="dependency-undefined")
        return self._wrapper_factory.make(WrapperKind.PARAMETER, value)

    # ----------------------------
    # Registration
    # ----------------------------
    def add(self, name: str, dependency: Any, tags: Optional[Sequence[str]] = None) -> "Container":
        """
        Register ``dependency`` under ``name``, replacing any previous registration.

        A Wrapper keeps its kind, a bare callable becomes a service and
        anything else becomes a parameter. ``tags`` replace the name's
        previous tags.

        Raises:
            InvalidArgumentError: name is not a str, dependency is None, tags is
                not a list of str. Nothing is registered in that case.
        """
        if not isinstance(name, str):
            raise InvalidArgumentError("Name must be a string.", code="name-not-string")
        if not name:
            raise InvalidArgumentError("Name must not be empty.", code="name-empty")
        if dependency is None or dependency is MISSING:
            raise InvalidArgumentError("The dependency is required.", code="dependency-undefined")
        tags = [] if tags is None else tags
        TagIndex.validate(name, tags)

        wrapper = self._classify(dependency)

        with self._lock:
            self._dependencies.add(name, wrapper)
            if self._cache.exists(name):
                self._cache.remove(name)
            self._tags.add(name, tags)
            self._retrieval_counter.pop(name, None)
            self._service_locks.pop(name, None)

        self.logger.debug("Dependency registered", name=name, kind=wrapper.kind.value, tags=list(tags))
        return self

    def _classify(self, dependency: Any) -> Wrapper:
        if isinstance(dependency, Wrapper):
            return dependency
        if callable(dependency):
            return self._wrapper_factory.make(WrapperKind.SERVICE, dependency)
        return self._wrapper_factory.make(WrapperKind.PARAMETER, dependency)

    # ----------------------------
    # Resolution
    # ----------------------------
    def get(self, name: str = MISSING) -> Any:
        """
        Resolve ``name``.

        Raises:
            MissingArgumentError: no name given.
            NotFoundError: name is not registered.
            ProducerReturnedNothingError: a service producer returned None.
        """
        self._require_name(name)
        with self._lock:
            wrapper = self._lookup(name)

        if wrapper.kind == WrapperKind.FACTORY:
            result = wrapper.value(self)
        elif wrapper.kind == WrapperKind.SERVICE:
            result = self._resolve_service(name, wrapper)
        elif wrapper.kind == WrapperKind.PARAMETER:
            result = wrapper.value
        else:
            raise WrapperConstructionError(f"Unknown wrapper kind: {wrapper.kind!r}", code="unknown-kind")

        if self._track_retrievals:
            with self._lock:
                if self._dependencies.exists(name):
                    self._retrieval_counter[name] = self._retrieval_counter.get(name, 0) + 1
        return result

    def _resolve_service(self, name: str, wrapper: Wrapper) -> Any:
        with self._lock:
            if self._cache.exists(name):
                return self._cache.get(name)
            service_lock = self._service_locks.setdefault(name, self._new_lock())

        with service_lock:
            # another thread may have built it while we waited
            with self._lock:
                if self._cache.exists(name) and self._is_current(name, wrapper):
                    return self._cache.get(name)

            self.logger.debug("Instantiating service", name=name)
            instance = wrapper.value(self)
            if instance is None:
                self.logger.error("Service producer returned None", name=name)
                raise ProducerReturnedNothingError(name)

            with self._lock:
                # not cached if removed or replaced while the producer ran
                if self._is_current(name, wrapper):
                    self._cache.add(name, instance)
        return instance

    def _is_current(self, name: str, wrapper: Wrapper) -> bool:
        return self._dependencies.exists(name) and self._dependencies.get(name) is wrapper

    def _lookup(self, name: str) -> Wrapper:
        if self._dependencies.does_not_exist(name):
            self.logger.warning("Dependency not registered", name=name)
            raise NotFoundError(name)
        return self._dependencies.get(name)

    @staticmethod
    def _require_name(name: Any) -> None:
        if name is MISSING or name is None:
            raise MissingArgumentError("The name parameter is required.", code="name-missing")
        if not isinstance(name, str):
            raise InvalidArgumentError("Name must be a string.", code="name-not-string")

    # ----------------------------
    # Removal
    # ----------------------------
    def remove(self, name: str = MISSING) -> "Container":
        """Unregister ``name``, dropping its cached instance and its tags."""
        self._require_name(name)
        with self._lock:
            self._lookup(name)
            self._dependencies.remove(name)
            if self._cache.exists(name):
                self._cache.remove(name)
            self._tags.remove(name)
            self._retrieval_counter.pop(name, None)
            self._service_locks.pop(name, None)

        self.logger.debug("Dependency removed", name=name)
        return self

    # ----------------------------
    # Tags
    # ----------------------------
    def tagged(self, tag: str = MISSING) -> List[str]:
        """Names registered with ``tag``, in registration order. Unknown tags give []."""
        if tag is MISSING or tag is None:
            raise MissingArgumentError("The tag parameter is required.", code="tag-missing")
        if not isinstance(tag, str):
            raise InvalidArgumentError("tag must be a string.", code="tag-not-string")
        with self._lock:
            return self._tags.find_by_tag(tag)

    # ----------------------------
    # Introspection
    # ----------------------------
    def has(self, name: str) -> bool:
        with self._lock:
            return isinstance(name, str) and self._dependencies.exists(name)

    def names(self) -> List[str]:
        with self._lock:
            return self._dependencies.names()

    def retrieval_counts(self) -> Dict[str, int]:
        with self._lock:
            return dict(self._retrieval_counter)

    def log_retrievals(self) -> None:
        self.logger.info("Dependency retrievals", counts=self.retrieval_counts())

    def __contains__(self, name: object) -> bool:
        return self.has(name)

    def __len__(self) -> int:
        with self._lock:
            return len(self._dependencies)
