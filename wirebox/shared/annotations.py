"""
Registration decorators.
Sugar over Container.add for producers declared at module level.
"""

from typing import Any, Callable, Optional, Sequence

from wirebox.shared.container import Container


def _target(container: Optional[Container]) -> Container:
    if container is not None:
        return container
    from wirebox.registry import get_container
    return get_container()


def Service(name: str, tags: Optional[Sequence[str]] = None, container: Optional[Container] = None):
    """Register the decorated producer as a cached service."""
    def decorator(fn: Callable[[Container], Any]):
        target = _target(container)
        target.add(name, target.service(fn), tags)
        return fn
    return decorator


def Factory(name: str, tags: Optional[Sequence[str]] = None, container: Optional[Container] = None):
    """Register the decorated producer as a factory, invoked on every get."""
    def decorator(fn: Callable[[Container], Any]):
        target = _target(container)
        target.add(name, target.factory(fn), tags)
        return fn
    return decorator


def Parameter(name: str, tags: Optional[Sequence[str]] = None, container: Optional[Container] = None):
    """Register the decorated object itself; get() hands it back uncalled."""
    def decorator(obj: Any):
        target = _target(container)
        target.add(name, target.parameter(obj), tags)
        return obj
    return decorator


def Inject(name: str, container: Optional[Container] = None) -> Any:
    """Resolve a dependency by name."""
    return _target(container).get(name)
