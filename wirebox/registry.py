# wirebox/registry.py
from typing import Optional

from wirebox.config.logger import get_logger
from wirebox.config.settings import Settings
from wirebox.shared.container import Container
from wirebox.shared.storage.memory_store import MemoryStore
from wirebox.shared.tags.tag_index import TagIndex
from wirebox.shared.wrapper_factory import WrapperFactory

# Default container, created on first use
_container: Optional[Container] = None


def new_container(settings: Optional[Settings] = None) -> Container:
    """Return a new Container wired with fresh collaborators."""
    logger = get_logger(settings)
    settings = settings or Settings()
    return Container(
        MemoryStore(),
        MemoryStore(),
        TagIndex(),
        WrapperFactory(),
        logger=logger,
        thread_safe=settings.container.thread_safe,
        track_retrievals=settings.container.track_retrievals,
    )


def get_container() -> Container:
    """Get the process-wide default container."""
    global _container
    if _container is None:
        _container = new_container()
    return _container


def reset_container() -> None:
    """Discard the default container; the next get_container() builds a new one."""
    global _container
    _container = None
