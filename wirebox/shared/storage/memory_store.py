# wirebox/shared/storage/memory_store.py
from typing import Any, Dict, Iterator, List

from wirebox.shared.errors import InvalidArgumentError, NotFoundError


class MemoryStore:
    """
    Minimal name -> value store.
    A container holds two of these: one for registrations, one for resolved instances.
    """

    def __init__(self):
        self._objects: Dict[str, Any] = {}

    def add(self, name: str, value: Any) -> None:
        if not isinstance(name, str):
            raise InvalidArgumentError("name must be a string.", code="name-not-string")
        if value is None:
            raise InvalidArgumentError("value is required.", code="dependency-undefined")
        self._objects[name] = value

    def get(self, name: str) -> Any:
        if self.does_not_exist(name):
            raise NotFoundError(name)
        return self._objects[name]

    def remove(self, name: str) -> None:
        if self.does_not_exist(name):
            raise NotFoundError(name)
        del self._objects[name]

    def exists(self, name: str) -> bool:
        return name in self._objects

    def does_not_exist(self, name: str) -> bool:
        return not self.exists(name)

    def names(self) -> List[str]:
        return list(self._objects.keys())

    def clear(self) -> None:
        self._objects.clear()

    def __contains__(self, name: object) -> bool:
        return name in self._objects

    def __len__(self) -> int:
        return len(self._objects)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._objects))
