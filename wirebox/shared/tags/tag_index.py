# wirebox/shared/tags/tag_index.py
from typing import Dict, List, Sequence

from wirebox.shared.errors import InvalidArgumentError


class TagIndex:
    """
    Two-way index between dependency names and tags.

    ``_tags_by_name`` keeps each name's tags in the order they were given.
    ``_names_by_tag`` keeps, per tag, the names carrying it (deduplicated,
    insertion ordered). A tag whose last name is removed disappears entirely.
    """

    def __init__(self):
        self._tags_by_name: Dict[str, List[str]] = {}
        self._names_by_tag: Dict[str, List[str]] = {}

    @staticmethod
    def validate(name: str, tags: Sequence[str]) -> None:
        """Raise InvalidArgumentError unless name is a str and tags a list of str."""
        if not isinstance(name, str):
            raise InvalidArgumentError("name must be a string.", code="name-not-string")
        if not isinstance(tags, (list, tuple)):
            raise InvalidArgumentError("Tags must be an array.", code="tags-not-array")
        for index, tag in enumerate(tags):
            if not isinstance(tag, str):
                raise InvalidArgumentError(
                    f"Tag defined at index {index} must be string value.",
                    code="tag-not-string",
                )

    def add(self, name: str, tags: Sequence[str]) -> None:
        self.validate(name, tags)
        # tags the name keeps hold their position; dropped tags lose the name
        for tag in set(self._tags_by_name.get(name, [])) - set(tags):
            self._unlink(name, tag)
        self._tags_by_name[name] = list(tags)
        for tag in tags:
            names = self._names_by_tag.setdefault(tag, [])
            if name not in names:
                names.append(name)

    def remove(self, name: str) -> None:
        for tag in self._tags_by_name.pop(name, []):
            self._unlink(name, tag)

    def _unlink(self, name: str, tag: str) -> None:
        names = self._names_by_tag.get(tag)
        if names is None:
            return
        if name in names:
            names.remove(name)
        if not names:
            del self._names_by_tag[tag]

    def find_by_tag(self, tag: str) -> List[str]:
        return list(self._names_by_tag.get(tag, []))

    def tags_for(self, name: str) -> List[str]:
        return list(self._tags_by_name.get(name, []))

    def all_tags(self) -> List[str]:
        return list(self._names_by_tag.keys())

    def __contains__(self, name: object) -> bool:
        return name in self._tags_by_name
