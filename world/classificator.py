"""Classification taxonomy seam.

Tag ids are opaque integers owned by the map taxonomy. The speed model only
needs to translate them to paths, so any taxonomy that implements
``Classificator`` can be plugged in.
"""

import threading
from collections.abc import Iterable, Sequence
from typing import Protocol

from core.types import PATH_SEPARATOR, TagID, TagPath, path_from_name


class Classificator(Protocol):
    """Protocol for mapping between classification tag ids and paths."""

    def get_type_by_path(self, path: Sequence[str]) -> TagID:
        """Return the tag id for a classification path."""
        ...

    def get_path(self, tag: TagID) -> TagPath | None:
        """Return the path for a tag id, or None if the id is unknown."""
        ...


class InMemoryClassificator:
    """Classificator that assigns sequential ids to paths as they are first seen.

    Ids are stable for the lifetime of the instance. Registration is guarded by
    a lock; lookups are plain dict reads.
    """

    def __init__(self, paths: Iterable[Sequence[str]] = ()) -> None:
        self._ids: dict[TagPath, TagID] = {}
        self._paths: dict[TagID, TagPath] = {}
        self._lock = threading.Lock()
        for path in paths:
            self.get_type_by_path(path)

    def get_type_by_path(self, path: Sequence[str]) -> TagID:
        key = tuple(path)
        if not key:
            raise ValueError("Classification path must not be empty")
        existing = self._ids.get(key)
        if existing is not None:
            return existing
        with self._lock:
            if key not in self._ids:
                tag = TagID(len(self._ids) + 1)
                self._ids[key] = tag
                self._paths[tag] = key
            return self._ids[key]

    def get_type_by_name(self, name: str) -> TagID:
        """Tag id for a readable name such as "highway-secondary-bridge"."""
        return self.get_type_by_path(path_from_name(name))

    def get_path(self, tag: TagID) -> TagPath | None:
        return self._paths.get(tag)

    def get_readable_name(self, tag: TagID) -> str | None:
        path = self._paths.get(tag)
        return PATH_SEPARATOR.join(path) if path is not None else None

    def __len__(self) -> int:
        return len(self._ids)
