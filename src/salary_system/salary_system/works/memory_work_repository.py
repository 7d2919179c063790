from __future__ import annotations

from typing import Sequence

from .model import WorkEntry
from .repository import WorkRepository


class InMemoryWorkRepository(WorkRepository):
    """Keeps entries for the lifetime of the process, in insertion order."""

    def __init__(self):
        self._entries: list[WorkEntry] = []

    def append(self, entry: WorkEntry) -> int:
        self._entries.append(entry)
        return len(self._entries)

    def list_all(self) -> Sequence[WorkEntry]:
        return tuple(self._entries)

    def count(self) -> int:
        return len(self._entries)
