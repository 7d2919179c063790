from __future__ import annotations

from typing import Protocol, Sequence

from .model import WorkEntry


class WorkRepository(Protocol):
    """Storage interface for work entries.

    Note (DIP): the registry depends on this interface, not on a concrete store.
    """

    def append(self, entry: WorkEntry) -> int:
        raise NotImplementedError

    def list_all(self) -> Sequence[WorkEntry]:
        raise NotImplementedError

    def count(self) -> int:
        raise NotImplementedError
