from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from ..core.exceptions import EmptyCollectionError
from .memory_work_repository import InMemoryWorkRepository
from .model import WorkEntry
from .repository import WorkRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WorkListing:
    """Display lines for all entries; ``is_empty`` marks a registry with none."""

    lines: tuple[str, ...]

    @property
    def is_empty(self) -> bool:
        return not self.lines


class WorkRegistry:
    """Use case: register work types and query them."""

    def __init__(self, works: Optional[WorkRepository] = None):
        self._works = works if works is not None else InMemoryWorkRepository()

    def add(self, entry: WorkEntry) -> int:
        size = self._works.append(entry)
        logger.info("registered work %r (final salary %.2f), %d total", entry.name, entry.final_salary, size)
        return size

    def count(self) -> int:
        return self._works.count()

    def average_salary(self) -> float:
        entries = self._works.list_all()
        if not entries:
            raise EmptyCollectionError("no work types have been added")

        total = 0.0
        for entry in entries:
            total += entry.get_salary()
        return total / len(entries)

    def list_all(self, formatter: Optional[Callable[[WorkEntry], str]] = None) -> WorkListing:
        fmt = formatter or WorkEntry.describe
        lines = tuple(f"{i}. {fmt(entry)}" for i, entry in enumerate(self._works.list_all(), start=1))
        return WorkListing(lines=lines)
