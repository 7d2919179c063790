from __future__ import annotations

from abc import ABC, abstractmethod


class SalaryStrategy(ABC):
    """Strategy Pattern: encapsulate how a base amount becomes a final salary."""

    label: str = "salary"

    @abstractmethod
    def calculate(self, base_amount: float) -> float:
        raise NotImplementedError
