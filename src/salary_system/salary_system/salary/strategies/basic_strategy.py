from __future__ import annotations

from .base import SalaryStrategy


class BasicSalaryStrategy(SalaryStrategy):
    """Base pay, no bonus."""

    label = "basic"

    def calculate(self, base_amount: float) -> float:
        return base_amount
