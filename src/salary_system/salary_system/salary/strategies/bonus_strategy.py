from __future__ import annotations

import math

from ...core.constants import MAX_BONUS_PERCENTAGE, MIN_BONUS_PERCENTAGE
from ...core.exceptions import BonusRangeError
from .base import SalaryStrategy


class BonusSalaryStrategy(SalaryStrategy):
    """Base pay plus a percentage bonus: base * (1 + p / 100)."""

    label = "bonus"

    def __init__(self, bonus_percentage: float):
        bonus_percentage = float(bonus_percentage)
        if (
            not math.isfinite(bonus_percentage)
            or bonus_percentage < MIN_BONUS_PERCENTAGE
            or bonus_percentage > MAX_BONUS_PERCENTAGE
        ):
            raise BonusRangeError(bonus_percentage, MIN_BONUS_PERCENTAGE, MAX_BONUS_PERCENTAGE)
        self._bonus_percentage = bonus_percentage

    @property
    def bonus_percentage(self) -> float:
        return self._bonus_percentage

    def calculate(self, base_amount: float) -> float:
        return base_amount * (1 + self._bonus_percentage / 100.0)
