from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import PaymentType
from ..core.exceptions import ValidationError
from .strategies.base import SalaryStrategy
from .strategies.basic_strategy import BasicSalaryStrategy
from .strategies.bonus_strategy import BonusSalaryStrategy


@dataclass
class SalaryStrategyFactory:
    """Factory Pattern: choose the salary strategy for a payment type."""

    def for_payment_type(self, payment_type: PaymentType, *, bonus_percentage: Optional[float] = None) -> SalaryStrategy:
        if payment_type == PaymentType.BASIC:
            return BasicSalaryStrategy()

        if payment_type == PaymentType.BONUS:
            if bonus_percentage is None:
                raise ValidationError("bonus percentage is required", code="bonus_required")
            return BonusSalaryStrategy(bonus_percentage)

        raise ValidationError(f"unknown payment type: {payment_type!r}", code="invalid_payment_type")
