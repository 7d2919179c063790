from __future__ import annotations

from enum import Enum


class PaymentType(int, Enum):
    """Payment type selected when a work type is registered."""

    BASIC = 1
    BONUS = 2


class MenuChoice(str, Enum):
    """Commands accepted by the interactive menu."""

    ADD_WORK = "1"
    AVERAGE = "2"
    LIST_ALL = "3"
    EXIT = "4"


class ShellState(str, Enum):
    MENU_DISPLAY = "MENU_DISPLAY"
    AWAITING_CHOICE = "AWAITING_CHOICE"
    ADDING_WORK = "ADDING_WORK"
    TERMINATED = "TERMINATED"
