from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

from ..core.constants import MAX_SALARY
from ..core.enums import MenuChoice, PaymentType, ShellState
from ..core.exceptions import EmptyCollectionError, ValidationError
from ..i18n.messages import Messages
from ..salary.factory import SalaryStrategyFactory
from ..works.model import build_work_entry
from ..works.service import WorkRegistry
from .prompts import EndOfInput, Prompter

logger = logging.getLogger(__name__)


class InteractiveShell:
    """Menu loop over a :class:`WorkRegistry`.

    The registry and the three streams are injected, so a test can drive a
    whole session with ``io.StringIO`` and a fresh registry.
    """

    def __init__(
        self,
        registry: WorkRegistry,
        messages: Messages,
        *,
        strategy_factory: Optional[SalaryStrategyFactory] = None,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
    ):
        self._registry = registry
        self._messages = messages
        self._factory = strategy_factory or SalaryStrategyFactory()
        self._out = stdout or sys.stdout
        self._err = stderr or sys.stderr
        self._prompter = Prompter(stdin or sys.stdin, self._out, self._err)
        self.state = ShellState.MENU_DISPLAY

    def _say(self, text: str) -> None:
        print(text, file=self._out)

    def _warn(self, text: str) -> None:
        print(text, file=self._err)

    def _transition(self, state: ShellState) -> None:
        logger.debug("shell state %s -> %s", self.state.value, state.value)
        self.state = state

    def greet(self) -> None:
        self._say(self._messages.welcome)
        self._say(self._messages.ceiling_notice.format(ceiling=self._messages.money(MAX_SALARY)))

    def run(self) -> None:
        self.greet()
        try:
            while self.state != ShellState.TERMINATED:
                self.step()
        except EndOfInput:
            logger.info("input closed, leaving the shell")
            self._transition(ShellState.TERMINATED)

    def step(self) -> None:
        """Show the menu, read one choice and act on it."""
        self._show_menu()
        self._transition(ShellState.AWAITING_CHOICE)
        choice = self._prompter.read_text(self._messages.prompt_choice, self._messages.retry_non_empty)
        self.dispatch(choice)

    def dispatch(self, choice: str) -> None:
        choice = choice.strip().lower()

        if choice == MenuChoice.ADD_WORK.value:
            self._transition(ShellState.ADDING_WORK)
            self.add_work()
        elif choice == MenuChoice.AVERAGE.value:
            self.show_average()
        elif choice == MenuChoice.LIST_ALL.value:
            self.show_all()
        elif choice == MenuChoice.EXIT.value:
            self._say(self._messages.farewell)
            self._transition(ShellState.TERMINATED)
            return
        else:
            self._warn(self._messages.invalid_choice)

        self._transition(ShellState.MENU_DISPLAY)

    def _show_menu(self) -> None:
        for line in self._messages.menu:
            self._say(line)

    def add_work(self) -> None:
        m = self._messages
        name = self._prompter.read_text(m.prompt_name, m.retry_non_empty)
        base_amount = self._prompter.read_float(m.prompt_base_amount, m.retry_number)

        self._say(m.payment_type_header)
        for line in m.payment_type_options:
            self._say(line)
        selector = self._prompter.read_int(m.prompt_payment_type, m.retry_integer)

        try:
            payment_type = PaymentType(selector)
        except ValueError:
            self._warn(m.invalid_payment_type)
            return

        bonus_percentage = None
        if payment_type == PaymentType.BONUS:
            bonus_percentage = self._prompter.read_float(m.prompt_bonus, m.retry_number)

        try:
            strategy = self._factory.for_payment_type(payment_type, bonus_percentage=bonus_percentage)
        except ValidationError as exc:
            self._reject(exc)
            return

        result = build_work_entry(name, base_amount, strategy)
        if not result.ok:
            self._reject(result.error)
            return

        self._registry.add(result.entry)
        template = m.bonus_work_added if payment_type == PaymentType.BONUS else m.work_added
        self._say(template.format(name=result.entry.name))

    def _reject(self, exc: ValidationError) -> None:
        logger.info("work entry rejected: %s", exc)
        self._warn(self._messages.error_prefix + self._messages.render_error(exc) + "\n")

    def show_average(self) -> None:
        try:
            average = self._registry.average_salary()
        except EmptyCollectionError as exc:
            self._warn(self._messages.warning_prefix + self._messages.render_error(exc) + "\n")
            return
        self._say(self._messages.average_result.format(average=self._messages.money(average)))

    def show_all(self) -> None:
        listing = self._registry.list_all(self._messages.format_work)
        if listing.is_empty:
            self._say(self._messages.list_empty)
            return
        self._say(self._messages.list_header)
        for line in listing.lines:
            self._say(line)
