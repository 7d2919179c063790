from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, TextIO

from .cli.shell import InteractiveShell
from .i18n.messages import Messages, get_messages
from .salary.factory import SalaryStrategyFactory
from .works.memory_work_repository import InMemoryWorkRepository
from .works.service import WorkRegistry


@dataclass(frozen=True)
class Container:
    works_repo: InMemoryWorkRepository
    registry: WorkRegistry
    strategy_factory: SalaryStrategyFactory
    messages: Messages

    def build_shell(
        self,
        *,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
    ) -> InteractiveShell:
        return InteractiveShell(
            self.registry,
            self.messages,
            strategy_factory=self.strategy_factory,
            stdin=stdin,
            stdout=stdout,
            stderr=stderr,
        )


def build_container(*, language: str = "ru") -> Container:
    works_repo = InMemoryWorkRepository()
    registry = WorkRegistry(works_repo)

    return Container(
        works_repo=works_repo,
        registry=registry,
        strategy_factory=SalaryStrategyFactory(),
        messages=get_messages(language),
    )
