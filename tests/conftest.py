from __future__ import annotations

import io
from dataclasses import dataclass

import pytest

from salary_system.cli.shell import InteractiveShell
from salary_system.i18n.messages import ENGLISH
from salary_system.works.service import WorkRegistry


@dataclass
class ShellRun:
    shell: InteractiveShell
    stdout: str
    stderr: str


@pytest.fixture
def registry() -> WorkRegistry:
    return WorkRegistry()


@pytest.fixture
def run_shell(registry):
    """Run a full session over the given input lines, English messages."""

    def _run(*lines: str, messages=ENGLISH) -> ShellRun:
        stdin = io.StringIO("".join(f"{line}\n" for line in lines))
        stdout = io.StringIO()
        stderr = io.StringIO()
        shell = InteractiveShell(registry, messages, stdin=stdin, stdout=stdout, stderr=stderr)
        shell.run()
        return ShellRun(shell=shell, stdout=stdout.getvalue(), stderr=stderr.getvalue())

    return _run
