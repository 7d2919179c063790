from __future__ import annotations

from typing import Callable, Optional, TextIO, TypeVar

from ..common.parsing import parse_float, parse_int

T = TypeVar("T")


class EndOfInput(Exception):
    """Raised when the input stream is exhausted while waiting for a line."""


class Prompter:
    """Line-oriented prompts over text streams.

    Malformed input is never raised: the prompt is repeated until the line
    parses. Only running out of input stops the loop.
    """

    def __init__(self, stdin: TextIO, stdout: TextIO, stderr: TextIO):
        self._stdin = stdin
        self._stdout = stdout
        self._stderr = stderr

    def read_line(self, prompt: str) -> str:
        self._stdout.write(prompt)
        self._stdout.flush()
        line = self._stdin.readline()
        if not line:
            raise EndOfInput()
        return line.rstrip("\r\n")

    def _read_until(self, prompt: str, parse: Callable[[str], Optional[T]], retry_message: str) -> T:
        while True:
            value = parse(self.read_line(prompt))
            if value is not None:
                return value
            print(retry_message, file=self._stderr)

    def read_text(self, prompt: str, retry_message: str) -> str:
        return self._read_until(prompt, lambda s: s if s.strip() else None, retry_message)

    def read_float(self, prompt: str, retry_message: str) -> float:
        return self._read_until(prompt, parse_float, retry_message)

    def read_int(self, prompt: str, retry_message: str) -> int:
        return self._read_until(prompt, parse_int, retry_message)
