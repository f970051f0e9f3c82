"""Interactive terminal adapter."""

from __future__ import annotations

import re
import sys
from typing import Callable, Iterable, TextIO

from ..interfaces import ConsoleIO, as_lines, parse_confirmation

_TAG_PATTERN = re.compile(r"<(?P<closing>/?)(?P<style>info|comment|warning|error)>")
_ANSI_STYLES = {
    "info": "\033[32m",
    "comment": "\033[33m",
    "warning": "\033[30;43m",
    "error": "\033[37;41m",
}
_ANSI_RESET = "\033[0m"


def render_tags(message: str, *, colour: bool) -> str:
    """Replace style tags with ANSI sequences, or drop them when ``colour`` is off."""

    def substitute(match: re.Match[str]) -> str:
        if not colour:
            return ""
        if match.group("closing"):
            return _ANSI_RESET
        return _ANSI_STYLES[match.group("style")]

    return _TAG_PATTERN.sub(substitute, message)


class TerminalIO(ConsoleIO):
    """Read answers from stdin and write messages to stdout/stderr."""

    def __init__(
        self,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
        input_func: Callable[[str], str] = input,
    ) -> None:
        self._stdout = stdout or sys.stdout
        self._stderr = stderr or sys.stderr
        self._input = input_func

    def _colour(self, stream: TextIO) -> bool:
        isatty = getattr(stream, "isatty", None)
        return bool(isatty and isatty())

    def _emit(self, stream: TextIO, messages: str | Iterable[str]) -> None:
        colour = self._colour(stream)
        for line in as_lines(messages):
            stream.write(render_tags(line, colour=colour) + "\n")
        stream.flush()

    def _read_answer(self, question: str) -> str:
        prompt = render_tags(question, colour=self._colour(self._stdout))
        try:
            return self._input(prompt)
        except EOFError:
            # Closed or non-interactive stdin answers with the default.
            self._stdout.write("\n")
            return ""

    def ask(self, question: str, default: str) -> str:
        answer = self._read_answer(question).strip()
        return answer or default

    def ask_confirmation(self, question: str, default: bool = True) -> bool:
        while True:
            result = parse_confirmation(self._read_answer(question), default)
            if result is not None:
                return result
            self._emit(self._stderr, "<error>Please answer yes or no.</error>")

    def write(self, messages: str | Iterable[str]) -> None:
        self._emit(self._stdout, messages)

    def write_error(self, messages: str | Iterable[str]) -> None:
        self._emit(self._stderr, messages)


__all__ = ["TerminalIO", "render_tags"]
