"""Scripted adapter for tests and non-interactive runs."""

from __future__ import annotations

from collections import deque
from typing import Iterable

from ..interfaces import ConsoleIO, as_lines, parse_confirmation


class BufferedIO(ConsoleIO):
    """Answer prompts from a queue and capture everything written.

    An exhausted queue answers every question with its default, which makes
    the adapter usable for unattended project creation.
    """

    def __init__(self, answers: Iterable[str] | None = None):
        self._answers: deque[str] = deque(answers or [])
        self.questions: list[str] = []
        self.output: list[str] = []
        self.errors: list[str] = []

    def _next_answer(self, question: str) -> str:
        self.questions.append(question)
        if self._answers:
            return self._answers.popleft()
        return ""

    def ask(self, question: str, default: str) -> str:
        answer = self._next_answer(question).strip()
        return answer or default

    def ask_confirmation(self, question: str, default: bool = True) -> bool:
        answer = self._next_answer(question)
        result = parse_confirmation(answer, default)
        if result is None:
            raise ValueError(f"unrecognised confirmation answer {answer!r}")
        return result

    def write(self, messages: str | Iterable[str]) -> None:
        self.output.extend(as_lines(messages))

    def write_error(self, messages: str | Iterable[str]) -> None:
        self.errors.extend(as_lines(messages))


__all__ = ["BufferedIO"]
