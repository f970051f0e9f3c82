"""Abstract interface for operator interaction."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable


class ConsoleIO(ABC):
    """Prompt and message primitives used by the lifecycle hooks.

    Messages may carry Composer style ``<info>``, ``<comment>``, ``<warning>``
    and ``<error>`` tags; adapters decide how to render them.
    """

    @abstractmethod
    def ask(self, question: str, default: str) -> str:
        """Ask ``question`` and return the answer, or ``default`` when blank."""

    @abstractmethod
    def ask_confirmation(self, question: str, default: bool = True) -> bool:
        """Ask a yes/no ``question``."""

    @abstractmethod
    def write(self, messages: str | Iterable[str]) -> None:
        """Write one or more lines to the regular output."""

    @abstractmethod
    def write_error(self, messages: str | Iterable[str]) -> None:
        """Write one or more lines to the error output."""


def as_lines(messages: str | Iterable[str]) -> list[str]:
    if isinstance(messages, str):
        return [messages]
    return list(messages)


def parse_confirmation(answer: str, default: bool) -> bool | None:
    """Interpret a yes/no answer; ``None`` means it was not understood."""

    normalized = answer.strip().lower()
    if not normalized:
        return default
    if normalized in {"y", "yes"}:
        return True
    if normalized in {"n", "no"}:
        return False
    return None


__all__ = ["ConsoleIO", "as_lines", "parse_confirmation"]
