"""Concrete :class:`~skeletonkit.io.interfaces.ConsoleIO` implementations."""

from .buffered import BufferedIO
from .terminal import TerminalIO

__all__ = ["BufferedIO", "TerminalIO"]
