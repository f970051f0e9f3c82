"""Operator I/O and event payloads for the skeleton hooks."""

from .interfaces import ConsoleIO
from .schema import (
    InstallOperation,
    Package,
    PackageEvent,
    ScriptEvent,
    UninstallOperation,
    UpdateOperation,
)

__all__ = [
    "ConsoleIO",
    "InstallOperation",
    "Package",
    "PackageEvent",
    "ScriptEvent",
    "UninstallOperation",
    "UpdateOperation",
]
