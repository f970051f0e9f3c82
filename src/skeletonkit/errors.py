"""Custom exception types raised by the skeleton lifecycle hooks."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence


class SkeletonError(RuntimeError):
    """Base class for failures the hooks report to the operator."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class HookUsageError(SkeletonError):
    """Raised when a hook is wired to an event it does not support."""


class ManifestError(SkeletonError):
    """Raised when ``composer.json`` lacks a section the rewrite expects."""


class SiteConfigError(SkeletonError):
    """Raised when the site configuration file is not a YAML mapping."""


class ResidualFilesError(SkeletonError):
    """Raised when a directory expected to be empty still has entries."""

    def __init__(self, directory: Path, leftovers: Sequence[Path]) -> None:
        self.directory = directory
        self.leftovers = tuple(leftovers)
        names = ", ".join(sorted(entry.name for entry in self.leftovers))
        super().__init__(f"{directory} is not empty after the rewrite: {names}")


__all__ = [
    "HookUsageError",
    "ManifestError",
    "ResidualFilesError",
    "SiteConfigError",
    "SkeletonError",
]
