"""Event payloads delivered to the lifecycle hooks."""

from __future__ import annotations

from pathlib import Path
from typing import Union

from pydantic import BaseModel, ConfigDict, Field

from .interfaces import ConsoleIO


class Package(BaseModel):
    """A Composer package at a given version."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(..., description="Vendor qualified package name, e.g. drupal/core.")
    version: str = Field(..., description="Pretty version string of the package.")

    def __str__(self) -> str:
        return f"{self.name} ({self.version})"


class InstallOperation(BaseModel):
    """A package being installed."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    package: Package

    def __str__(self) -> str:
        return f"Installing {self.package}"


class UninstallOperation(BaseModel):
    """A package being removed."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    package: Package

    def __str__(self) -> str:
        return f"Removing {self.package}"


class UpdateOperation(BaseModel):
    """A package moving from one version to another."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    initial_package: Package
    target_package: Package

    def __str__(self) -> str:
        return (
            f"Upgrading {self.initial_package.name} "
            f"({self.initial_package.version} => {self.target_package.version})"
        )


PackageOperation = Union[InstallOperation, UninstallOperation, UpdateOperation]


class ScriptEvent(BaseModel):
    """Project level event such as post-create-project-cmd."""

    model_config = ConfigDict(extra="forbid", frozen=True, arbitrary_types_allowed=True)

    vendor_dir: Path = Field(..., description="Composer vendor directory of the project.")
    io: ConsoleIO = Field(..., description="Operator I/O handle.")

    @property
    def project_root(self) -> Path:
        """The project root is the parent of the vendor directory."""

        return self.vendor_dir.parent


class PackageEvent(BaseModel):
    """Event raised after a package install, update or removal."""

    model_config = ConfigDict(extra="forbid", frozen=True, arbitrary_types_allowed=True)

    operation: PackageOperation
    io: ConsoleIO


__all__ = [
    "InstallOperation",
    "Package",
    "PackageEvent",
    "PackageOperation",
    "ScriptEvent",
    "UninstallOperation",
    "UpdateOperation",
]
