"""Workflow reminders printed after Drupal package operations."""

from __future__ import annotations

from typing import Any

from .errors import HookUsageError
from .io.schema import Package, PackageEvent

__all__ = ["WORKFLOW_NOTES", "post_package_operation", "resolve_package"]


PACKAGE_PREFIX = "drupal/"

WORKFLOW_NOTES = [
    "\tAfter installing, uninstalling or upgrading Drupal core/modules,",
    "\trun database updates & export config. Commit changes alongside the",
    "\tupdated composer.{lock,json} files.",
]


def resolve_package(operation: Any) -> Package:
    """Return the package an operation acts on.

    Install and uninstall operations expose ``package``; updates expose
    ``initial_package``.
    """

    if hasattr(operation, "package"):
        return operation.package
    if hasattr(operation, "initial_package"):
        return operation.initial_package
    raise HookUsageError(
        f"Invalid use of {__name__}.post_package_operation with "
        f"{type(operation).__name__}"
    )


def post_package_operation(event: PackageEvent) -> bool:
    """Remind developers to run updb and export config after Drupal changes."""

    package = resolve_package(event.operation)
    if not package.name.lower().startswith(PACKAGE_PREFIX):
        return False

    event.io.write(f"  - <info>{event.operation}. Drupal workflow notes:</info>")
    event.io.write(WORKFLOW_NOTES)
    return True
