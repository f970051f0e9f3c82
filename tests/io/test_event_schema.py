from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from skeletonkit.io.adapters import BufferedIO
from skeletonkit.io.schema import (
    InstallOperation,
    Package,
    PackageEvent,
    ScriptEvent,
    UninstallOperation,
    UpdateOperation,
)


def test_script_event_project_root_is_vendor_parent(tmp_path: Path):
    event = ScriptEvent(vendor_dir=tmp_path / "vendor", io=BufferedIO())
    assert event.project_root == tmp_path


def test_script_event_requires_console_io(tmp_path: Path):
    with pytest.raises(ValidationError):
        ScriptEvent(vendor_dir=tmp_path / "vendor", io=object())


def test_operation_descriptions():
    package = Package(name="drupal/core", version="10.1.0")
    assert str(InstallOperation(package=package)) == "Installing drupal/core (10.1.0)"
    assert str(UninstallOperation(package=package)) == "Removing drupal/core (10.1.0)"
    update = UpdateOperation(
        initial_package=Package(name="drupal/core", version="10.0.0"),
        target_package=package,
    )
    assert str(update) == "Upgrading drupal/core (10.0.0 => 10.1.0)"


def test_package_event_keeps_operation_type():
    operation = UninstallOperation(package=Package(name="drupal/token", version="1.0"))
    event = PackageEvent(operation=operation, io=BufferedIO())
    assert isinstance(event.operation, UninstallOperation)


def test_models_are_frozen_and_strict():
    package = Package(name="drupal/core", version="10.1.0")
    with pytest.raises(ValidationError):
        package.name = "other"  # type: ignore[misc]
    with pytest.raises(ValidationError):
        Package(name="drupal/core", version="1", extra="nope")
