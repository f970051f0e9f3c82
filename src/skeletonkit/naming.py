"""Identifier derivation used by the project customizer."""

from __future__ import annotations

__all__ = [
    "default_design_system_name",
    "default_design_system_url",
    "default_package_name",
    "machine_name",
    "tool_name_from_label",
]


def tool_name_from_label(label: str) -> str:
    """Return the Fru tools name for ``label``.

    Only lowercasing and space replacement are applied; any other character is
    kept as typed, matching the names already registered with the tooling.
    """

    return label.lower().replace(" ", "-")


def machine_name(tool_name: str) -> str:
    """Return ``tool_name`` as a Drupal machine name (hyphens become underscores)."""

    return tool_name.replace("-", "_")


def default_package_name(tool_name: str) -> str:
    return f"{tool_name}/{tool_name}-drupal"


def default_design_system_name(tool_name: str) -> str:
    return f"{tool_name}/{tool_name}-design"


def default_design_system_url(design_system_name: str, *, host: str) -> str:
    return f"{host.rstrip('/')}/{design_system_name}"
