"""File rewriting helpers used while customizing a new project."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from .config import DEFAULT_LAYOUT, SkeletonLayout
from .errors import ManifestError, ResidualFilesError
from .naming import machine_name

__all__ = ["replace_token", "update_manifest", "update_theme_files"]


LOGGER = logging.getLogger(__name__)

DEFAULT_TOKEN = "{{fruname}}"


def _read_text(path: Path) -> str:
    with path.open("r", encoding="utf-8", newline="") as handle:
        return handle.read()


def _write_text(path: Path, text: str) -> None:
    with path.open("w", encoding="utf-8", newline="") as handle:
        handle.write(text)


def _section(document: dict[str, Any], *keys: str) -> dict[str, Any]:
    value: Any = document
    for depth, key in enumerate(keys, start=1):
        if not isinstance(value, dict) or not isinstance(value.get(key), dict):
            dotted = ".".join(keys[:depth])
            raise ManifestError(f"composer.json has no '{dotted}' object")
        value = value[key]
    return value


def update_manifest(
    manifest_path: str | Path,
    package_name: str,
    label: str,
    design_system_name: str,
    design_system_url: str,
    *,
    layout: SkeletonLayout = DEFAULT_LAYOUT,
) -> dict[str, Any]:
    """Point ``composer.json`` at the new project and its design system.

    The lock file is refreshed afterwards by Composer's own
    ``post-create-project-cmd`` chain, not here.

    Parameters
    ----------
    manifest_path:
        Full path to ``composer.json``.
    package_name:
        Composer name of the project, such as ``acme/acme-drupal``.
    label:
        Human readable project label used in the description.
    design_system_name:
        Package name of the design system, added to ``require``.
    design_system_url:
        Repository URL stored under ``repositories.design.url``.
    """

    manifest_path = Path(manifest_path)
    document = json.loads(_read_text(manifest_path))
    if not isinstance(document, dict):
        raise ManifestError(f"{manifest_path} does not contain a JSON object")

    design = _section(document, "repositories", "design")
    require = _section(document, "require")

    document["name"] = package_name
    document["description"] = f"{label} site using Drupal 9."
    design["url"] = design_system_url
    if require.pop(layout.removed_dependency, None) is None:
        LOGGER.debug("%s did not require %s", manifest_path, layout.removed_dependency)
    require[design_system_name] = layout.dependency_constraint

    _write_text(manifest_path, json.dumps(document, indent=4, ensure_ascii=False) + "\n")
    LOGGER.debug("Rewrote %s for package %s", manifest_path, package_name)
    return document


def replace_token(path: str | Path, replacement: str, token: str = DEFAULT_TOKEN) -> int:
    """Replace every literal ``token`` in ``path`` with ``replacement``.

    The file is never parsed as YAML, which would drop its comments. Returns
    the number of occurrences replaced.
    """

    if not token:
        raise ValueError("token must not be empty")

    path = Path(path)
    text = _read_text(path)
    count = text.count(token)
    if count:
        _write_text(path, text.replace(token, replacement))
    LOGGER.debug("Replaced %d occurrence(s) of %r in %s", count, token, path)
    return count


def _theme_files(directory: Path) -> list[Path]:
    return sorted(entry for entry in directory.iterdir() if entry.is_file())


def _remove_empty_directory(directory: Path) -> None:
    leftovers = list(directory.iterdir())
    if leftovers:
        raise ResidualFilesError(directory, leftovers)
    directory.rmdir()


def update_theme_files(
    project_root: str | Path,
    tool_name: str,
    label: str,
    *,
    layout: SkeletonLayout = DEFAULT_LAYOUT,
) -> list[Path]:
    """Rename the skeleton theme after the project.

    Every non-image file directly inside the theme directory and its schema
    directory has the lowercase marker replaced by the machine name and the
    capitalised marker replaced by ``label``. Contents are rewritten as raw
    bytes, so files in any encoding survive. All of those files, images
    included, are then moved to paths with the marker replaced, and the old
    directories are removed. Leftover entries raise
    :class:`~skeletonkit.errors.ResidualFilesError`. Nothing is rolled back
    on failure.
    """

    root = Path(project_root)
    name = machine_name(tool_name)
    if name == layout.marker:
        raise ValueError(f"tool name '{tool_name}' would keep the theme name unchanged")

    theme_dir = root / layout.theme_dir
    schema_dir = theme_dir / layout.schema_subdir

    def destination(path: Path) -> Path:
        relative = path.relative_to(root).as_posix()
        return root / relative.replace(layout.marker, name)

    destination(schema_dir).mkdir(mode=0o777, parents=True, exist_ok=True)

    # Captured before any rename so moved files are never revisited.
    files = _theme_files(theme_dir) + _theme_files(schema_dir)
    renamed: list[Path] = []
    for path in files:
        if path.suffix.lower() not in layout.image_extensions:
            content = path.read_bytes()
            content = content.replace(layout.marker.encode(), name.encode())
            content = content.replace(layout.label_marker.encode(), label.encode())
            path.write_bytes(content)
        target = destination(path)
        path.rename(target)
        renamed.append(target)
        LOGGER.debug("Moved %s to %s", path, target)

    for directory in (schema_dir, schema_dir.parent, theme_dir):
        _remove_empty_directory(directory)

    LOGGER.info("Renamed %d theme file(s) to %s", len(renamed), destination(theme_dir))
    return renamed
