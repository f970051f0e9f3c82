"""Interactive customization of a freshly created project."""

from __future__ import annotations

import logging
from dataclasses import replace
from pathlib import Path

from .config import DEFAULT_LAYOUT, ProjectIdentity, SkeletonLayout
from .io.interfaces import ConsoleIO
from .io.schema import ScriptEvent
from .rewrite import replace_token, update_manifest, update_theme_files

__all__ = [
    "ABORT_MESSAGE",
    "apply_identity",
    "collect_identity",
    "confirm_identity",
    "interactive_configuration",
]


LOGGER = logging.getLogger(__name__)

ABORT_MESSAGE = (
    "<error>Aborted. To try again, run 'composer create-project' "
    "from the project directory.</error>"
)


def collect_identity(io: ConsoleIO, layout: SkeletonLayout = DEFAULT_LAYOUT) -> ProjectIdentity:
    """Ask the operator for the project names, each defaulting from the last."""

    label = layout.default_label
    label = io.ask(f"Project name [{label}]: ", label)
    draft = ProjectIdentity.from_label(label, layout=layout)
    tool_name = io.ask(f"Name for Fru tools [{draft.tool_name}]: ", draft.tool_name)
    draft = ProjectIdentity.from_label(label, tool_name=tool_name, layout=layout)
    package_name = io.ask(
        "Name for composer.json (should match GitLab namespaced name) "
        f"[{draft.package_name}]: ",
        draft.package_name,
    )
    ds_name = io.ask(
        f"Name for the project's design system [{draft.design_system_name}]: ",
        draft.design_system_name,
    )
    draft = ProjectIdentity.from_label(
        label,
        tool_name=tool_name,
        package_name=package_name,
        design_system_name=ds_name,
        layout=layout,
    )
    ds_url = io.ask(
        f"URL for the project's design system [{draft.design_system_url}]: ",
        draft.design_system_url,
    )
    return replace(draft, design_system_url=ds_url)


def confirm_identity(io: ConsoleIO, identity: ProjectIdentity) -> bool:
    io.write(["", "You have entered:", *identity.summary_lines()])
    return io.ask_confirmation("Is this correct (yes/no)? ")


def apply_identity(
    project_root: str | Path,
    identity: ProjectIdentity,
    layout: SkeletonLayout = DEFAULT_LAYOUT,
) -> None:
    """Rewrite the manifest, token files and theme for ``identity``."""

    root = Path(project_root)
    update_manifest(
        root / layout.manifest,
        identity.package_name,
        identity.label,
        identity.design_system_name,
        identity.design_system_url,
        layout=layout,
    )
    for token_file in layout.token_files:
        replace_token(root / token_file.path, identity.tool_name, token_file.token)
    update_theme_files(root, identity.tool_name, identity.label, layout=layout)


def interactive_configuration(
    event: ScriptEvent, layout: SkeletonLayout = DEFAULT_LAYOUT
) -> bool:
    """Run the customization wizard.

    Returns ``False`` without touching any file when the operator rejects the
    entered values.
    """

    io = event.io
    identity = collect_identity(io, layout)
    if not confirm_identity(io, identity):
        io.write_error(ABORT_MESSAGE)
        LOGGER.info("Customization rejected by the operator")
        return False

    apply_identity(event.project_root, identity, layout)
    LOGGER.info("Customized %s as %s", event.project_root, identity.package_name)
    return True
