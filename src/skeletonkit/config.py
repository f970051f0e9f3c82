"""Configuration shared by the lifecycle hooks and the CLI."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import PurePosixPath

from .naming import (
    default_design_system_name,
    default_design_system_url,
    default_package_name,
    tool_name_from_label,
)

__all__ = ["DEFAULT_LAYOUT", "ProjectIdentity", "SkeletonLayout", "TokenFile"]


@dataclass(frozen=True, slots=True)
class TokenFile:
    """A project file holding a placeholder replaced by the tool name."""

    path: PurePosixPath
    token: str = "{{fruname}}"


@dataclass(frozen=True, slots=True)
class SkeletonLayout:
    """Fixed locations and markers of the skeleton project.

    Attributes
    ----------
    site_config:
        Drupal ``system.site`` export that receives a fresh uuid. Drupal is not
        bootstrapped when the hook runs, so the path is known up front.
    manifest:
        The Composer manifest rewritten by the customizer.
    token_files:
        Files rewritten by literal token replacement, in order. DDEV rejects
        ``{{fruname}}`` in its config file, so that file uses ``skeleton``.
    theme_dir:
        The custom theme shipped with the skeleton. Its name and files carry
        :attr:`marker`.
    marker:
        Lowercase codename used in theme identifiers. The capitalised form is
        used in human readable labels.
    removed_dependency:
        Placeholder design system package dropped from ``require``.
    """

    site_config: PurePosixPath = PurePosixPath("config/drupal/sync/system.site.yml")
    manifest: PurePosixPath = PurePosixPath("composer.json")
    token_files: tuple[TokenFile, ...] = field(
        default_factory=lambda: (
            TokenFile(PurePosixPath(".gitlab-ci.yml")),
            TokenFile(PurePosixPath(".ddev/config.yaml"), token="skeleton"),
        )
    )
    theme_dir: PurePosixPath = PurePosixPath("web/themes/custom/fruition_theme")
    schema_subdir: PurePosixPath = PurePosixPath("config/schema")
    marker: str = "fruition"
    image_extensions: frozenset[str] = frozenset({".png", ".svg", ".jpg", ".jpeg"})
    removed_dependency: str = "skeleton/design-skeleton"
    dependency_constraint: str = "dev-main"
    git_host: str = "https://git.example"
    default_label: str = "MyDrupal Project"

    @property
    def label_marker(self) -> str:
        return self.marker.capitalize()


DEFAULT_LAYOUT = SkeletonLayout()


@dataclass(frozen=True, slots=True)
class ProjectIdentity:
    """Names chosen by the operator for a new project.

    Attributes
    ----------
    label:
        Human readable project name, such as ``Acme Corp``.
    tool_name:
        Name used by the Fru tools, such as ``acme-corp``.
    package_name:
        Composer package name, normally ``<tool>/<tool>-drupal``.
    design_system_name:
        Composer package name of the project's design system.
    design_system_url:
        Repository URL for the design system package.
    """

    label: str
    tool_name: str
    package_name: str
    design_system_name: str
    design_system_url: str

    @classmethod
    def from_label(
        cls,
        label: str,
        *,
        tool_name: str | None = None,
        package_name: str | None = None,
        design_system_name: str | None = None,
        design_system_url: str | None = None,
        layout: SkeletonLayout = DEFAULT_LAYOUT,
    ) -> "ProjectIdentity":
        """Build an identity from ``label``, deriving every value not given."""

        if not label.strip():
            raise ValueError("project label must not be empty")

        tool = tool_name or tool_name_from_label(label)
        ds_name = design_system_name or default_design_system_name(tool)
        return cls(
            label=label,
            tool_name=tool,
            package_name=package_name or default_package_name(tool),
            design_system_name=ds_name,
            design_system_url=design_system_url
            or default_design_system_url(ds_name, host=layout.git_host),
        )

    def summary_lines(self) -> list[str]:
        """Return the lines shown to the operator before confirmation."""

        return [
            f"Project name: <warning>{self.label}</warning>",
            f"Name for Fru tools: <warning>{self.tool_name}</warning>",
            f"Name for composer.json: <warning>{self.package_name}</warning>",
            f"Name for design system: <warning>{self.design_system_name}</warning>",
            f"URL for design system: <warning>{self.design_system_url}</warning>",
        ]
