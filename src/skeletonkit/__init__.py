"""Composer lifecycle hooks for the Drupal skeleton project.

The package gives a newly created project its own site uuid, walks the
operator through naming the project (rewriting ``composer.json``, the CI and
DDEV config files and the bundled theme), and reminds developers to run
database updates and export config after Drupal packages change.
"""

from __future__ import annotations

from .config import DEFAULT_LAYOUT, ProjectIdentity, SkeletonLayout, TokenFile
from .customize import interactive_configuration
from .errors import (
    HookUsageError,
    ManifestError,
    ResidualFilesError,
    SiteConfigError,
    SkeletonError,
)
from .notify import post_package_operation
from .rewrite import replace_token, update_manifest, update_theme_files
from .site import create_site_uuid, write_site_uuid

__all__ = [
    "DEFAULT_LAYOUT",
    "HookUsageError",
    "ManifestError",
    "ProjectIdentity",
    "ResidualFilesError",
    "SiteConfigError",
    "SkeletonError",
    "SkeletonLayout",
    "TokenFile",
    "create_site_uuid",
    "interactive_configuration",
    "post_package_operation",
    "replace_token",
    "update_manifest",
    "update_theme_files",
    "write_site_uuid",
]

__version__ = "0.1.0"
