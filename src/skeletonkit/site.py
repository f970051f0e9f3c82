"""Site uuid generation for the exported Drupal configuration."""

from __future__ import annotations

import logging
import uuid
from pathlib import Path

import yaml

from .config import DEFAULT_LAYOUT, SkeletonLayout
from .errors import SiteConfigError
from .io.schema import ScriptEvent

__all__ = ["create_site_uuid", "write_site_uuid"]


LOGGER = logging.getLogger(__name__)


def write_site_uuid(config_file: str | Path) -> str:
    """Store a new random uuid in ``config_file`` and return it.

    The file is rewritten in block style with two space indentation, which is
    what Drupal's config importer produces and expects.
    """

    config_file = Path(config_file)
    data = yaml.safe_load(config_file.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise SiteConfigError(f"{config_file} does not contain a YAML mapping")

    site_uuid = str(uuid.uuid4())
    data["uuid"] = site_uuid
    config_file.write_text(
        yaml.safe_dump(
            data,
            indent=2,
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        ),
        encoding="utf-8",
    )
    LOGGER.debug("Wrote uuid %s to %s", site_uuid, config_file)
    return site_uuid


def create_site_uuid(event: ScriptEvent, layout: SkeletonLayout = DEFAULT_LAYOUT) -> str:
    """Give a freshly created project its own site uuid."""

    site_uuid = write_site_uuid(event.project_root / layout.site_config)
    LOGGER.info("Site uuid set to %s", site_uuid)
    return site_uuid
