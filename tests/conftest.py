from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


THEME = Path("web/themes/custom/fruition_theme")

MANIFEST = {
    "name": "fruition/drupal-skeleton",
    "description": "Project template for Drupal 9 sites.",
    "type": "project",
    "repositories": {
        "drupal": {"type": "composer", "url": "https://packages.drupal.org/8"},
        "design": {"type": "vcs", "url": "https://git.example/skeleton/design-skeleton"},
    },
    "require": {
        "php": "^8.1",
        "drupal/core-recommended": "^9.5",
        "skeleton/design-skeleton": "dev-main",
    },
    "extra": {"installer-paths": {"web/core": ["type:drupal-core"]}},
}

FAVICON = b"\x00\x00\x01\x00\xff\xfe fruition Fruition"

SITE_CONFIG = """\
uuid: 00000000-0000-0000-0000-000000000000
name: Skeleton
mail: admin@example.com
page:
  403: ''
  404: ''
  front: /node
langcode: en
"""


@pytest.fixture()
def project_root(tmp_path: Path) -> Path:
    """A copy of the skeleton project as Composer leaves it after create-project."""

    root = tmp_path / "site"
    (root / "vendor").mkdir(parents=True)

    (root / "composer.json").write_text(json.dumps(MANIFEST, indent=4) + "\n", encoding="utf-8")
    (root / ".gitlab-ci.yml").write_text(
        "# Pipeline for {{fruname}}\nvariables:\n  FRU_NAME: {{fruname}}\n", encoding="utf-8"
    )
    (root / ".ddev").mkdir()
    (root / ".ddev" / "config.yaml").write_text(
        "# DDEV config\nname: skeleton\ntype: drupal9\n", encoding="utf-8"
    )

    sync = root / "config" / "drupal" / "sync"
    sync.mkdir(parents=True)
    (sync / "system.site.yml").write_text(SITE_CONFIG, encoding="utf-8")

    theme = root / THEME
    schema = theme / "config" / "schema"
    schema.mkdir(parents=True)
    (theme / "fruition.info.yml").write_text(
        "name: Fruition\ntype: theme\nlibraries:\n  - fruition/global\n", encoding="utf-8"
    )
    (theme / "fruition.libraries.yml").write_text(
        "global:\n  css:\n    theme:\n      dist/fruition.css: {}\n", encoding="utf-8"
    )
    (theme / "fruition.theme").write_text(
        "<?php\n\nfunction fruition_preprocess_html(&$variables) {}\n", encoding="utf-8"
    )
    (theme / "logo.svg").write_bytes(b"<svg><title>fruition</title></svg>")
    (theme / "screenshot.PNG").write_bytes(b"\x89PNG fruition")
    (theme / "favicon.ico").write_bytes(FAVICON)
    (schema / "fruition.schema.yml").write_text(
        "fruition.settings:\n  type: config_object\n  label: 'Fruition settings'\n",
        encoding="utf-8",
    )
    return root
