from __future__ import annotations

import io as io_module
import json
from pathlib import Path

import pytest

from skeletonkit.cli import build_parser, main
from skeletonkit.io.adapters import BufferedIO, TerminalIO


def test_parser_requires_command():
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


def test_cli_site_uuid(project_root: Path):
    io = BufferedIO()
    exit_code = main(["site-uuid", "--vendor-dir", str(project_root / "vendor")], io=io)

    assert exit_code == 0
    assert io.output[0].startswith("Site uuid set to <info>")
    text = (project_root / "config/drupal/sync/system.site.yml").read_text(encoding="utf-8")
    assert "00000000-0000-0000-0000-000000000000" not in text


def test_cli_site_uuid_uses_composer_vendor_dir(project_root: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("COMPOSER_VENDOR_DIR", str(project_root / "vendor"))

    assert main(["site-uuid"], io=BufferedIO()) == 0


def test_cli_configure_no_interaction(project_root: Path):
    exit_code = main(
        ["configure", "--no-interaction", "--vendor-dir", str(project_root / "vendor")],
        io=BufferedIO(),
    )

    assert exit_code == 0
    manifest = json.loads((project_root / "composer.json").read_text(encoding="utf-8"))
    assert manifest["name"] == "mydrupal-project/mydrupal-project-drupal"
    assert (project_root / "web/themes/custom/mydrupal_project_theme").is_dir()


def test_cli_configure_rejected(project_root: Path):
    io = BufferedIO(["Acme", "", "", "", "", "n"])
    exit_code = main(["configure", "--vendor-dir", str(project_root / "vendor")], io=io)

    assert exit_code == 1
    assert io.errors[0].startswith("<error>Aborted.")


def test_cli_reports_residual_files(project_root: Path):
    (project_root / "web/themes/custom/fruition_theme/templates").mkdir()
    io = BufferedIO(["Acme", "", "", "", "", "y"])

    exit_code = main(["configure", "--vendor-dir", str(project_root / "vendor")], io=io)

    assert exit_code == 1
    assert "templates" in io.errors[0]


def test_cli_reports_missing_files(tmp_path: Path):
    io = BufferedIO()
    exit_code = main(["site-uuid", "--vendor-dir", str(tmp_path / "vendor")], io=io)

    assert exit_code == 1
    assert io.errors[0].startswith("<error>")


def test_cli_notify_update():
    io = BufferedIO()
    exit_code = main(["notify", "update", "drupal/core", "9.5.0", "9.5.1"], io=io)

    assert exit_code == 0
    assert "Upgrading drupal/core (9.5.0 => 9.5.1)" in io.output[0]


def test_cli_notify_ignores_other_vendors():
    io = BufferedIO()

    assert main(["notify", "install", "symfony/yaml", "6.3.0"], io=io) == 0
    assert io.output == []


def test_cli_notify_update_requires_target_version():
    with pytest.raises(SystemExit):
        main(["notify", "update", "drupal/core", "9.5.0"], io=BufferedIO())


def test_cli_configure_with_closed_stdin_uses_defaults(project_root: Path):
    def closed_stdin(prompt: str) -> str:
        raise EOFError

    stderr = io_module.StringIO()
    terminal = TerminalIO(stdout=io_module.StringIO(), stderr=stderr, input_func=closed_stdin)

    exit_code = main(["configure", "--vendor-dir", str(project_root / "vendor")], io=terminal)

    assert exit_code == 0
    assert stderr.getvalue() == ""
    assert (project_root / "web/themes/custom/mydrupal_project_theme").is_dir()
