"""Command line interface invoked from the project's Composer scripts."""

from __future__ import annotations

import argparse
import logging
import os
from pathlib import Path
from typing import Sequence

from .customize import interactive_configuration
from .errors import SkeletonError
from .io.adapters import BufferedIO, TerminalIO
from .io.interfaces import ConsoleIO
from .io.schema import (
    InstallOperation,
    Package,
    PackageEvent,
    PackageOperation,
    ScriptEvent,
    UninstallOperation,
    UpdateOperation,
)
from .notify import post_package_operation
from .site import create_site_uuid

LOGGER = logging.getLogger(__name__)


def _default_vendor_dir() -> Path:
    return Path(os.environ.get("COMPOSER_VENDOR_DIR", "vendor")).resolve()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="skeletonkit", description="Composer lifecycle hooks for the Drupal skeleton"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log every file the hooks touch"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    vendor_parent = argparse.ArgumentParser(add_help=False)
    vendor_parent.add_argument(
        "--vendor-dir",
        type=Path,
        default=None,
        help="Composer vendor directory; its parent is the project root "
        "(defaults to $COMPOSER_VENDOR_DIR or ./vendor)",
    )

    subparsers.add_parser(
        "site-uuid", parents=[vendor_parent], help="give the exported site config a new uuid"
    )

    configure_parser = subparsers.add_parser(
        "configure", parents=[vendor_parent], help="interactively rename the project"
    )
    configure_parser.add_argument(
        "-n",
        "--no-interaction",
        action="store_true",
        help="Accept every default without prompting",
    )

    notify_parser = subparsers.add_parser(
        "notify", help="print workflow notes after a package operation"
    )
    notify_parser.add_argument("operation", choices=["install", "uninstall", "update"])
    notify_parser.add_argument("package", help="Package name, e.g. drupal/core")
    notify_parser.add_argument("version", help="Installed or initial version")
    notify_parser.add_argument(
        "target_version", nargs="?", help="Target version (update only)"
    )

    return parser


def _script_event(args: argparse.Namespace, io: ConsoleIO) -> ScriptEvent:
    vendor_dir = args.vendor_dir.resolve() if args.vendor_dir else _default_vendor_dir()
    return ScriptEvent(vendor_dir=vendor_dir, io=io)


def _build_operation(
    args: argparse.Namespace, parser: argparse.ArgumentParser
) -> PackageOperation:
    package = Package(name=args.package, version=args.version)
    if args.operation == "update":
        if not args.target_version:
            parser.error("update requires a target version")
        target = Package(name=args.package, version=args.target_version)
        return UpdateOperation(initial_package=package, target_package=target)
    if args.target_version:
        parser.error(f"{args.operation} does not take a target version")
    if args.operation == "install":
        return InstallOperation(package=package)
    return UninstallOperation(package=package)


def _handle_site_uuid(args: argparse.Namespace, io: ConsoleIO) -> int:
    site_uuid = create_site_uuid(_script_event(args, io))
    io.write(f"Site uuid set to <info>{site_uuid}</info>")
    return 0


def _handle_configure(args: argparse.Namespace, io: ConsoleIO) -> int:
    if not args.no_interaction:
        return 0 if interactive_configuration(_script_event(args, io)) else 1

    defaults = BufferedIO()
    try:
        accepted = interactive_configuration(_script_event(args, defaults))
    finally:
        io.write(defaults.output)
        if defaults.errors:
            io.write_error(defaults.errors)
    return 0 if accepted else 1


def _handle_notify(
    args: argparse.Namespace, io: ConsoleIO, parser: argparse.ArgumentParser
) -> int:
    operation = _build_operation(args, parser)
    post_package_operation(PackageEvent(operation=operation, io=io))
    return 0


def main(argv: Sequence[str] | None = None, io: ConsoleIO | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    io = io or TerminalIO()

    try:
        if args.command == "site-uuid":
            return _handle_site_uuid(args, io)
        if args.command == "configure":
            return _handle_configure(args, io)
        if args.command == "notify":
            return _handle_notify(args, io, parser)
    except (SkeletonError, OSError, ValueError) as exc:
        LOGGER.debug("%s failed", args.command, exc_info=True)
        io.write_error(f"<error>{exc}</error>")
        return 1
    parser.error("no command provided")
    return 2


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
