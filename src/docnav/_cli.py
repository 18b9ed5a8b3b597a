"""Docnav CLI — docnav nav / docnav sidebar / docnav config.

Entry point for the ``docnav`` command-line interface.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from docnav.export.writer import WrittenFile
    from docnav.observability.log import EventLog


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the docnav CLI."""
    from docnav.export.writer import FORMATS

    parser = argparse.ArgumentParser(
        prog="docnav",
        description="Generate VitePress nav and sidebar config from a docs directory.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {_get_version()}",
    )

    # Options shared by every command. None means "not given" so that
    # values from a config file are not overridden by parser defaults.
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "docs_dir", nargs="?", default=None,
        help="Documentation root (auto-detected when omitted)",
    )
    common.add_argument(
        "--config-root", default=".",
        help="Directory searched for docnav.yaml / docnav.toml / pyproject.toml",
    )
    common.add_argument("--max-depth", type=int, default=None, help="Traversal depth (1-3)")
    common.add_argument(
        "--ignore-dir", action="append", default=None, metavar="NAME",
        help="Directory name to skip (repeatable; replaces the defaults)",
    )
    common.add_argument(
        "--pattern", action="append", default=None, metavar="SUFFIX",
        help="Content-file suffix (repeatable; default .md)",
    )
    common.add_argument("--overview-suffix", default=None, help="Label suffix for overview items")
    common.add_argument(
        "--include-root-files", action=argparse.BooleanOptionalAction, default=None,
        help="List loose content files from the docs root",
    )
    common.add_argument(
        "--default-expand", action=argparse.BooleanOptionalAction, default=None,
        help="Value of each sidebar group's collapsed flag",
    )
    common.add_argument(
        "--format", choices=FORMATS, default=None,
        help="Output format (default: from --output suffix, else json)",
    )
    common.add_argument("--output", "-o", default=None, help="Write to a file instead of stdout")
    common.add_argument("--debug", action="store_true", help="Print diagnostics to stderr")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")
    subparsers.add_parser("nav", parents=[common], help="Generate the top navigation list")
    subparsers.add_parser("sidebar", parents=[common], help="Generate the sidebar mapping")
    subparsers.add_parser("config", parents=[common], help="Generate both as {nav, sidebar}")

    return parser


def _get_version() -> str:
    """Get the package version."""
    from docnav import __version__

    return __version__


def _overrides_from_args(args: argparse.Namespace) -> dict[str, Any]:
    """Collect the NavConfig overrides that were given on the command line."""
    overrides: dict[str, Any] = {}
    if args.docs_dir is not None:
        overrides["docs_dir"] = Path(args.docs_dir)
    if args.max_depth is not None:
        overrides["max_depth"] = args.max_depth
    if args.ignore_dir is not None:
        overrides["ignore_dirs"] = tuple(args.ignore_dir)
    if args.pattern is not None:
        overrides["file_patterns"] = tuple(args.pattern)
    if args.overview_suffix is not None:
        overrides["overview_suffix"] = args.overview_suffix
    if args.include_root_files is not None:
        overrides["include_root_files"] = args.include_root_files
    if args.default_expand is not None:
        overrides["default_expand"] = args.default_expand
    if args.debug:
        overrides["debug"] = True
    return overrides


def _print_write_summary(command: str, written: WrittenFile) -> None:
    """Print a one-line summary of a written file to stderr."""
    print(
        f"  Wrote {command} ({written.format}, {written.size_bytes} bytes) "
        f"to {written.path} in {written.duration_ms:.0f}ms",
        file=sys.stderr,
    )


def _print_diagnostics_summary(log: EventLog) -> None:
    """Print event counts and any scan failures from a --debug run to stderr."""
    from docnav.observability.events import ScanFailed

    stats = log.stats()
    counts = ", ".join(f"{name}={count}" for name, count in stats["by_type"].items())
    print(f"  Diagnostics: {stats['total']} events ({counts})", file=sys.stderr)
    for failure in reversed(log.query(event_type=ScanFailed)):
        print(
            f"  Failed {failure.kind} at {failure.root}: {failure.error} "
            f"({failure.entries_kept} kept)",
            file=sys.stderr,
        )


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    from docnav._errors import DocnavError
    from docnav.app import generate_nav, generate_sidebar, generate_site_config
    from docnav.config_loader import load_config
    from docnav.export.writer import render, write_output
    from docnav.observability.reporter import DiagnosticReporter

    generators = {
        "nav": generate_nav,
        "sidebar": generate_sidebar,
        "config": generate_site_config,
    }

    try:
        config = load_config(Path(args.config_root), **_overrides_from_args(args))
        reporter = DiagnosticReporter(debug=config.debug)
        data = generators[args.command](config, reporter=reporter)
        if config.debug:
            _print_diagnostics_summary(reporter.log)
        if args.output is not None:
            written = write_output(data, Path(args.output), args.format)
            _print_write_summary(args.command, written)
        else:
            sys.stdout.write(render(data, args.format or "json"))
    except DocnavError as exc:
        print(f"docnav: error: {exc}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
