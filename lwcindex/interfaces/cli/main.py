#!/usr/bin/env python3
"""
Main CLI entry point with argument parser and command dispatch.
"""

from __future__ import annotations

import argparse

from lwcindex.__version__ import __version__
from lwcindex.helpers.logging_helper import configure_logging
from lwcindex.interfaces.cli.commands.list_tags import cmd_list
from lwcindex.interfaces.cli.commands.show_tag import cmd_show
from lwcindex.interfaces.cli.commands.watch import cmd_watch
from lwcindex.services.config_svc import ConfigService


def _add_common_args(s: argparse.ArgumentParser) -> None:
    s.add_argument("--workspace", help="workspace root (default: config workspace_root, else '.')")
    s.add_argument("--catalog", help="standard component catalog JSON (default: bundled)")


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    p = argparse.ArgumentParser(
        prog="lwcindex",
        description="lwcindex - component tag registry for editor tooling",
        epilog="Examples:\n"
        "  lwcindex list --builtins-only               # Standard lightning-* tags\n"
        "  lwcindex list --workspace ./my-project      # Standard + workspace tags\n"
        "  lwcindex show lightning-button              # Attributes of one tag\n"
        "  lwcindex watch --workspace ./my-project     # Keep indexing as files change",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    p.add_argument("--log-level", help="log level (default: config log_level)")

    sub = p.add_subparsers(
        dest="cmd",
        title="commands",
        description="Available commands (use 'lwcindex <command> --help' for command-specific help)",
    )

    # list: All known tags
    s = sub.add_parser("list", help="List known tags and their attributes")
    _add_common_args(s)
    s.add_argument("--builtins-only", action="store_true", help="only list standard lightning-* tags")
    s.set_defaults(func=cmd_list)

    # show: One tag
    s = sub.add_parser("show", help="Show attributes and documentation of one tag")
    s.add_argument("tag", help="qualified tag name, e.g. lightning-button or c-hello")
    _add_common_args(s)
    s.set_defaults(func=cmd_show)

    # watch: Incremental indexing
    s = sub.add_parser("watch", help="Index the workspace and follow file changes")
    _add_common_args(s)
    s.set_defaults(func=cmd_watch)

    return p


def main(argv: list[str] | None = None) -> int:
    """Main entry point for CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    # If no command provided, show help
    if args.cmd is None:
        parser.print_help()
        return 0

    configure_logging(args.log_level or ConfigService().get("log_level", "INFO"))
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
