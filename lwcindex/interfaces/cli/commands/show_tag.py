"""
Show command: print one tag's attributes and documentation.
"""

from __future__ import annotations

import argparse
import asyncio

from lwcindex.helpers.exceptions import CatalogLoadError
from lwcindex.interfaces.cli.ui import print_error, show_tag
from lwcindex.interfaces.cli.utils import build_tag_index, load_config


def cmd_show(args: argparse.Namespace) -> int:
    """Look up a qualified tag name (e.g. ``lightning-button``, ``c-hello``)."""
    service = build_tag_index(load_config(args))
    try:
        asyncio.run(service.start())
    except CatalogLoadError as e:
        print_error(f"Cannot load standard components: {e}")
        return 2

    info = service.get_tag(args.tag)
    if info is None:
        print_error(f"Unknown tag: {args.tag}")
        return 1

    show_tag(args.tag, info)
    return 0
