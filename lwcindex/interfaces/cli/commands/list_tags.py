"""
List command: print every known tag with its attributes.
"""

from __future__ import annotations

import argparse
import asyncio

from lwcindex.helpers.exceptions import CatalogLoadError
from lwcindex.helpers.tag_names_helper import STANDARD_NAMESPACE
from lwcindex.interfaces.cli.ui import TableDisplay, print_error, print_info
from lwcindex.interfaces.cli.utils import build_tag_index, load_config


def cmd_list(args: argparse.Namespace) -> int:
    """
    Load the standard catalog (and the workspace unless --builtins-only) and list tags.
    """
    service = build_tag_index(load_config(args))
    try:
        if args.builtins_only:
            service.load_standard_tags()
        else:
            asyncio.run(service.start())
    except CatalogLoadError as e:
        print_error(f"Cannot load standard components: {e}")
        return 2

    tags = service.list_tags()
    if args.builtins_only:
        tags = [(name, info) for name, info in tags if name.startswith(f"{STANDARD_NAMESPACE}-")]

    if not tags:
        print_info("No tags found")
        return 0

    TableDisplay.show_tags(tags, title=f"Tags ({len(tags)})")
    return 0
