"""
Shared CLI helpers: build the tag index from config and CLI arguments.
"""

from __future__ import annotations

import argparse
from typing import Any

from lwcindex.components.workspace.workspace_comp import FileSystemWorkspace
from lwcindex.services.config_svc import ConfigService
from lwcindex.services.tag_index_svc import TagIndexService


def load_config(args: argparse.Namespace) -> ConfigService:
    """ConfigService with CLI arguments applied as overrides."""
    overrides: dict[str, Any] = {}
    if getattr(args, "workspace", None):
        overrides["workspace_root"] = args.workspace
    if getattr(args, "catalog", None):
        overrides["catalog_path"] = args.catalog
    return ConfigService(overrides=overrides)


def build_tag_index(config: ConfigService) -> TagIndexService:
    """Create a TagIndexService for the configured workspace."""
    return TagIndexService(
        workspace=FileSystemWorkspace(config.get("workspace_root", ".")),
        catalog_path=config.get("catalog_path"),
        reindex_on_change=bool(config.get("reindex_on_change", True)),
    )
