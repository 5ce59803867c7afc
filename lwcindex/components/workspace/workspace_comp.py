"""
Workspace discovery component.

Detects the workspace layout and enumerates component source files
(``.js`` files below a ``lightningcomponents`` directory) on disk.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

from lwcindex.helpers.dto.tags_dto import WorkspaceType
from lwcindex.helpers.uri_helper import COMPONENTS_DIR, is_component_source

logger = logging.getLogger(__name__)

SFDX_PROJECT_FILE = "sfdx-project.json"
LWC_PACKAGES = {"lwc", "lwc-engine", "lwc-compiler"}
IGNORED_DIRS = {"node_modules", ".git", ".sfdx", ".vscode"}


def _load_package_json(root: Path) -> dict[str, Any]:
    """Load root package.json; returns {} if missing or invalid."""
    package_json = root / "package.json"
    if not package_json.is_file():
        return {}
    try:
        data = json.loads(package_json.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        logger.warning(f"Ignoring unreadable {package_json}: {e}")
        return {}
    return data if isinstance(data, dict) else {}


def _walk_components_dirs(root: Path):
    """Yield (dirpath, filenames) for every directory, skipping ignored trees."""
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames[:] = sorted(d for d in dirnames if d not in IGNORED_DIRS)
        yield Path(dirpath), filenames


def detect_workspace_type(root: str | Path) -> WorkspaceType:
    """
    Detect the layout of a workspace.

    - ``sfdx-project.json`` at the root -> SFDX
    - package.json depending on an LWC package, or any lightningcomponents dir -> STANDARD_LWC
    - otherwise UNKNOWN

    Args:
        root: Workspace root directory

    Returns:
        Detected WorkspaceType
    """
    root_path = Path(root)
    if (root_path / SFDX_PROJECT_FILE).is_file():
        return WorkspaceType.SFDX

    package = _load_package_json(root_path)
    deps: set[str] = set()
    for key in ("dependencies", "devDependencies"):
        section = package.get(key)
        if isinstance(section, dict):
            deps.update(section)
    if deps & LWC_PACKAGES:
        return WorkspaceType.STANDARD_LWC

    for dirpath, _filenames in _walk_components_dirs(root_path):
        if dirpath.name == COMPONENTS_DIR:
            return WorkspaceType.STANDARD_LWC

    return WorkspaceType.UNKNOWN


class FileSystemWorkspace:
    """WorkspaceContext backed by a directory on disk."""

    def __init__(self, root: str | Path, workspace_type: WorkspaceType | None = None) -> None:
        self.root = Path(root)
        self._type = workspace_type

    @property
    def type(self) -> WorkspaceType:
        if self._type is None:
            self._type = detect_workspace_type(self.root)
            logger.info(f"Detected workspace type {self._type.value} for {self.root}")
        return self._type

    def find_all_modules(self) -> list[str]:
        """
        Enumerate component source files.

        Returns:
            Sorted list of ``.js`` file paths below ``lightningcomponents`` directories
        """
        if not self.root.is_dir():
            logger.warning(f"Workspace root does not exist: {self.root}")
            return []

        modules = []
        for dirpath, filenames in _walk_components_dirs(self.root):
            for filename in filenames:
                path = dirpath / filename
                if is_component_source(path):
                    modules.append(str(path))
        return sorted(modules)
