"""
Workspace package.
"""

from .compiler_comp import NullCompiler
from .workspace_comp import FileSystemWorkspace, detect_workspace_type

__all__ = [
    "FileSystemWorkspace",
    "NullCompiler",
    "detect_workspace_type",
]
