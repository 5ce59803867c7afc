"""
Workflows package.
"""

from .tags.index_file_wf import index_file_workflow, unindex_file_workflow
from .tags.index_workspace_wf import index_workspace_workflow
from .tags.process_file_events_wf import process_file_events_workflow

__all__ = [
    "index_file_workflow",
    "index_workspace_workflow",
    "process_file_events_workflow",
    "unindex_file_workflow",
]
