"""
Tags package.
"""

from .index_file_wf import DiagnosticsSink, extract_attributes, index_file_workflow, unindex_file_workflow
from .index_workspace_wf import index_workspace_workflow
from .process_file_events_wf import process_file_events_workflow, select_component_events

__all__ = [
    "DiagnosticsSink",
    "extract_attributes",
    "index_file_workflow",
    "index_workspace_workflow",
    "process_file_events_workflow",
    "select_component_events",
    "unindex_file_workflow",
]
