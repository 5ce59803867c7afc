"""
Helpers package.
"""

from .attribute_names_helper import split_words, to_kebab_case
from .logging_helper import configure_logging, format_diagnostic, format_diagnostics
from .tag_names_helper import (
    SFDX_NAMESPACE,
    STANDARD_NAMESPACE,
    full_tag_name,
    is_canonical_component_file,
    qualified_name,
    resolve_tag_name,
)
from .uri_helper import is_component_source, uri_to_path

__all__ = [
    "SFDX_NAMESPACE",
    "STANDARD_NAMESPACE",
    "configure_logging",
    "format_diagnostic",
    "format_diagnostics",
    "full_tag_name",
    "is_canonical_component_file",
    "is_component_source",
    "qualified_name",
    "resolve_tag_name",
    "split_words",
    "to_kebab_case",
    "uri_to_path",
]
