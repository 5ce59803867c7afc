"""
Commands package.
"""

from .list_tags import cmd_list
from .show_tag import cmd_show
from .watch import cmd_watch

__all__ = [
    "cmd_list",
    "cmd_show",
    "cmd_watch",
]
