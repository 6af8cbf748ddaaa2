"""CLI commands for fitness-record."""

from .log import add, clear, remove, update
from .shell import shell
from .view import exercises, filter_group, show

__all__ = [
    "add",
    "clear",
    "exercises",
    "filter_group",
    "remove",
    "shell",
    "show",
    "update",
]
