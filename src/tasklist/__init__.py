"""
Tasklist - an interactive command-line task list.

Tasks carry a description, a priority (Critical, High, Normal, Low) and a due
date and time, and are kept in a JSON file between runs.
"""

from .version import VERSION
from .models import Priority, DueTag, Task, classify
from .store import TaskStore
from .render import CellStyle, AnsiCellStyle, PlainCellStyle, render_table
from .session import Console, TasklistSession

__version__ = VERSION

__all__ = [
    "VERSION",
    "Priority",
    "DueTag",
    "Task",
    "classify",
    "TaskStore",
    "CellStyle",
    "AnsiCellStyle",
    "PlainCellStyle",
    "render_table",
    "Console",
    "TasklistSession",
]
