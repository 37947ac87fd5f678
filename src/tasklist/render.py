"""
Fixed-width table rendering for the task list.

The layout code only asks a :class:`CellStyle` for the one-character
priority and due cells, so colored and plain output share the same borders
and widths.
"""
import abc
from typing import Iterable, List

import click

from .models import DueTag, Priority, Task

DESCRIPTION_WIDTH = 44

SEPARATOR = "+----+------------+-------+---+---+--------------------------------------------+"
HEADER = "| N  |    Date    | Time  | P | D |                   Task                     |"
CONTINUATION = "|    |            |       |   |   |"

class CellStyle(abc.ABC):
    """Renders the single-character priority and due-tag cells."""

    @abc.abstractmethod
    def priority(self, priority: Priority) -> str:
        pass

    @abc.abstractmethod
    def due(self, due_tag: DueTag) -> str:
        pass

class AnsiCellStyle(CellStyle):
    """A blank cell painted with an ANSI background color."""

    PRIORITY_COLORS = {
        Priority.CRITICAL: "bright_red",
        Priority.HIGH: "bright_yellow",
        Priority.NORMAL: "bright_green",
        Priority.LOW: "bright_blue",
    }
    DUE_COLORS = {
        DueTag.OVERDUE: "bright_red",
        DueTag.TODAY: "bright_yellow",
        DueTag.IN_TIME: "bright_green",
    }

    def _paint(self, color) -> str:
        if color is None:
            return " "
        return click.style(" ", bg=color)

    def priority(self, priority: Priority) -> str:
        return self._paint(self.PRIORITY_COLORS.get(priority))

    def due(self, due_tag: DueTag) -> str:
        return self._paint(self.DUE_COLORS.get(due_tag))

class PlainCellStyle(CellStyle):
    """The one-letter code itself, for terminals without color."""

    def priority(self, priority: Priority) -> str:
        return priority.value if priority is not None else " "

    def due(self, due_tag: DueTag) -> str:
        return due_tag.value if due_tag is not None else " "

def chunk_line(line: str, width: int = DESCRIPTION_WIDTH) -> List[str]:
    """Hard-split a line into pieces of at most ``width`` characters, each padded to ``width``."""
    if not line:
        return [" " * width]
    return [line[i:i + width].ljust(width) for i in range(0, len(line), width)]

def description_chunks(task: Task) -> List[str]:
    chunks = []
    for line in task.description_lines:
        chunks.extend(chunk_line(line))
    return chunks

def render_task(number: int, task: Task, style: CellStyle) -> List[str]:
    chunks = description_chunks(task)
    first = (
        f"| {str(number).ljust(2)} | {task.date.isoformat().ljust(10)} |"
        f" {task.time.strftime('%H:%M').ljust(5)} | {style.priority(task.priority)} |"
        f" {style.due(task.due_tag)} |{chunks[0]}|"
    )
    return [first] + [f"{CONTINUATION}{chunk}|" for chunk in chunks[1:]]

def render_table(tasks: Iterable[Task], style: CellStyle = None) -> List[str]:
    """Render the bordered table as a list of lines, without trailing newlines."""
    style = style or AnsiCellStyle()
    lines = [SEPARATOR, HEADER, SEPARATOR]
    for number, task in enumerate(tasks, start=1):
        lines.extend(render_task(number, task, style))
        lines.append(SEPARATOR)
    return lines
