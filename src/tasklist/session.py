"""
The interactive command loop.

A :class:`TasklistSession` reads one action per line and dispatches to the
add/print/edit/delete/end handlers. Every field prompt repeats until the
validator in :mod:`tasklist.validate` accepts the input; nothing but ``end``
(or exhausted input) leaves the loop.
"""
import datetime as dt
from typing import Callable, List, TypeVar

import click

from .logs import get_logger
from .models import Priority, Task
from .recovery import BlankTask, EndOfInput, InputError, InvalidAction
from .render import AnsiCellStyle, CellStyle, render_table
from .store import TaskStore
from .validate import (
    Action,
    EditField,
    is_blank,
    join_description,
    parse_action,
    parse_date,
    parse_field,
    parse_priority,
    parse_task_number,
    parse_time,
)

log = get_logger("session")

T = TypeVar("T")

ACTION_PROMPT = "Input an action (add, print, edit, delete, end):"
PRIORITY_PROMPT = "Input the task priority (C, H, N, L):"
DATE_PROMPT = "Input the date (yyyy-mm-dd):"
TIME_PROMPT = "Input the time (hh:mm):"
DESCRIPTION_PROMPT = "Input a new task (enter a blank line to end):"
TASK_NUMBER_PROMPT = "Input the task number (1-{count}):"
FIELD_PROMPT = "Input a field to edit (priority, date, time, task):"

NO_TASKS = "No tasks have been input"
TASK_CHANGED = "The task is changed"
TASK_DELETED = "The task is deleted"
EXITING = "Tasklist exiting!"

class Console:
    """Line-oriented terminal I/O.

    ``stdin`` defaults to click's text stdin, opened on the first read with
    undecodable bytes replaced by U+FFFD so every line can be saved as JSON.
    """

    def __init__(self, stdin=None, color: bool = None):
        self.stdin = stdin
        self.color = color
        self.exhausted = False

    def echo(self, message: str = "") -> None:
        click.echo(message, color=self.color)

    def read_line(self) -> str:
        if self.stdin is None:
            self.stdin = click.get_text_stream("stdin", errors="replace")
        line = self.stdin.readline()
        if not line:
            self.exhausted = True
            raise EndOfInput("No more input")
        return line.rstrip("\r\n")

    def ask(self, prompt: str) -> str:
        self.echo(prompt)
        return self.read_line()

class TasklistSession:
    def __init__(self, store: TaskStore, console: Console = None, style: CellStyle = None):
        self.store = store
        self.style = style or AnsiCellStyle()
        self.console = console or Console(color=isinstance(self.style, AnsiCellStyle) or None)
        self.handlers = {
            Action.ADD: self.add,
            Action.PRINT: self.print_tasks,
            Action.EDIT: self.edit,
            Action.DELETE: self.delete,
        }

    @property
    def today(self) -> dt.date:
        return self.store.today

    def run(self) -> int:
        """Run until ``end`` or end of input; returns the exit status."""
        while True:
            try:
                action = parse_action(self.console.ask(ACTION_PROMPT))
            except InvalidAction as e:
                self.console.echo(e.message)
                continue
            except EndOfInput:
                self.console.echo(InvalidAction.message)
                log.warning("Input ended before 'end'; unsaved changes were discarded")
                return 0

            log.debug(f"Action: {action.value}")
            if action is Action.END:
                self.end()
                return 0

            try:
                self.handlers[action]()
            except EndOfInput:
                log.warning(f"Input ended during '{action.value}'; unsaved changes were discarded")
                return 0

    # Prompts

    def _ask_until_valid(self, prompt: str, parser: Callable[[str], T]) -> T:
        while True:
            raw = self.console.ask(prompt)
            try:
                return parser(raw)
            except InputError as e:
                log.debug(f"Rejected {raw!r}: {type(e).__name__}")
                if e.message:
                    self.console.echo(e.message)

    def ask_priority(self) -> Priority:
        return self._ask_until_valid(PRIORITY_PROMPT, parse_priority)

    def ask_date(self) -> dt.date:
        return self._ask_until_valid(DATE_PROMPT, parse_date)

    def ask_time(self) -> dt.time:
        return self._ask_until_valid(TIME_PROMPT, parse_time)

    def ask_task_number(self) -> int:
        count = len(self.store)
        return self._ask_until_valid(
            TASK_NUMBER_PROMPT.format(count=count),
            lambda raw: parse_task_number(raw, count),
        )

    def ask_field(self) -> EditField:
        return self._ask_until_valid(FIELD_PROMPT, parse_field)

    def ask_description(self) -> str:
        """Collect lines up to a blank line or end of input.

        Raises:
            BlankTask: no text was entered
        """
        self.console.echo(DESCRIPTION_PROMPT)
        lines: List[str] = []
        while True:
            try:
                line = self.console.read_line()
            except EndOfInput:
                break
            if is_blank(line):
                break
            lines.append(line)
        return join_description(lines)

    # Actions

    def add(self) -> None:
        priority = self.ask_priority()
        date = self.ask_date()
        time = self.ask_time()
        try:
            description = self.ask_description()
        except BlankTask as e:
            self.console.echo(e.message)
            return

        self.store.add(Task.create(description, priority, date, time, self.today))

    def print_tasks(self) -> bool:
        """Show the table; returns False when there is nothing to show."""
        if not self.store:
            self.console.echo(NO_TASKS)
            return False
        for line in render_table(self.store, self.style):
            self.console.echo(line)
        return True

    def edit(self) -> None:
        if not self.print_tasks():
            return
        number = self.ask_task_number()
        task = self.store.get(number)

        field = self.ask_field()
        if field is EditField.PRIORITY:
            task.priority = self.ask_priority()
        elif field is EditField.DATE:
            task.reschedule(self.ask_date(), self.today)
        elif field is EditField.TIME:
            task.time = self.ask_time()
        elif field is EditField.TASK:
            task.rename(self._ask_replacement_description())

        log.debug(f"Edited {field.value} of task {number}")
        self.console.echo(TASK_CHANGED)

    def _ask_replacement_description(self) -> str:
        while True:
            try:
                return self.ask_description()
            except BlankTask as e:
                self.console.echo(e.message)
                if self.console.exhausted:
                    raise EndOfInput("No more input") from e

    def delete(self) -> None:
        if not self.print_tasks():
            return
        self.store.delete(self.ask_task_number())
        self.console.echo(TASK_DELETED)

    def end(self) -> None:
        self.console.echo(EXITING)
        self.store.save()
