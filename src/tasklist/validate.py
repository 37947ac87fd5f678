"""
Input validators for the interactive loop.

Every function here is pure: it takes the raw line typed by the user and
either returns the parsed value or raises the matching
:class:`~tasklist.recovery.InputError` subclass. Prompting and retrying live
in :mod:`tasklist.session`.
"""
import datetime as dt
import re
from enum import Enum
from typing import Iterable, Optional

from .models import Priority
from .recovery import (
    BlankTask,
    InvalidAction,
    InvalidDate,
    InvalidField,
    InvalidPriority,
    InvalidTaskNumber,
    InvalidTime,
)

DATE_PATTERN = re.compile(r'^([+-]?\d+)-([+-]?\d+)-([+-]?\d+)$')
TIME_PATTERN = re.compile(r'^([+-]?\d+):([+-]?\d+)$')
INT_PATTERN = re.compile(r'^[+-]?\d+$')

class Action(Enum):
    ADD = "add"
    PRINT = "print"
    EDIT = "edit"
    DELETE = "delete"
    END = "end"

class EditField(Enum):
    PRIORITY = "priority"
    DATE = "date"
    TIME = "time"
    TASK = "task"

def _normalize(raw: Optional[str]) -> str:
    return (raw or "").strip().lower()

def parse_action(raw: Optional[str]) -> Action:
    """Parse a top-level command; blank input is not a command."""
    try:
        return Action(_normalize(raw))
    except ValueError as e:
        raise InvalidAction() from e

def parse_priority(raw: Optional[str]) -> Priority:
    """Parse a single-letter priority code, case-insensitively."""
    try:
        return Priority((raw or "").strip().upper())
    except ValueError as e:
        raise InvalidPriority() from e

def parse_date(raw: Optional[str]) -> dt.date:
    """
    Parse ``yyyy-mm-dd`` into a calendar date.

    Components are plain integers, so ``2024-1-5`` is accepted. Dates that do
    not exist on the calendar (Feb 30, month 13) are rejected.
    """
    match = DATE_PATTERN.match((raw or "").strip())
    if not match:
        raise InvalidDate()
    year, month, day = (int(part) for part in match.groups())
    try:
        return dt.date(year, month, day)
    except (ValueError, OverflowError) as e:
        raise InvalidDate() from e

def parse_time(raw: Optional[str]) -> dt.time:
    """Parse ``hh:mm``; hour must be 0-23 and minute 0-59."""
    match = TIME_PATTERN.match((raw or "").strip())
    if not match:
        raise InvalidTime()
    hour, minute = (int(part) for part in match.groups())
    if not (0 <= hour <= 23 and 0 <= minute <= 59):
        raise InvalidTime()
    return dt.time(hour, minute)

def parse_task_number(raw: Optional[str], count: int) -> int:
    """Parse a 1-based task index that must fall inside ``1..count``."""
    text = (raw or "").strip()
    if not INT_PATTERN.match(text):
        raise InvalidTaskNumber()
    number = int(text)
    if not 1 <= number <= count:
        raise InvalidTaskNumber()
    return number

def parse_field(raw: Optional[str]) -> EditField:
    try:
        return EditField(_normalize(raw))
    except ValueError as e:
        raise InvalidField() from e

def is_blank(line: Optional[str]) -> bool:
    return line is None or not line.strip()

def join_description(lines: Iterable[str]) -> str:
    """Join description lines in order and trim trailing whitespace."""
    description = "\n".join(line for line in lines if not is_blank(line)).rstrip()
    if not description:
        raise BlankTask()
    return description
