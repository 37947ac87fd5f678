import datetime as dt
import re
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field, TypeAdapter, field_serializer, field_validator

LINE_BREAK = re.compile(r"\r\n|\r|\n")

class Priority(Enum):
    CRITICAL = "C"
    HIGH = "H"
    NORMAL = "N"
    LOW = "L"

    @property
    def label(self) -> str:
        return self.name.capitalize()

class DueTag(Enum):
    OVERDUE = "O"
    TODAY = "T"
    IN_TIME = "I"

    @property
    def label(self) -> str:
        return {"O": "Overdue", "T": "Today", "I": "In-time"}[self.value]

def classify(due: dt.date, today: dt.date) -> DueTag:
    """Classify a due date against the reference date."""
    days_until = (due - today).days
    if days_until < 0:
        return DueTag.OVERDUE
    if days_until == 0:
        return DueTag.TODAY
    return DueTag.IN_TIME

class Task(BaseModel):
    """A single task record.

    ``due_tag`` is derived from ``date`` and a reference date; it is never
    serialized and must be refreshed with :meth:`refresh_due_tag` after
    loading.
    """

    description: str = Field(description="Free text, may span several lines")
    priority: Priority = Field(description="Severity code: C, H, N or L")
    date: dt.date = Field(description="Due date")
    time: dt.time = Field(description="Due time, hours and minutes only")
    due_tag: Optional[DueTag] = Field(
        default=None,
        exclude=True,
        description="Overdue/Today/In-time relative to the reference date"
    )

    @field_validator('description')
    @classmethod
    def validate_description(cls, v):
        v = v.rstrip()
        if not v:
            raise ValueError("Task description must not be blank")
        return v

    @field_validator('time')
    @classmethod
    def drop_seconds(cls, v):
        return v.replace(second=0, microsecond=0, tzinfo=None)

    @field_serializer('time')
    def serialize_time(self, v: dt.time) -> str:
        return v.strftime("%H:%M")

    @classmethod
    def create(cls, description: str, priority: Priority, date: dt.date,
               time: dt.time, today: dt.date) -> 'Task':
        """Build a task with its due tag already computed."""
        task = cls(description=description, priority=priority, date=date, time=time)
        task.refresh_due_tag(today)
        return task

    def refresh_due_tag(self, today: dt.date) -> DueTag:
        self.due_tag = classify(self.date, today)
        return self.due_tag

    def reschedule(self, date: dt.date, today: dt.date) -> None:
        """Move the task to a new date and reclassify it."""
        self.date = date
        self.refresh_due_tag(today)

    def rename(self, description: str) -> None:
        description = description.rstrip()
        if not description:
            raise ValueError("Task description must not be blank")
        self.description = description

    @property
    def description_lines(self) -> List[str]:
        return LINE_BREAK.split(self.description)

TaskListAdapter = TypeAdapter(List[Task])
