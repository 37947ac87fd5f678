"""
TaskStore - the ordered, in-memory task list and its JSON persistence.

The file is read once when the store is loaded and rewritten wholesale by
:meth:`TaskStore.save`. Positions are 1-based everywhere in this API.
"""
import datetime as dt
import json
from importlib.resources import files
from pathlib import Path
from typing import Iterator, List, Union

from jsonschema import ValidationError, validate
from pydantic import ValidationError as ModelValidationError

from .io import atomic_write_json, load_json_file
from .logs import get_logger
from .models import Task, TaskListAdapter
from .recovery import CorruptionError, FatalError

log = get_logger("store")

DEFAULT_FILE = Path("tasklist.json")

def load_schema() -> dict:
    """Load the bundled JSON schema for the persisted task list."""
    schema_file = files("tasklist").joinpath("schemas", "tasklist.schema.json")
    try:
        return json.loads(schema_file.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise FatalError(f"Bundled task list schema is unreadable: {e}") from e

class TaskStore:
    """Ordered task list bound to a data file and a reference date."""

    def __init__(self, path: Union[Path, str] = DEFAULT_FILE, today: dt.date = None,
                 tasks: List[Task] = None):
        self.path = Path(path)
        self.today = today or dt.datetime.now(dt.timezone.utc).date()
        self.tasks: List[Task] = list(tasks or [])

    @classmethod
    def load(cls, path: Union[Path, str] = DEFAULT_FILE, today: dt.date = None) -> 'TaskStore':
        """
        Read the data file, or start empty when it does not exist.

        Raises:
            CorruptionError: the file is not valid JSON or does not describe
                a list of tasks
            FileOperationError: the file exists but could not be read
        """
        store = cls(path, today)
        data = load_json_file(store.path)
        if data is None:
            log.info(f"No task file at {store.path}; starting with an empty list")
            return store

        try:
            validate(instance=data, schema=load_schema())
            tasks = TaskListAdapter.validate_python(data)
        except ValidationError as e:
            log.error(f"{store.path} FAILED schema validation: {e.message}")
            raise CorruptionError(f"{store.path} is not a valid task list: {e.message}") from e
        except ModelValidationError as e:
            log.error(f"{store.path} contains invalid task values: {e}")
            raise CorruptionError(f"{store.path} contains invalid task values: {e}") from e

        for task in tasks:
            task.refresh_due_tag(store.today)
        store.tasks = tasks
        log.info(f"Loaded {len(tasks)} task(s) from {store.path}")
        return store

    def save(self) -> None:
        """Rewrite the data file from the in-memory list."""
        atomic_write_json(self.path, TaskListAdapter.dump_python(self.tasks, mode="json"))
        log.info(f"Saved {len(self.tasks)} task(s) to {self.path}")

    def add(self, task: Task) -> int:
        """Append a task and return its position."""
        if task.due_tag is None:
            task.refresh_due_tag(self.today)
        self.tasks.append(task)
        log.debug(f"Added task {len(self.tasks)} ({task.priority.label}) due {task.date} ({task.due_tag.label})")
        return len(self.tasks)

    def get(self, number: int) -> Task:
        self._check_number(number)
        return self.tasks[number - 1]

    def delete(self, number: int) -> Task:
        """Remove the task at ``number``; later tasks move up by one."""
        self._check_number(number)
        task = self.tasks.pop(number - 1)
        log.debug(f"Deleted task {number}; {len(self.tasks)} remaining")
        return task

    def _check_number(self, number: int):
        if not 1 <= number <= len(self.tasks):
            raise IndexError(f"Task number {number} out of range 1-{len(self.tasks)}")

    def __len__(self) -> int:
        return len(self.tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self.tasks)

    def __bool__(self) -> bool:
        return bool(self.tasks)
