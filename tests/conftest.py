"""Shared fixtures for tasklist tests."""

import datetime as dt
import io

import pytest

from tasklist.models import Priority, Task
from tasklist.render import PlainCellStyle
from tasklist.session import Console, TasklistSession
from tasklist.store import TaskStore

TODAY = dt.date(2024, 1, 2)


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path, monkeypatch):
    """Keep logs and configuration lookups out of the real home directory."""
    monkeypatch.setenv("TASKLIST_LOG_DIR", str(tmp_path / "logs"))
    for name in ("TASKLIST_CONFIG", "TASKLIST_FILE", "TASKLIST_COLOR",
                 "TASKLIST_LOG_LEVEL", "TASKLIST_DEBUG"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr("tasklist.config.DEFAULT_CONFIG_FILE", tmp_path / "missing" / "config.yml")


@pytest.fixture()
def today():
    return TODAY


@pytest.fixture()
def data_file(tmp_path):
    return tmp_path / "tasklist.json"


@pytest.fixture()
def make_task(today):
    def _make(description="Buy milk", priority=Priority.NORMAL,
              date=dt.date(2024, 1, 5), time=dt.time(9, 30)):
        return Task.create(description, priority, date, time, today)
    return _make


@pytest.fixture()
def run_session(data_file, today, capsys):
    """
    Drive a session with scripted input lines.

    Returns (session, exit_status, stdout_lines). Uses the plain cell style so
    rendered tables can be compared as text.
    """
    def _run(lines, store=None):
        store = store if store is not None else TaskStore(data_file, today)
        stdin = io.StringIO("".join(f"{line}\n" for line in lines))
        session = TasklistSession(store, console=Console(stdin=stdin), style=PlainCellStyle())
        status = session.run()
        out = capsys.readouterr().out
        return session, status, out.splitlines()
    return _run
