from dataclasses import replace

import pytest

from application.task_registry import TaskRegistry
from core import Outcome, Task, get_variant
from core.interface.tui_state import InteractionState


class FakeTaskService:
    """In-memory stand-in for the remote service that records every call."""

    def __init__(self, tasks=None, fail=(), raise_on=None):
        self.tasks = list(tasks or [])
        self.notes = {}
        self.fail = set(fail)
        self.raise_on = raise_on or {}
        self.calls = []
        self._next_id = 1 + max([int(t.id) for t in self.tasks if t.id.isdigit()] or [0])

    @property
    def mutating_calls(self):
        return [call for call in self.calls if call[0] not in ("list", "getnote")]

    def _call(self, action, *args):
        self.calls.append((action,) + args)
        if action in self.raise_on:
            raise self.raise_on[action]
        return Outcome.FAILURE if action in self.fail else Outcome.SUCCESS

    def _replace(self, task_id, **changes):
        self.tasks = [replace(t, **changes) if t.id == task_id else t for t in self.tasks]

    def list_tasks(self):
        self._call("list")
        return list(self.tasks)

    def add_task(self, title, tag=None):
        outcome = self._call("new", title, tag)
        if outcome is Outcome.SUCCESS:
            self.tasks.append(Task(id=str(self._next_id), title=title, done=False, tag=tag or None))
            self._next_id += 1
        return outcome

    def mark_done(self, task_id):
        outcome = self._call("done", task_id)
        if outcome is Outcome.SUCCESS:
            self._replace(task_id, done=True)
        return outcome

    def reset_task(self, task_id):
        outcome = self._call("reset", task_id)
        if outcome is Outcome.SUCCESS:
            self._replace(task_id, done=False)
        return outcome

    def delete_task(self, task_id):
        outcome = self._call("delete", task_id)
        if outcome is Outcome.SUCCESS:
            self.tasks = [t for t in self.tasks if t.id != task_id]
        return outcome

    def rename_task(self, task_id, title):
        outcome = self._call("rename", task_id, title)
        if outcome is Outcome.SUCCESS:
            self._replace(task_id, title=title)
        return outcome

    def edit_tag(self, task_id, tag):
        outcome = self._call("edittag", task_id, tag)
        if outcome is Outcome.SUCCESS:
            self._replace(task_id, tag=tag or None)
        return outcome

    def save_note(self, task_id, note):
        outcome = self._call("newnote", task_id, note)
        if outcome is Outcome.SUCCESS:
            self.notes[task_id] = note
        return outcome

    def get_note(self, task_id):
        self._call("getnote", task_id)
        return self.notes.get(task_id)

    def delete_note(self, task_id):
        outcome = self._call("deletenote", task_id)
        if outcome is Outcome.SUCCESS:
            self.notes.pop(task_id, None)
        return outcome


SAMPLE_TASKS = [
    Task(id="1", title="Buy milk", done=False, tag="home"),
    Task(id="2", title="Call bank", done=True, tag="money"),
    Task(id="3", title="Write report", done=False, tag=None),
]


@pytest.fixture
def make_state():
    def factory(variant="basic", tasks=None, **service_kwargs):
        service = FakeTaskService(SAMPLE_TASKS if tasks is None else tasks, **service_kwargs)
        registry = TaskRegistry(service)
        registry.load()
        service.calls.clear()
        state = InteractionState(service, registry, get_variant(variant))
        return state, service

    return factory


def press(state, *keys):
    for key in keys:
        state.handle_key(key, key if isinstance(key, str) and len(key) == 1 else "")


def type_text(state, text):
    for ch in text:
        state.handle_key(ch, ch)
