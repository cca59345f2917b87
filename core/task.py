from dataclasses import dataclass, replace
from typing import Optional


@dataclass(frozen=True)
class Task:
    """One remote to-do item as known locally.

    Records are immutable: a changed title, tag or completion flag only becomes
    visible through a fresh list from the server.
    """

    id: str
    title: str
    done: bool = False
    tag: Optional[str] = None
    note: Optional[str] = None

    def with_note(self, note: Optional[str]) -> "Task":
        return replace(self, note=note)


def format_task_title(task: Task, show_tag: bool = False) -> str:
    if show_tag and task.tag:
        return f"{task.title} #{task.tag}"
    return task.title
