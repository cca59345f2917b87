"""Interaction modes of the task list UI.

Each mode is its own immutable type carrying only the transient data it needs,
so handler and prompt tables can be keyed by type.
"""

from dataclasses import dataclass
from typing import Optional, Union

from core import Task


@dataclass(frozen=True)
class Browse:
    """List navigation, multi-select and mutations."""


@dataclass(frozen=True)
class Add:
    """Composing the title of a new task."""


@dataclass(frozen=True)
class AddTag:
    """Composing the tag of a task whose title was just entered."""

    title: str


@dataclass(frozen=True)
class Rename:
    target: Task


@dataclass(frozen=True)
class EditTag:
    target: Task


@dataclass(frozen=True)
class Note:
    target: Task


Mode = Union[Browse, Add, AddTag, Rename, EditTag, Note]

MODE_TYPES = (Browse, Add, AddTag, Rename, EditTag, Note)


def pending_target(mode: Mode) -> Optional[Task]:
    return getattr(mode, "target", None)


def is_multiline(mode: Mode) -> bool:
    return isinstance(mode, Note)


__all__ = [
    "Browse",
    "Add",
    "AddTag",
    "Rename",
    "EditTag",
    "Note",
    "Mode",
    "MODE_TYPES",
    "pending_target",
    "is_multiline",
]
