"""Pure view rendering for the task list UI (no I/O, no state changes)."""

from dataclasses import dataclass
from typing import Callable, Dict, FrozenSet, List, Optional, Tuple

from prompt_toolkit.formatted_text import FormattedText

from core import Outcome, Task, Variant, format_task_title
from core.interface.tui_display import display_width, trim_display
from core.interface.tui_modes import Add, AddTag, Browse, EditTag, Mode, Note, Rename

HEADER = "Tasks:"
EMPTY_LIST = "(no tasks)"
CURSOR_MARK = ">"
INPUT_CURSOR = "▏"


@dataclass(frozen=True)
class ViewState:
    mode: Mode
    tasks: Tuple[Task, ...]
    cursor: int
    selection: FrozenSet[int]
    input_buffer: str
    outcome: Outcome
    variant: Variant


PROMPTS: Dict[type, Callable[[Mode], str]] = {
    Add: lambda mode: "Type in the name of the task:",
    AddTag: lambda mode: f'Tag for "{mode.title}" (enter to skip):',
    Rename: lambda mode: f'New name for "{mode.target.title}":',
    EditTag: lambda mode: f'Tag for "{mode.target.title}" (empty clears it):',
    Note: lambda mode: f'Note for "{mode.target.title}":',
}


def is_checked(view: ViewState, index: int) -> bool:
    # Selected and already-done share one marker.
    return index in view.selection or view.tasks[index].done


def _task_row(view: ViewState, index: int, width: Optional[int]) -> List[Tuple[str, str]]:
    task = view.tasks[index]
    is_cursor = index == view.cursor
    checked = is_checked(view, index)
    row_style = "class:cursor" if is_cursor else "class:text"
    prefix = f"{CURSOR_MARK if is_cursor else ' '} "
    box = f"[{'x' if checked else ' '}] "
    label = format_task_title(task, show_tag=view.variant.tags)
    if width:
        label = trim_display(label, max(0, width - display_width(prefix + box)))
    # A trimmed label never runs past the title unless the title is complete.
    title, tag = label[: len(task.title)], label[len(task.title):]
    row: List[Tuple[str, str]] = []
    if is_cursor:
        # Window scrolling follows the cursor row.
        row.append(("[SetCursorPosition]", ""))
    row += [
        (row_style, prefix),
        ("class:checked" if checked else row_style, box),
        (row_style, title),
    ]
    if tag:
        row.append(("class:tag", tag))
    row.append(("", "\n"))
    return row


def _browse_fragments(view: ViewState, width: Optional[int]) -> List[Tuple[str, str]]:
    done = sum(1 for task in view.tasks if task.done)
    parts: List[Tuple[str, str]] = [
        ("class:header", HEADER),
        ("class:text.dim", f" {done}/{len(view.tasks)} done\n\n"),
    ]
    if not view.tasks:
        parts.append(("class:text.dim", f"  {EMPTY_LIST}\n"))
    for index in range(len(view.tasks)):
        parts.extend(_task_row(view, index, width))
    return parts


def _editor_fragments(view: ViewState) -> List[Tuple[str, str]]:
    prompt = PROMPTS.get(type(view.mode))
    if prompt is None:
        raise TypeError(f"no prompt for mode {view.mode!r}")
    return [
        ("class:header", prompt(view.mode)),
        ("", "\n\n"),
        ("class:text.dim", "> "),
        ("class:input", view.input_buffer),
        ("class:input.cursor", INPUT_CURSOR),
        ("", "\n"),
    ]


def _status_fragments(outcome: Outcome) -> List[Tuple[str, str]]:
    if outcome is Outcome.NONE:
        return []
    style = "class:status.ok" if outcome is Outcome.SUCCESS else "class:status.fail"
    return [("", "\n"), (style, outcome.label), ("", "\n")]


def render_view(view: ViewState, width: Optional[int] = None) -> FormattedText:
    if isinstance(view.mode, Browse):
        parts = _browse_fragments(view, width)
    else:
        parts = _editor_fragments(view)
    parts.extend(_status_fragments(view.outcome))
    return FormattedText(parts)


__all__ = ["ViewState", "PROMPTS", "render_view", "is_checked", "HEADER", "EMPTY_LIST"]
