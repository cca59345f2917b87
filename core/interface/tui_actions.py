"""Browse-mode actions extracted from InteractionState to keep it slim."""

import logging
from typing import Callable, List, Optional

from core import Outcome, Task
from core.interface.tui_modes import Add, EditTag, Note, Rename
from core.interface.tui_navigation import clamp_cursor

logger = logging.getLogger("doit.tui")


def current_task(state) -> Optional[Task]:
    if state.registry.count() <= 0:
        return None
    clamp_cursor(state)
    return state.registry.get(state.cursor)


def refresh_registry(state) -> Outcome:
    outcome = state.registry.refresh()
    state.selection.clear()
    clamp_cursor(state)
    return outcome


def finish_mutation(state, outcome: Outcome) -> None:
    """Record the action result and resync with the server, success or not."""
    refreshed = refresh_registry(state)
    state.last_outcome = Outcome.combine([outcome, refreshed])


def action_targets(state) -> List[int]:
    total = state.registry.count()
    if total <= 0:
        return []
    if state.variant.toggle_done:
        clamp_cursor(state)
        return [state.cursor]
    return sorted(index for index in state.selection if 0 <= index < total)


def run_batch(state, call: Callable[[Task], Outcome]) -> None:
    targets = action_targets(state)
    if not targets:
        return
    tasks = [state.registry.get(index) for index in targets]
    outcomes = [call(task) for task in tasks]
    logger.info("Applied action to %d task(s): %s", len(tasks), [o.value[0] for o in outcomes])
    finish_mutation(state, Outcome.combine(outcomes))


def commit_current(state) -> None:
    client = state.client
    if state.variant.toggle_done:
        run_batch(state, lambda task: client.reset_task(task.id) if task.done else client.mark_done(task.id))
    else:
        run_batch(state, lambda task: client.mark_done(task.id))


def reset_selected(state) -> None:
    if state.variant.toggle_done:
        return
    run_batch(state, lambda task: state.client.reset_task(task.id))


def delete_targets(state) -> None:
    run_batch(state, lambda task: state.client.delete_task(task.id))


def manual_refresh(state) -> None:
    if refresh_registry(state) is Outcome.FAILURE:
        state.last_outcome = Outcome.FAILURE


def open_add(state) -> None:
    state.start_editing(Add(), "")


def open_rename(state) -> None:
    task = current_task(state)
    if task is None:
        return
    state.start_editing(Rename(target=task), task.title)


def open_edit_tag(state) -> None:
    if not state.variant.tags:
        return
    task = current_task(state)
    if task is None:
        return
    state.start_editing(EditTag(target=task), task.tag or "")


def open_note(state) -> None:
    if not state.variant.notes:
        return
    task = current_task(state)
    if task is None:
        return
    note = state.client.get_note(task.id)
    state.start_editing(Note(target=task.with_note(note)), note or "")


__all__ = [
    "current_task",
    "refresh_registry",
    "finish_mutation",
    "action_targets",
    "commit_current",
    "reset_selected",
    "delete_targets",
    "manual_refresh",
    "open_add",
    "open_rename",
    "open_edit_tag",
    "open_note",
]
