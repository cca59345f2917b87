"""Submit handlers for the editor modes, tried in turn by save_edit."""

from core.interface.tui_actions import finish_mutation
from core.interface.tui_modes import Add, AddTag, EditTag, Note, Rename


def handle_add_title(state, new_value: str) -> bool:
    if not isinstance(state.mode, Add):
        return False
    title = new_value.strip()
    if not title:
        state.cancel_edit()
        return True
    if state.variant.tags:
        state.start_editing(AddTag(title=title), "")
        return True
    outcome = state.client.add_task(title)
    state.cancel_edit()
    finish_mutation(state, outcome)
    return True


def handle_add_tag(state, new_value: str) -> bool:
    mode = state.mode
    if not isinstance(mode, AddTag):
        return False
    outcome = state.client.add_task(mode.title, tag=new_value.strip())
    state.cancel_edit()
    finish_mutation(state, outcome)
    return True


def handle_rename(state, new_value: str) -> bool:
    mode = state.mode
    if not isinstance(mode, Rename):
        return False
    title = new_value.strip()
    if not title:
        state.cancel_edit()
        return True
    outcome = state.client.rename_task(mode.target.id, title)
    state.cancel_edit()
    finish_mutation(state, outcome)
    return True


def handle_edit_tag(state, new_value: str) -> bool:
    mode = state.mode
    if not isinstance(mode, EditTag):
        return False
    outcome = state.client.edit_tag(mode.target.id, new_value.strip())
    state.cancel_edit()
    finish_mutation(state, outcome)
    return True


def handle_save_note(state, new_value: str) -> bool:
    mode = state.mode
    if not isinstance(mode, Note):
        return False
    outcome = state.client.save_note(mode.target.id, new_value)
    state.cancel_edit()
    finish_mutation(state, outcome)
    return True


def handle_delete_note(state) -> bool:
    mode = state.mode
    if not isinstance(mode, Note):
        return False
    outcome = state.client.delete_note(mode.target.id)
    state.cancel_edit()
    finish_mutation(state, outcome)
    return True


__all__ = [
    "handle_add_title",
    "handle_add_tag",
    "handle_rename",
    "handle_edit_tag",
    "handle_save_note",
    "handle_delete_note",
]
