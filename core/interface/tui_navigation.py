"""Cursor and selection helpers for the interaction state."""


def clamp_cursor(state) -> None:
    total = state.registry.count()
    if total <= 0:
        state.cursor = 0
        return
    state.cursor = max(0, min(state.cursor, total - 1))


def move_vertical_selection(state, delta: int) -> None:
    """
    Move the cursor by `delta`, clamping to the current list.

    On an empty list the cursor stays parked at 0.
    """
    total = state.registry.count()
    if total <= 0:
        state.cursor = 0
        return
    state.cursor = max(0, min(state.cursor + delta, total - 1))


def toggle_selection(state) -> None:
    if state.registry.count() <= 0:
        return
    clamp_cursor(state)
    if state.cursor in state.selection:
        state.selection.discard(state.cursor)
    else:
        state.selection.add(state.cursor)


__all__ = ["clamp_cursor", "move_vertical_selection", "toggle_selection"]
