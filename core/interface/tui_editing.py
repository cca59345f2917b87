"""Editing mode mixin for the interaction state."""

from core.interface.tui_modes import Browse, Mode, is_multiline


class EditingMixin:
    """Mixin providing the text-input buffer shared by all editor modes."""

    INPUT_CHAR_LIMIT = 256
    NOTE_CHAR_LIMIT = 4096

    mode: Mode
    input_buffer: str

    def start_editing(self, mode: Mode, current_value: str = "") -> None:
        """Enter an editor mode with the buffer pre-filled.

        Args:
            mode: Editor mode to switch to (carries the edited task, if any)
            current_value: Initial buffer contents
        """
        self.mode = mode
        self.input_buffer = current_value

    def input_limit(self) -> int:
        return self.NOTE_CHAR_LIMIT if is_multiline(self.mode) else self.INPUT_CHAR_LIMIT

    def insert_text(self, text: str) -> None:
        if not is_multiline(self.mode):
            text = text.replace("\r", " ").replace("\n", " ")
        room = max(0, self.input_limit() - len(self.input_buffer))
        self.input_buffer += text[:room]

    def delete_backward(self) -> None:
        self.input_buffer = self.input_buffer[:-1]

    def clear_input(self) -> None:
        self.input_buffer = ""

    def save_edit(self) -> None:
        """Submit the buffer to the handler of the current editor mode."""
        from core.interface.edit_handlers import (
            handle_add_tag,
            handle_add_title,
            handle_edit_tag,
            handle_rename,
            handle_save_note,
        )

        if isinstance(self.mode, Browse):
            return

        value = self.input_buffer
        for handler in (handle_add_title, handle_add_tag, handle_rename, handle_edit_tag, handle_save_note):
            if handler(self, value):
                return
        self.cancel_edit()

    def cancel_edit(self) -> None:
        """Drop the buffer and the pending target, back to the list."""
        self.mode = Browse()
        self.input_buffer = ""


__all__ = ["EditingMixin"]
