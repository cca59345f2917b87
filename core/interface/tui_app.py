#!/usr/bin/env python3
"""TUI application - DoitTUI wires the interaction state into prompt_toolkit."""

import os
from typing import Optional

from prompt_toolkit.application import Application
from prompt_toolkit.formatted_text import FormattedText
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.keys import Keys
from prompt_toolkit.layout import HSplit, Layout, Window
from prompt_toolkit.layout.controls import FormattedTextControl
from prompt_toolkit.styles import Style

from core.interface.tui_footer import build_footer_text
from core.interface.tui_state import InteractionState
from core.interface.tui_themes import DEFAULT_THEME, build_style


class DoitTUI:
    """Full-screen shell: every key goes to the state machine, every frame comes from it."""

    @classmethod
    def build_style(cls, theme: str) -> Style:
        return build_style(theme)

    def __init__(self, state: InteractionState, theme: str = DEFAULT_THEME, input=None, output=None):
        self.state = state
        self.style = self.build_style(theme)

        kb = KeyBindings()

        @kb.add(Keys.Any, eager=True)
        def _(event):
            self._on_key(event)

        self.body_control = FormattedTextControl(self.get_body_text, show_cursor=False, focusable=True)
        self.main_window = Window(content=self.body_control, always_hide_cursor=True, wrap_lines=True)
        self.footer = Window(content=FormattedTextControl(self.get_footer_text), height=1, style="class:text.dim")
        root = HSplit([self.main_window, Window(height=1, char="─", style="class:border"), self.footer])

        self.app = Application(
            layout=Layout(root, focused_element=self.main_window),
            key_bindings=kb,
            style=self.style,
            full_screen=True,
            input=input,
            output=output,
        )
        # Esc must not wait for the rest of a possible ANSI sequence.
        try:
            self.app.ttimeoutlen = max(0.0, float(os.getenv("DOIT_TUI_TTIMEOUTLEN", "0.05")))
        except ValueError:
            self.app.ttimeoutlen = 0.05

    @staticmethod
    def get_terminal_width() -> int:
        """Get current terminal width, default to 100 if unavailable."""
        try:
            return os.get_terminal_size().columns
        except (AttributeError, ValueError, OSError):
            return 100

    def _on_key(self, event) -> None:
        key_press = event.key_sequence[0]
        self.state.handle_key(key_press.key, event.data)
        if self.state.should_exit:
            event.app.exit()

    def get_body_text(self) -> FormattedText:
        return self.state.render(width=self.get_terminal_width())

    def get_footer_text(self) -> FormattedText:
        return build_footer_text(self.state.mode, self.state.variant)

    def run(self) -> Optional[object]:
        return self.app.run()


__all__ = ["DoitTUI"]
