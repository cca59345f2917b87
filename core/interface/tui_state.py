"""Interaction state machine: mode, cursor, selection and key dispatch."""

import logging
from typing import Callable, Dict, Optional, Set, Union

from prompt_toolkit.formatted_text import FormattedText
from prompt_toolkit.keys import Keys

from core import Outcome, Task, Variant
from infrastructure.remote_client import RemoteClientError, RemoteTransportError
from core.interface.edit_handlers import handle_delete_note
from core.interface.tui_actions import (
    commit_current,
    delete_targets,
    manual_refresh,
    open_add,
    open_edit_tag,
    open_note,
    open_rename,
    reset_selected,
)
from core.interface.tui_editing import EditingMixin
from core.interface.tui_modes import Add, AddTag, Browse, EditTag, Mode, Note, Rename, pending_target
from core.interface.tui_navigation import move_vertical_selection, toggle_selection
from core.interface.tui_render import ViewState, render_view

logger = logging.getLogger("doit.tui")

QUIT_KEYS = frozenset({Keys.ControlC.value})
HOME_KEYS = frozenset({Keys.Home.value, Keys.Escape.value})
ENTER_KEYS = frozenset({Keys.ControlM.value, Keys.ControlJ.value})
BACKSPACE_KEY = Keys.ControlH.value
CLEAR_INPUT_KEY = Keys.ControlU.value
SAVE_NOTE_KEY = Keys.ControlS.value
DELETE_NOTE_KEY = Keys.ControlD.value
PASTE_KEY = Keys.BracketedPaste.value


def key_name(key: Union[Keys, str]) -> str:
    return key.value if isinstance(key, Keys) else str(key)


class InteractionState(EditingMixin):
    """Owns everything the UI knows between two key events.

    One key is handled completely, remote calls included, before the next one
    is accepted. Transport failures are parked in `fatal_error`; once it is set
    (or a quit was requested) `should_exit` turns true and further keys are
    ignored.
    """

    def __init__(self, client, registry, variant: Variant) -> None:
        self.client = client
        self.registry = registry
        self.variant = variant
        self.mode: Mode = Browse()
        self.cursor: int = 0
        self.selection: Set[int] = set()
        self.input_buffer: str = ""
        self.last_outcome: Outcome = Outcome.NONE
        self.fatal_error: Optional[RemoteClientError] = None
        self.quit_requested: bool = False
        self.browse_bindings: Dict[str, Callable[[], None]] = self._build_browse_bindings()
        self.mode_handlers: Dict[type, Callable[[str, str], None]] = {
            Browse: self._handle_browse,
            Add: self._handle_text_entry,
            AddTag: self._handle_text_entry,
            Rename: self._handle_text_entry,
            EditTag: self._handle_text_entry,
            Note: self._handle_note,
        }

    @property
    def pending_target(self) -> Optional[Task]:
        return pending_target(self.mode)

    @property
    def should_exit(self) -> bool:
        return self.quit_requested or self.fatal_error is not None

    def request_quit(self) -> None:
        self.quit_requested = True

    def _build_browse_bindings(self) -> Dict[str, Callable[[], None]]:
        up = lambda: move_vertical_selection(self, -1)
        down = lambda: move_vertical_selection(self, 1)
        delete = lambda: delete_targets(self)
        bindings: Dict[str, Callable[[], None]] = {
            Keys.Up.value: up,
            "k": up,
            Keys.Down.value: down,
            "j": down,
            " ": lambda: toggle_selection(self),
            "y": lambda: commit_current(self),
            "d": delete,
            Keys.Delete.value: delete,
            "a": lambda: open_add(self),
            "r": lambda: open_rename(self),
            Keys.ControlR.value: lambda: manual_refresh(self),
            "q": self.request_quit,
        }
        if not self.variant.toggle_done:
            bindings["u"] = lambda: reset_selected(self)
        if self.variant.tags:
            bindings["t"] = lambda: open_edit_tag(self)
        if self.variant.notes:
            bindings["n"] = lambda: open_note(self)
        return bindings

    def handle_key(self, key: Union[Keys, str], data: str = "") -> None:
        name = key_name(key)
        if name in QUIT_KEYS:
            self.request_quit()
            return
        if self.should_exit:
            return
        handler = self.mode_handlers.get(type(self.mode))
        if handler is None:
            raise TypeError(f"no key handler for mode {self.mode!r}")
        try:
            handler(name, data)
        except RemoteTransportError as exc:
            logger.error("Leaving the UI after transport failure: %s", exc)
            self.fatal_error = exc

    def _handle_browse(self, key: str, data: str) -> None:
        action = self.browse_bindings.get(key)
        if action:
            action()

    def _handle_text_entry(self, key: str, data: str) -> None:
        if key in HOME_KEYS:
            self.cancel_edit()
        elif key in ENTER_KEYS:
            self.save_edit()
        else:
            self._edit_buffer(key, data)

    def _handle_note(self, key: str, data: str) -> None:
        if key in HOME_KEYS:
            self.cancel_edit()
        elif key == SAVE_NOTE_KEY:
            self.save_edit()
        elif key == DELETE_NOTE_KEY:
            handle_delete_note(self)
        elif key in ENTER_KEYS:
            self.insert_text("\n")
        else:
            self._edit_buffer(key, data)

    def _edit_buffer(self, key: str, data: str) -> None:
        if key == BACKSPACE_KEY:
            self.delete_backward()
        elif key == CLEAR_INPUT_KEY:
            self.clear_input()
        elif key == PASTE_KEY:
            self.insert_text(data)
        elif len(key) == 1 and key.isprintable():
            self.insert_text(key)

    def view(self) -> ViewState:
        return ViewState(
            mode=self.mode,
            tasks=self.registry.tasks,
            cursor=self.cursor,
            selection=frozenset(self.selection),
            input_buffer=self.input_buffer,
            outcome=self.last_outcome,
            variant=self.variant,
        )

    def render(self, width: Optional[int] = None) -> FormattedText:
        """Produce one frame; the status banner is consumed by it."""
        fragments = render_view(self.view(), width)
        self.last_outcome = Outcome.NONE
        return fragments


__all__ = ["InteractionState", "key_name", "QUIT_KEYS", "HOME_KEYS", "ENTER_KEYS"]
