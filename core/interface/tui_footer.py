"""Footer renderer: key hints for the current mode."""

from typing import List, Tuple

from prompt_toolkit.formatted_text import FormattedText

from core import Variant
from core.interface.tui_modes import Browse, Mode, Note


def _browse_hints(variant: Variant) -> List[Tuple[str, str]]:
    hints = [("↑/k ↓/j", "move"), ("space", "select")]
    if variant.toggle_done:
        hints.append(("y", "done/undo"))
    else:
        hints.extend([("y", "mark done"), ("u", "reset")])
    hints.extend([("d", "delete"), ("a", "add"), ("r", "rename")])
    if variant.tags:
        hints.append(("t", "tag"))
    if variant.notes:
        hints.append(("n", "note"))
    hints.extend([("^R", "reload"), ("q", "quit")])
    return hints


def footer_hints(mode: Mode, variant: Variant) -> List[Tuple[str, str]]:
    if isinstance(mode, Browse):
        return _browse_hints(variant)
    if isinstance(mode, Note):
        return [("^S", "save"), ("^D", "delete note"), ("esc/home", "discard"), ("^C", "quit")]
    return [("enter", "submit"), ("esc/home", "cancel"), ("^U", "clear"), ("^C", "quit")]


def build_footer_text(mode: Mode, variant: Variant) -> FormattedText:
    parts: List[Tuple[str, str]] = []
    for index, (key, label) in enumerate(footer_hints(mode, variant)):
        if index:
            parts.append(("class:border", " · "))
        parts.append(("class:header", key))
        parts.append(("class:text.dim", f" {label}"))
    return FormattedText(parts)


__all__ = ["build_footer_text", "footer_hints"]
