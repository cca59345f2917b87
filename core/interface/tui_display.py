"""Text width helpers with proper Unicode width handling."""

from wcwidth import wcwidth


def display_width(text: str) -> int:
    """Return visual width of text accounting for wide/narrow characters."""
    width = 0
    for ch in text:
        w = wcwidth(ch)
        if w is None:
            w = 0
        width += max(0, w)
    return width


def trim_display(text: str, width: int, ellipsis: str = "…") -> str:
    """Trim text so visible width doesn't exceed `width`, marking the cut."""
    if display_width(text) <= width:
        return text
    if width <= 0:
        return ""
    budget = width - display_width(ellipsis)
    acc = []
    used = 0
    for ch in text:
        w = wcwidth(ch) or 0
        if w < 0:
            w = 0
        if used + w > budget:
            break
        acc.append(ch)
        used += w
    return "".join(acc) + ellipsis if budget >= 0 else ""


__all__ = ["display_width", "trim_display"]
