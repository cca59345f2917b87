from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class Variant:
    """Feature set of a deployment: list schema, editors and commit semantics."""

    name: str
    tags: bool = False
    notes: bool = False
    # False: commit marks the whole selection done; True: commit toggles the cursor task.
    toggle_done: bool = False

    @property
    def field_count(self) -> int:
        return 4 if self.tags else 3


VARIANTS: Dict[str, Variant] = {
    "basic": Variant("basic"),
    "tagged": Variant("tagged", tags=True, toggle_done=True),
    "notes": Variant("notes", notes=True, toggle_done=True),
    "full": Variant("full", tags=True, notes=True, toggle_done=True),
}

DEFAULT_VARIANT = "basic"


def get_variant(name: str) -> Variant:
    variant = VARIANTS.get((name or "").strip().lower())
    if variant is None:
        raise ValueError(f"unknown variant {name!r} (expected one of: {', '.join(VARIANTS)})")
    return variant
