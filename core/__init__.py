from .status import Outcome
from .task import Task, format_task_title
from .variant import DEFAULT_VARIANT, VARIANTS, Variant, get_variant

__all__ = [
    "Outcome",
    "Task",
    "format_task_title",
    "Variant",
    "VARIANTS",
    "DEFAULT_VARIANT",
    "get_variant",
]
