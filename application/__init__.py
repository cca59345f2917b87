from .ports import TaskService
from .task_registry import TaskRegistry

__all__ = ["TaskService", "TaskRegistry"]
