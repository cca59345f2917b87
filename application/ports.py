from typing import List, Optional, Protocol

from core import Outcome, Task


class TaskService(Protocol):
    def list_tasks(self) -> List[Task]:
        ...

    def add_task(self, title: str, tag: Optional[str] = None) -> Outcome:
        ...

    def mark_done(self, task_id: str) -> Outcome:
        ...

    def reset_task(self, task_id: str) -> Outcome:
        ...

    def delete_task(self, task_id: str) -> Outcome:
        ...

    def rename_task(self, task_id: str, title: str) -> Outcome:
        ...

    def edit_tag(self, task_id: str, tag: str) -> Outcome:
        ...

    def save_note(self, task_id: str, note: str) -> Outcome:
        ...

    def get_note(self, task_id: str) -> Optional[str]:
        ...

    def delete_note(self, task_id: str) -> Outcome:
        ...
