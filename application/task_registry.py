import logging
from typing import Iterator, Tuple

from core import Outcome, Task
from infrastructure.remote_client import RemoteStatusError

from .ports import TaskService

logger = logging.getLogger("doit.registry")


class TaskRegistry:
    """Ordered in-memory mirror of the server's task list.

    Contents are only ever replaced wholesale by refresh(); indices into the
    previous snapshot are meaningless afterwards.
    """

    def __init__(self, service: TaskService) -> None:
        self.service = service
        self._tasks: Tuple[Task, ...] = ()

    @property
    def tasks(self) -> Tuple[Task, ...]:
        return self._tasks

    def refresh(self) -> Outcome:
        try:
            tasks = self.service.list_tasks()
        except RemoteStatusError as exc:
            logger.warning("List refresh failed, keeping %d cached tasks: %s", len(self._tasks), exc)
            return Outcome.FAILURE
        self._tasks = tuple(tasks)
        logger.debug("Registry refreshed with %d tasks", len(self._tasks))
        return Outcome.SUCCESS

    def load(self) -> None:
        """Initial fetch: any remote failure propagates to the caller."""
        self._tasks = tuple(self.service.list_tasks())

    def get(self, index: int) -> Task:
        return self._tasks[index]

    def count(self) -> int:
        return len(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)
