from typing import List

from core import Task, Variant

FIELD_DELIMITER = "``"
RECORD_SEPARATOR = "\n"


class TaskListParser:
    """Line-oriented decoder for the `/list` response body.

    Each record is `id``title``done` (plus ``tag in tagged deployments).
    Records that do not split into exactly the expected number of fields are
    dropped without complaint; the server is trusted for everything else.
    """

    def __init__(self, variant: Variant) -> None:
        self.variant = variant

    def parse_record(self, line: str):
        fields = line.split(FIELD_DELIMITER)
        if len(fields) != self.variant.field_count:
            return None
        tag = fields[3] if self.variant.tags else None
        return Task(id=fields[0], title=fields[1], done=fields[2] == "true", tag=tag)

    def parse(self, body: str) -> List[Task]:
        tasks: List[Task] = []
        for line in body.split(RECORD_SEPARATOR):
            task = self.parse_record(line)
            if task is not None:
                tasks.append(task)
        return tasks


def parse_task_list(body: str, variant: Variant) -> List[Task]:
    return TaskListParser(variant).parse(body)
