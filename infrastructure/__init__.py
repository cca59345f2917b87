from .remote_client import RemoteClient, RemoteClientError, RemoteStatusError, RemoteTransportError
from .task_list_parser import FIELD_DELIMITER, TaskListParser, parse_task_list

__all__ = [
    "RemoteClient",
    "RemoteClientError",
    "RemoteStatusError",
    "RemoteTransportError",
    "FIELD_DELIMITER",
    "TaskListParser",
    "parse_task_list",
]
