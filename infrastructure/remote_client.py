import logging
from typing import Any, Dict, List, Optional

import requests

from config import ClientConfig
from core import Outcome, Task, Variant, get_variant

from .task_list_parser import parse_task_list

logger = logging.getLogger("doit.remote")


class RemoteClientError(RuntimeError):
    pass


class RemoteTransportError(RemoteClientError):
    pass


class RemoteStatusError(RemoteClientError):
    def __init__(self, action: str, status_code: int) -> None:
        super().__init__(f"/{action} returned HTTP {status_code}")
        self.action = action
        self.status_code = status_code


class RemoteClient:
    """Blocking client for the task service: one POST per action.

    Credentials travel as query parameters on every request. Mutations report
    an Outcome; connection failures and timeouts raise RemoteTransportError.
    """

    def __init__(
        self,
        config: ClientConfig,
        session: Optional[requests.Session] = None,
        variant: Optional[Variant] = None,
    ) -> None:
        self.config = config
        self.session = session or requests.Session()
        self.variant = variant or get_variant(config.variant)
        self.timeout = config.timeout

    def _params(self, fields: Dict[str, Any]) -> Dict[str, str]:
        params = {"user": self.config.username, "password": self.config.password}
        for key, value in fields.items():
            if value is not None:
                params[key] = str(value)
        return params

    def request(self, action: str, **fields: Any) -> requests.Response:
        url = f"{self.config.base_url}/{action}"
        try:
            resp = self.session.post(url, params=self._params(fields), timeout=self.timeout)
        except requests.RequestException as exc:
            logger.error("/%s failed: %s", action, exc)
            raise RemoteTransportError(f"cannot reach {self.config.base_url}: {exc}") from exc
        logger.debug("/%s -> HTTP %s", action, resp.status_code)
        return resp

    def _mutate(self, action: str, **fields: Any) -> Outcome:
        resp = self.request(action, **fields)
        outcome = Outcome.from_status(resp.status_code)
        if outcome is Outcome.FAILURE:
            logger.warning("/%s rejected with HTTP %s", action, resp.status_code)
        return outcome

    def list_tasks(self) -> List[Task]:
        resp = self.request("list")
        if resp.status_code != 200:
            raise RemoteStatusError("list", resp.status_code)
        return parse_task_list(resp.text, self.variant)

    def add_task(self, title: str, tag: Optional[str] = None) -> Outcome:
        return self._mutate("new", task=title, tag=tag)

    def mark_done(self, task_id: str) -> Outcome:
        return self._mutate("done", id=task_id)

    def reset_task(self, task_id: str) -> Outcome:
        return self._mutate("reset", id=task_id)

    def delete_task(self, task_id: str) -> Outcome:
        return self._mutate("delete", id=task_id)

    def rename_task(self, task_id: str, title: str) -> Outcome:
        return self._mutate("rename", id=task_id, task=title)

    def edit_tag(self, task_id: str, tag: str) -> Outcome:
        return self._mutate("edittag", id=task_id, tag=tag)

    def save_note(self, task_id: str, note: str) -> Outcome:
        return self._mutate("newnote", id=task_id, note=note)

    def get_note(self, task_id: str) -> Optional[str]:
        resp = self.request("getnote", id=task_id)
        if resp.status_code != 200:
            return None
        return resp.text

    def delete_note(self, task_id: str) -> Outcome:
        return self._mutate("deletenote", id=task_id)
