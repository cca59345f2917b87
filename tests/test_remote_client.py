import pytest
import requests

from config import ClientConfig
from core import Outcome, Task, get_variant
from infrastructure.remote_client import (
    RemoteClient,
    RemoteStatusError,
    RemoteTransportError,
)


class DummyResponse:
    def __init__(self, status_code=200, text=""):
        self.status_code = status_code
        self.text = text


class DummySession:
    def __init__(self, responses=None, error=None):
        self.post_calls = []
        self._responses = list(responses or [])
        self._error = error

    def post(self, url, params=None, timeout=None):
        self.post_calls.append((url, params, timeout))
        if self._error is not None:
            raise self._error
        if self._responses:
            return self._responses.pop(0)
        return DummyResponse(200)


CONFIG = ClientConfig("http", "localhost", "8080", "bob", "pw", timeout=3.0)


def _client(session, variant="basic"):
    return RemoteClient(CONFIG, session=session, variant=get_variant(variant))


def test_every_call_carries_credentials():
    session = DummySession()
    client = _client(session)
    client.mark_done("4")
    client.add_task("Buy milk")
    for url, params, timeout in session.post_calls:
        assert params["user"] == "bob" and params["password"] == "pw"
        assert timeout == 3.0
    assert session.post_calls[0][0] == "http://localhost:8080/done"
    assert session.post_calls[0][1]["id"] == "4"
    assert session.post_calls[1][1]["task"] == "Buy milk"
    assert "tag" not in session.post_calls[1][1]


@pytest.mark.parametrize(
    "call, action, fields",
    [
        (lambda c: c.reset_task("9"), "reset", {"id": "9"}),
        (lambda c: c.delete_task("9"), "delete", {"id": "9"}),
        (lambda c: c.rename_task("9", "New"), "rename", {"id": "9", "task": "New"}),
        (lambda c: c.edit_tag("9", "work"), "edittag", {"id": "9", "tag": "work"}),
        (lambda c: c.save_note("9", "line1\nline2"), "newnote", {"id": "9", "note": "line1\nline2"}),
        (lambda c: c.delete_note("9"), "deletenote", {"id": "9"}),
        (lambda c: c.add_task("T", tag="x"), "new", {"task": "T", "tag": "x"}),
    ],
)
def test_mutation_endpoints(call, action, fields):
    session = DummySession()
    assert call(_client(session)) is Outcome.SUCCESS
    url, params, _ = session.post_calls[0]
    assert url == f"http://localhost:8080/{action}"
    for key, value in fields.items():
        assert params[key] == value


def test_non_200_is_failure_not_exception():
    session = DummySession([DummyResponse(500), DummyResponse(404)])
    client = _client(session)
    assert client.mark_done("1") is Outcome.FAILURE
    assert client.delete_task("1") is Outcome.FAILURE


def test_list_parses_body():
    session = DummySession([DummyResponse(200, "1``Buy milk``false\nbroken\n")])
    assert _client(session).list_tasks() == [Task(id="1", title="Buy milk", done=False)]
    assert session.post_calls[0][0].endswith("/list")


def test_list_uses_variant_schema():
    session = DummySession([DummyResponse(200, "1``Buy milk``false``home\n2``x``true\n")])
    tasks = _client(session, "tagged").list_tasks()
    assert [t.tag for t in tasks] == ["home"]


def test_list_non_200_raises_status_error():
    session = DummySession([DummyResponse(401, "nope")])
    with pytest.raises(RemoteStatusError) as excinfo:
        _client(session).list_tasks()
    assert excinfo.value.status_code == 401


def test_transport_error_is_wrapped():
    session = DummySession(error=requests.ConnectionError("refused"))
    with pytest.raises(RemoteTransportError, match="localhost"):
        _client(session).mark_done("1")


def test_timeout_is_transport_error():
    session = DummySession(error=requests.Timeout("slow"))
    with pytest.raises(RemoteTransportError):
        _client(session).list_tasks()


def test_get_note():
    session = DummySession([DummyResponse(200, "remember"), DummyResponse(404)])
    client = _client(session, "notes")
    assert client.get_note("3") == "remember"
    assert client.get_note("3") is None


def test_variant_defaults_from_config():
    client = RemoteClient(ClientConfig("http", "h", "1", "u", "p", variant="full"), session=DummySession())
    assert client.variant.tags and client.variant.notes
