"""Tests for the Gmail API client functions."""

from unittest.mock import MagicMock

import httplib2
import pytest
from google.auth.exceptions import RefreshError
from googleapiclient.errors import HttpError

from gmail_triage import gmail_client
from gmail_triage.errors import RemoteError
from gmail_triage.gmail_client import fetch_unread_batch, make_mark_read, set_read_state


def _http_error(status: int) -> HttpError:
    return HttpError(httplib2.Response({"status": status}), b'{"error": {"message": "boom"}}')


class FakeBatch:
    """Stand-in for BatchHttpRequest that answers from a dict of responses."""

    def __init__(self, responses: dict, failures: dict | None = None, execute_errors: list | None = None):
        self.responses = responses
        self.failures = failures or {}
        self.execute_errors = list(execute_errors or [])
        self.requests: list = []

    def add(self, request, callback):
        self.requests.append((request, callback))

    def execute(self):
        if self.execute_errors:
            raise self.execute_errors.pop(0)
        for request, callback in reversed(self.requests):
            msg_id = request.msg_id
            if msg_id in self.failures:
                callback(msg_id, None, self.failures[msg_id])
            else:
                callback(msg_id, self.responses[msg_id], None)


def _make_service(ids, responses, **batch_kwargs):
    service = MagicMock()
    messages_api = service.users.return_value.messages.return_value
    messages_api.list.return_value.execute.return_value = {"messages": [{"id": i} for i in ids]}

    def _get(userId, id, format):
        request = MagicMock()
        request.msg_id = id
        return request

    messages_api.get.side_effect = _get
    batch = FakeBatch(responses, **batch_kwargs)
    service.new_batch_http_request.return_value = batch
    return service, batch


def test_fetch_unread_batch_keeps_list_order(newsletter_api_message, personal_api_message):
    ids = ["msg_nl_001", "msg_ps_001"]
    responses = {"msg_nl_001": newsletter_api_message, "msg_ps_001": personal_api_message}
    service, _ = _make_service(ids, responses)

    raws = fetch_unread_batch(service, limit=10)

    assert [r.id for r in raws] == ids
    kwargs = service.users.return_value.messages.return_value.list.call_args.kwargs
    assert kwargs["q"] == "is:unread"
    assert kwargs["maxResults"] == 10


def test_fetch_unread_batch_skips_failed_messages(newsletter_api_message, personal_api_message):
    ids = ["msg_nl_001", "msg_ps_001"]
    responses = {"msg_nl_001": newsletter_api_message, "msg_ps_001": personal_api_message}
    service, _ = _make_service(ids, responses, failures={"msg_nl_001": _http_error(404)})

    raws = fetch_unread_batch(service)

    assert [r.id for r in raws] == ["msg_ps_001"]


def test_fetch_unread_batch_empty_inbox():
    service, batch = _make_service([], {})
    service.users.return_value.messages.return_value.list.return_value.execute.return_value = {}

    assert fetch_unread_batch(service) == []
    assert batch.requests == []


def test_fetch_unread_batch_list_failure_raises_remote_error():
    service = MagicMock()
    service.users.return_value.messages.return_value.list.return_value.execute.side_effect = _http_error(401)

    with pytest.raises(RemoteError) as excinfo:
        fetch_unread_batch(service)
    assert excinfo.value.details["status"] == 401


def test_fetch_batch_retries_rate_limit(monkeypatch, personal_api_message):
    monkeypatch.setattr(gmail_client._execute_batch.retry, "sleep", lambda seconds: None)
    service, batch = _make_service(
        ["msg_ps_001"],
        {"msg_ps_001": personal_api_message},
        execute_errors=[_http_error(429)],
    )

    raws = fetch_unread_batch(service)

    assert [r.id for r in raws] == ["msg_ps_001"]
    assert batch.execute_errors == []


def test_set_read_state_removes_unread_label():
    service = MagicMock()
    set_read_state(service, "m1")
    service.users.return_value.messages.return_value.modify.assert_called_once_with(
        userId="me", id="m1", body={"removeLabelIds": ["UNREAD"]}
    )


def test_set_read_state_unread_adds_label():
    service = MagicMock()
    set_read_state(service, "m1", read=False)
    service.users.return_value.messages.return_value.modify.assert_called_once_with(
        userId="me", id="m1", body={"addLabelIds": ["UNREAD"]}
    )


def test_set_read_state_failure_raises_remote_error():
    service = MagicMock()
    service.users.return_value.messages.return_value.modify.return_value.execute.side_effect = _http_error(500)

    with pytest.raises(RemoteError):
        set_read_state(service, "m1")
    # No retry for mark-read
    assert service.users.return_value.messages.return_value.modify.return_value.execute.call_count == 1


@pytest.mark.parametrize(
    "error",
    [httplib2.ServerNotFoundError("Unable to find the server at gmail.googleapis.com"), RefreshError("invalid_grant")],
)
def test_set_read_state_transport_and_auth_failures_raise_remote_error(error):
    service = MagicMock()
    service.users.return_value.messages.return_value.modify.return_value.execute.side_effect = error

    with pytest.raises(RemoteError) as excinfo:
        set_read_state(service, "m1")
    assert excinfo.value.__cause__ is error


@pytest.mark.parametrize(
    "error",
    [httplib2.ServerNotFoundError("Unable to find the server at gmail.googleapis.com"), RefreshError("invalid_grant")],
)
def test_fetch_unread_batch_transport_and_auth_failures_raise_remote_error(error):
    service = MagicMock()
    service.users.return_value.messages.return_value.list.return_value.execute.side_effect = error

    with pytest.raises(RemoteError) as excinfo:
        fetch_unread_batch(service)
    assert excinfo.value.details["status"] is None


def test_make_mark_read():
    service = MagicMock()
    make_mark_read(service)("abc")
    kwargs = service.users.return_value.messages.return_value.modify.call_args.kwargs
    assert kwargs["id"] == "abc"


def test_raw_message_parsed(newsletter_api_message):
    service, _ = _make_service(["msg_nl_001"], {"msg_nl_001": newsletter_api_message})
    raw = fetch_unread_batch(service)[0]
    assert raw.headers[1].name == "Subject"
    assert raw.payload.mime_type == "multipart/alternative"
    assert [p.mime_type for p in raw.payload.parts] == ["text/plain", "text/html"]
