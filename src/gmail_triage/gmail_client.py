"""Gmail API client functions for fetching unread messages and marking them read."""

from __future__ import annotations

import logging
from typing import Callable

import httplib2
from google.auth.exceptions import GoogleAuthError
from googleapiclient.errors import HttpError
from googleapiclient.http import BatchHttpRequest
from tenacity import retry, retry_if_exception, stop_after_attempt, wait_exponential

from gmail_triage.constants import FETCH_BATCH_SIZE, UNREAD_LABEL, UNREAD_QUERY
from gmail_triage.errors import RemoteError
from gmail_triage.models import RawMessage

logger = logging.getLogger(__name__)

# HTTP status errors plus transport and token-refresh failures
_REMOTE_FAILURES = (HttpError, httplib2.HttpLib2Error, GoogleAuthError, OSError)


def _is_retryable_http_error(exc: BaseException) -> bool:
    return isinstance(exc, HttpError) and exc.resp.status in (429, 500, 503)


def _remote_error(action: str, exc: Exception) -> RemoteError:
    status = getattr(getattr(exc, "resp", None), "status", None)
    return RemoteError(f"{action} failed: {exc}", details={"status": status})


def list_unread_ids(service, limit: int = FETCH_BATCH_SIZE) -> list[str]:
    """List the IDs of up to ``limit`` unread messages, newest first."""
    resp = (
        service.users()
        .messages()
        .list(userId="me", q=UNREAD_QUERY, maxResults=limit, fields="messages/id")
        .execute()
    )
    return [msg["id"] for msg in resp.get("messages", [])][:limit]


@retry(
    retry=retry_if_exception(_is_retryable_http_error),
    wait=wait_exponential(multiplier=1, min=1, max=60),
    stop=stop_after_attempt(5),
    reraise=True,
)
def _execute_batch(batch: BatchHttpRequest) -> None:
    batch.execute()


def fetch_messages(service, message_ids: list[str]) -> list[RawMessage]:
    """Fetch full messages in one BatchHttpRequest, keeping ``message_ids`` order.

    Messages that fail individually are logged and left out.
    """
    if not message_ids:
        return []

    fetched: dict[str, RawMessage] = {}
    batch = service.new_batch_http_request()

    def _make_callback(msg_id: str):
        def _cb(request_id, response, exception):
            if exception is not None:
                logger.warning("Failed to fetch message %s: %s", msg_id, exception)
                return
            try:
                fetched[msg_id] = RawMessage.from_dict(response)
            except (KeyError, TypeError) as exc:
                logger.warning("Malformed message %s skipped: %s", msg_id, exc)

        return _cb

    for msg_id in message_ids:
        batch.add(
            service.users().messages().get(userId="me", id=msg_id, format="full"),
            callback=_make_callback(msg_id),
        )

    _execute_batch(batch)

    return [fetched[msg_id] for msg_id in message_ids if msg_id in fetched]


def fetch_unread_batch(service, limit: int = FETCH_BATCH_SIZE) -> list[RawMessage]:
    """Fetch up to ``limit`` unread messages. Raises RemoteError on API failure."""
    try:
        ids = list_unread_ids(service, limit=limit)
        logger.info("Found %d unread messages", len(ids))
        messages = fetch_messages(service, ids)
    except _REMOTE_FAILURES as exc:
        raise _remote_error("Fetching unread messages", exc) from exc

    logger.info("Fetched %d of %d messages", len(messages), len(ids))
    return messages


def set_read_state(service, message_id: str, read: bool = True) -> None:
    """Add or remove the UNREAD label on one message. Raises RemoteError."""
    labels = {"removeLabelIds": [UNREAD_LABEL]} if read else {"addLabelIds": [UNREAD_LABEL]}
    try:
        service.users().messages().modify(userId="me", id=message_id, body=labels).execute()
    except _REMOTE_FAILURES as exc:
        raise _remote_error("Updating read state", exc) from exc
    logger.info("Message %s marked %s", message_id, "read" if read else "unread")


def make_mark_read(service) -> Callable[[str], None]:
    """Bind ``service`` into the mark-read callable the controller expects."""

    def _mark_read(message_id: str) -> None:
        set_read_state(service, message_id, read=True)

    return _mark_read
