"""Shared fixtures for tests."""

from __future__ import annotations

import base64

import pytest

from gmail_triage.models import HttpLink, MailtoLink, NormalizedMessage


def b64url(text: str) -> str:
    """Encode text the way Gmail does: URL-safe alphabet, no padding."""
    return base64.urlsafe_b64encode(text.encode("utf-8")).decode("ascii").rstrip("=")


def part(mime_type: str, text: str | None = None, parts: list[dict] | None = None, **extra) -> dict:
    """Build a Gmail API payload node."""
    node: dict = {"mimeType": mime_type, "body": {"size": 0}}
    if text is not None:
        node["body"] = {"size": len(text), "data": b64url(text)}
    if parts is not None:
        node["parts"] = parts
    node.update(extra)
    return node


@pytest.fixture
def newsletter_api_message() -> dict:
    """A typical multipart/alternative newsletter as returned by messages.get."""
    return {
        "id": "msg_nl_001",
        "threadId": "thr_001",
        "labelIds": ["UNREAD", "INBOX", "CATEGORY_PROMOTIONS"],
        "payload": {
            "mimeType": "multipart/alternative",
            "headers": [
                {"name": "From", "value": "Newsletter Team <noreply@example-newsletter.com>"},
                {"name": "Subject", "value": "Weekly Digest: Top Stories This Week"},
                {
                    "name": "List-Unsubscribe",
                    "value": "<mailto:unsub@example-newsletter.com>, <https://example-newsletter.com/unsub?u=1>",
                },
            ],
            "body": {"size": 0},
            "parts": [
                part("text/plain", "Plain version of the digest."),
                part("text/html", "<html><body><p>HTML version of the <b>digest</b>.</p></body></html>"),
            ],
        },
    }


@pytest.fixture
def personal_api_message() -> dict:
    """A single-part plain-text message with no unsubscribe header."""
    return {
        "id": "msg_ps_001",
        "payload": {
            "mimeType": "text/plain",
            "headers": [
                {"name": "From", "value": "Alice Smith <alice.smith@gmail.com>"},
                {"name": "Subject", "value": "Re: Lunch tomorrow?"},
            ],
            "body": {"size": 26, "data": b64url("Are we still on for 12:30?")},
        },
    }


@pytest.fixture
def messages() -> list[NormalizedMessage]:
    long_body = "\n".join(f"line {i}" for i in range(50))
    return [
        NormalizedMessage(
            id="m1",
            subject="Weekly Digest",
            rendered_body=long_body,
            unsubscribe_target=HttpLink("https://example.com/unsub"),
        ),
        NormalizedMessage(
            id="m2",
            subject="Product news",
            rendered_body="Short body",
            unsubscribe_target=MailtoLink("unsub@example.com"),
        ),
        NormalizedMessage(id="m3", subject="Lunch?", rendered_body="See you at noon."),
    ]
