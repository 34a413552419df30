"""Data models for Gmail Triage."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union


@dataclass
class Header:
    """A single (name, value) header pair."""

    name: str
    value: str


@dataclass
class Payload:
    """One node of a message's MIME tree as returned by the Gmail API."""

    mime_type: str = ""
    data: str | None = None  # base64url body, inline parts only
    size: int = 0
    attachment_id: str | None = None
    filename: str = ""
    parts: list[Payload] = field(default_factory=list)

    @classmethod
    def from_dict(cls, raw: dict) -> Payload:
        body = raw.get("body") or {}
        return cls(
            mime_type=raw.get("mimeType", ""),
            data=body.get("data"),
            size=body.get("size", 0),
            attachment_id=body.get("attachmentId"),
            filename=raw.get("filename", ""),
            parts=[cls.from_dict(p) for p in raw.get("parts") or []],
        )

    @property
    def is_multipart(self) -> bool:
        return bool(self.parts) or self.mime_type.startswith("multipart/")

    @property
    def is_attachment(self) -> bool:
        return bool(self.filename) or (self.attachment_id is not None and not self.data)


@dataclass
class RawMessage:
    """A full message as fetched from Gmail (``format="full"``)."""

    id: str
    headers: list[Header] = field(default_factory=list)
    payload: Payload = field(default_factory=Payload)

    @classmethod
    def from_dict(cls, raw: dict) -> RawMessage:
        payload = raw.get("payload") or {}
        return cls(
            id=raw["id"],
            headers=[Header(h["name"], h["value"]) for h in payload.get("headers", [])],
            payload=Payload.from_dict(payload),
        )


@dataclass(frozen=True)
class HttpLink:
    url: str


@dataclass(frozen=True)
class MailtoLink:
    address: str


@dataclass(frozen=True)
class Unsupported:
    raw: str


UnsubscribeTarget = Union[HttpLink, MailtoLink, Unsupported]


@dataclass(frozen=True)
class NormalizedMessage:
    """A message ready for display. ``rendered_body`` is never empty."""

    id: str
    subject: str
    rendered_body: str
    unsubscribe_target: UnsubscribeTarget | None = None
