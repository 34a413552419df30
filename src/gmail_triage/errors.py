"""Exceptions raised by Gmail Triage."""

from __future__ import annotations

from typing import Any


class TriageError(Exception):
    """Base exception for all Gmail Triage errors."""

    user_message = "An error occurred"

    def __init__(self, message: str | None = None, details: dict[str, Any] | None = None) -> None:
        self.message = message or self.user_message
        self.details = details or {}
        super().__init__(self.message)


class DecodeError(TriageError):
    """Encoded body data is malformed or not valid UTF-8."""

    user_message = "Could not decode message content"


class RemoteError(TriageError):
    """A Gmail API call failed."""

    user_message = "Gmail request failed"


class LinkOpenError(TriageError):
    """The system link handler could not open a URL."""

    user_message = "Could not open link"


class UnsupportedPlatformError(LinkOpenError):
    """No link handler is known for the current platform."""

    user_message = "Unsupported operating system"


class StartupError(TriageError):
    """The initial session or fetch failed; the interactive loop cannot start."""

    user_message = "Could not start Gmail Triage"
