"""Turning fetched Gmail messages into displayable ones."""

from __future__ import annotations

from .constants import RENDER_WIDTH
from .headers import extract_subject, extract_unsubscribe_target
from .models import NormalizedMessage, RawMessage
from .walker import extract_body


def normalize_message(raw: RawMessage, width: int = RENDER_WIDTH) -> NormalizedMessage:
    return NormalizedMessage(
        id=raw.id,
        subject=extract_subject(raw.headers),
        rendered_body=extract_body(raw.payload, width=width),
        unsubscribe_target=extract_unsubscribe_target(raw.headers),
    )
