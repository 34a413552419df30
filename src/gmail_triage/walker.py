"""Locating the displayable body inside a message's MIME tree."""

from __future__ import annotations

import logging

from .constants import NO_CONTENT_TEXT, RENDER_WIDTH
from .decoder import decode_text
from .errors import DecodeError
from .models import Payload
from .renderer import render

logger = logging.getLogger(__name__)


def _render_data(data: str | None, width: int) -> str:
    """Decode and render one node's inline data; '' when there is none."""
    if not data:
        return ""
    try:
        text = decode_text(data)
    except DecodeError as exc:
        logger.debug("Skipping undecodable body part: %s", exc)
        return ""
    return render(text, width=width)


def _walk(payload: Payload, width: int) -> str:
    body = _render_data(payload.data, width)
    if body.strip():
        return body

    plain: list[str] = []
    html: list[str] = []

    for part in payload.parts:
        if part.is_multipart:
            nested = _walk(part, width)
            if nested.strip():
                return nested
            continue
        if part.is_attachment:
            continue

        if part.mime_type == "text/plain":
            plain.append(_render_data(part.data, width))
        elif part.mime_type == "text/html":
            html.append(_render_data(part.data, width))

    html_text = "".join(html)
    if html_text.strip():
        return html_text
    plain_text = "".join(plain)
    if plain_text.strip():
        return plain_text
    return ""


def extract_body(payload: Payload, width: int = RENDER_WIDTH) -> str:
    """Return the rendered body of a message.

    Inline data on the node itself wins. Otherwise children are scanned in
    order: nested multipart containers are searched depth-first and the first
    one yielding content is used; among direct text children, HTML is
    preferred over plain text. Falls back to NO_CONTENT_TEXT, so the result
    is never empty.
    """
    return _walk(payload, width) or NO_CONTENT_TEXT
