"""Format detection and fixed-width text rendering of message bodies.

HTML goes straight through html2text. Lightweight markup (Markdown-style
headings, emphasis, links, bullets) is converted to HTML first so both
origins share the same renderer. Anything else is shown as-is.
"""

from __future__ import annotations

import enum
import logging
import re

import html2text
import markdown

from .constants import RENDER_WIDTH

logger = logging.getLogger(__name__)

_HTML_ENTITIES = ("&lt;", "&gt;", "&amp;")
_HTML_TAG_RE = re.compile(
    r"<(?:!doctype|html|head|body|div|span|p|br|table|a)\b[^>]*>",
    re.IGNORECASE,
)
_MARKUP_RES = (
    re.compile(r"^#{1,6}\s+\S", re.MULTILINE),  # headings
    re.compile(r"\*\*[^*\n]+\*\*|__[^_\n]+__"),  # strong emphasis
    re.compile(r"\[[^\]\n]+\]\([^)\s]+\)"),  # links
    re.compile(r"^\s{0,3}[-*+]\s+\S", re.MULTILINE),  # bullets
)


class TextFormat(enum.Enum):
    HTML = "html"
    MARKUP = "markup"
    PLAIN = "plain"


def classify(text: str) -> TextFormat:
    """Guess whether decoded body text is HTML, lightweight markup or plain."""
    if any(entity in text for entity in _HTML_ENTITIES) or _HTML_TAG_RE.search(text):
        return TextFormat.HTML
    if any(pattern.search(text) for pattern in _MARKUP_RES):
        return TextFormat.MARKUP
    return TextFormat.PLAIN


def html_to_text(html: str, width: int = RENDER_WIDTH) -> str:
    """Render HTML as plain text wrapped at ``width`` columns."""
    h = html2text.HTML2Text()
    h.body_width = width
    h.ignore_images = True
    h.unicode_snob = True
    return h.handle(html).strip("\n")


def markup_to_html(text: str) -> str:
    return markdown.markdown(text, extensions=["extra", "sane_lists"])


def render(text: str, width: int = RENDER_WIDTH) -> str:
    """Render decoded body text for a terminal of ``width`` columns.

    Never raises: if a renderer fails the input is returned unchanged.
    """
    fmt = classify(text)
    if fmt is TextFormat.PLAIN:
        return text

    try:
        html = text if fmt is TextFormat.HTML else markup_to_html(text)
        return html_to_text(html, width=width)
    except Exception:  # noqa: BLE001
        logger.warning("Failed to render %s body, showing it verbatim", fmt.value, exc_info=True)
        return text
