"""Header extraction: subject and List-Unsubscribe."""

from __future__ import annotations

import re

from .models import Header, HttpLink, MailtoLink, UnsubscribeTarget, Unsupported

_BRACKETED_RE = re.compile(r"<([^<>]*)>")


def _first_header(headers: list[Header], name: str) -> str | None:
    for header in headers:
        if header.name == name:
            return header.value
    return None


def extract_subject(headers: list[Header]) -> str:
    return _first_header(headers, "Subject") or ""


def classify_unsubscribe(directive: str) -> UnsubscribeTarget:
    """Classify a single unsubscribe directive.

      "https://x.com/u"    -> HttpLink("https://x.com/u")
      "mailto:u@x.com"     -> MailtoLink("u@x.com")
      anything else        -> Unsupported(directive)
    """
    if directive.startswith("http"):
        return HttpLink(directive)
    if directive.startswith("mailto:"):
        return MailtoLink(directive[len("mailto:"):])
    return Unsupported(directive)


def extract_unsubscribe_target(headers: list[Header]) -> UnsubscribeTarget | None:
    """Pick the unsubscribe directive from the List-Unsubscribe header.

    Among ``<...>`` candidates the first HTTP(S) one wins, then the first
    candidate of any kind. A header with no brackets at all is classified as
    a whole.
    """
    value = _first_header(headers, "List-Unsubscribe")
    if value is None:
        return None

    candidates = [c.strip() for c in _BRACKETED_RE.findall(value)]
    if candidates:
        chosen = next((c for c in candidates if c.startswith("http")), candidates[0])
    else:
        chosen = value.strip()
    return classify_unsubscribe(chosen)
