"""Initial fetch: pull the unread batch and normalize it before the UI starts."""

from __future__ import annotations

from .constants import FETCH_BATCH_SIZE, RENDER_WIDTH
from .display import console, create_progress
from .errors import RemoteError, StartupError
from .gmail_client import fetch_unread_batch
from .models import NormalizedMessage
from .normalizer import normalize_message


def load_mailbox(
    service,
    limit: int = FETCH_BATCH_SIZE,
    width: int = RENDER_WIDTH,
) -> list[NormalizedMessage]:
    """Fetch and render up to ``limit`` unread messages.

    Raises StartupError if Gmail cannot be reached.
    """
    console.print("[bold]Fetching unread messages...[/bold]")
    try:
        raws = fetch_unread_batch(service, limit=limit)
    except RemoteError as exc:
        raise StartupError(f"Could not fetch unread messages: {exc}") from exc

    messages: list[NormalizedMessage] = []
    with create_progress("Rendering messages") as progress:
        task = progress.add_task("rendering", total=len(raws))
        for raw in raws:
            messages.append(normalize_message(raw, width=width))
            progress.advance(task)

    console.print(f"  Loaded [bold]{len(messages)}[/bold] unread messages")
    return messages
