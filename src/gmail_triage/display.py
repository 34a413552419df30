"""Rich-based display functions for Gmail Triage."""

from __future__ import annotations

from rich.cells import cell_len
from rich.console import Console
from rich.panel import Panel
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    SpinnerColumn,
    TextColumn,
    TimeElapsedColumn,
)
from rich.text import Text

from .constants import CONTROLS_HINT, NO_SUBJECT_TEXT
from .controller import Snapshot

console = Console()

_SELECTED_STYLE = "bold black on bright_green"
_HIGHLIGHT_SYMBOL = ">> "
_ELLIPSIS = "..."


def create_progress(description: str) -> Progress:
    """Create a configured Rich Progress bar."""
    return Progress(
        SpinnerColumn(),
        TextColumn(f"[bold blue]{description}"),
        BarColumn(),
        MofNCompleteColumn(),
        TimeElapsedColumn(),
        console=console,
    )


def truncate_with_ellipsis(text: str, max_width: int) -> str:
    """Cut ``text`` to ``max_width`` terminal cells, ending in '...' if cut."""
    if cell_len(text) <= max_width:
        return text

    result: list[str] = []
    width = 0
    for ch in text:
        ch_width = cell_len(ch)
        if width + ch_width + len(_ELLIPSIS) > max_width:
            break
        result.append(ch)
        width += ch_width
    return "".join(result) + _ELLIPSIS


def render_subject_list(snapshot: Snapshot, height: int | None = None) -> Panel:
    """The left-hand list of subjects with the selection highlighted."""
    text = Text(no_wrap=True, overflow="ellipsis")
    pad = " " * len(_HIGHLIGHT_SYMBOL)
    for idx, subject in enumerate(snapshot.subjects):
        if idx:
            text.append("\n")
        label = subject or NO_SUBJECT_TEXT
        if idx == snapshot.selected_index:
            text.append(_HIGHLIGHT_SYMBOL + label, style=_SELECTED_STYLE)
        else:
            text.append(pad + label, style="white")

    if not snapshot.subjects:
        text.append("No unread email.", style="dim")

    return Panel(text, title="Emails", height=height)


def visible_body_lines(snapshot: Snapshot, height: int) -> list[str]:
    """Lines of the selected body that fit in ``height`` rows after scrolling."""
    if snapshot.body is None:
        return ["No email selected"]
    lines = snapshot.body.splitlines()
    start = snapshot.scroll_offset
    return [line.rstrip() for line in lines[start:start + max(height, 0)]]


def render_body(snapshot: Snapshot, height: int) -> Panel:
    """The right-hand content pane; ``height`` excludes the panel border."""
    text = Text("\n".join(visible_body_lines(snapshot, height)), no_wrap=True, overflow="crop")
    return Panel(text, title="Content", height=height + 2)


def render_status(snapshot: Snapshot, width: int) -> Text:
    """One-line status bar cut to ``width`` cells."""
    message = truncate_with_ellipsis(snapshot.status_message, max(width, 0))
    return Text(message, style="white on black", no_wrap=True)


def render_controls() -> Text:
    return Text(CONTROLS_HINT, style="white on grey23", no_wrap=True)


def display_session_summary(marked_read: int, remaining: int) -> None:
    """Print a short summary once the interactive session has ended."""
    console.print(
        Panel(
            f"[bold green]Marked {marked_read} messages as read.[/bold green]  |  "
            f"Unread left in this batch: {remaining}",
            title="Done",
        )
    )
