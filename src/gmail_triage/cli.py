"""CLI entry point for Gmail Triage."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from .auth import check_auth, get_gmail_service
from .constants import FETCH_BATCH_SIZE, RENDER_WIDTH
from .controller import Controller
from .display import display_session_summary
from .errors import StartupError
from .gmail_client import make_mark_read
from .loader import load_mailbox
from .log import setup_logging
from .opener import open_in_default_handler
from .store import MailboxStore

logger = logging.getLogger(__name__)


@click.group(invoke_without_command=True)
@click.version_option(version="0.1.0", prog_name="gmail-triage")
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write a debug log to this file.",
)
@click.option("-v", "--verbose", is_flag=True, help="Log debug details.")
@click.pass_context
def cli(ctx: click.Context, log_file: Path | None, verbose: bool) -> None:
    """Gmail Triage - read, mark read and unsubscribe from unread Gmail in the terminal."""
    setup_logging(log_file=log_file, verbose=verbose)
    if ctx.invoked_subcommand is None:
        ctx.invoke(run)


@cli.command()
@click.option(
    "-w",
    "--width",
    default=RENDER_WIDTH,
    show_default=True,
    type=click.IntRange(min=20),
    help="Column width used when rendering HTML bodies.",
)
def run(width: int = RENDER_WIDTH) -> None:
    """Fetch unread mail and open the interactive session."""
    from .tui import TriageApp

    try:
        service = get_gmail_service()
        messages = load_mailbox(service, limit=FETCH_BATCH_SIZE, width=width)
    except (FileNotFoundError, StartupError) as e:
        logger.error("Startup failed: %s", e)
        raise click.ClickException(str(e)) from e

    controller = Controller(
        MailboxStore(messages),
        mark_read=make_mark_read(service),
        open_link=open_in_default_handler,
    )
    TriageApp(controller).run()

    display_session_summary(controller.marked_read_count, len(controller.store))


@cli.command()
def auth() -> None:
    """Test Gmail authentication."""
    if not check_auth():
        raise SystemExit(1)
