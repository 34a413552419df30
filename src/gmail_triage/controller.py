"""Interaction controller: turns key events into mailbox changes and Gmail calls."""

from __future__ import annotations

import enum
import logging
import threading
from dataclasses import dataclass
from typing import Callable

from .constants import (
    DEFAULT_VISIBLE_HEIGHT,
    SCROLL_STEP,
    STATUS_LINK_OPENED,
    STATUS_MAILTO,
    STATUS_MARK_READ_FAILED,
    STATUS_MARKED_READ,
    STATUS_NO_SELECTION,
    STATUS_NO_UNSUBSCRIBE,
    STATUS_UNSUBSCRIBE_FAILED,
    STATUS_UNSUPPORTED,
)
from .errors import LinkOpenError, RemoteError
from .models import HttpLink, MailtoLink
from .store import MailboxStore

logger = logging.getLogger(__name__)


class Event(enum.Enum):
    QUIT = "quit"
    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    MARK_READ = "mark_read"
    UNSUBSCRIBE = "unsubscribe"
    SCROLL_UP = "scroll_up"
    SCROLL_DOWN = "scroll_down"


@dataclass(frozen=True)
class Snapshot:
    """Read-only view of the controller state for one redraw."""

    subjects: tuple[str, ...]
    selected_index: int
    body: str | None
    scroll_offset: int
    status_message: str


class Controller:
    """Owns the mailbox store and applies one event at a time.

    Every transition and every snapshot runs under a single lock, so a redraw
    never sees a half-applied change. The lock stays held while Gmail is
    called for mark-read; the store is only changed once the call returned.

    Only mark-read and unsubscribe write ``status_message``. Moving and
    scrolling leave the last outcome on screen.
    """

    def __init__(
        self,
        store: MailboxStore,
        mark_read: Callable[[str], None],
        open_link: Callable[[str], None],
        scroll_step: int = SCROLL_STEP,
    ) -> None:
        self.store = store
        self._mark_read = mark_read
        self._open_link = open_link
        self.scroll_step = scroll_step
        self.scroll_offset = 0
        self.status_message = ""
        self.marked_read_count = 0
        self._lock = threading.Lock()

    def handle(self, event: Event, visible_height: int = DEFAULT_VISIBLE_HEIGHT) -> bool:
        """Apply ``event``. Returns False when the session should end."""
        if event is Event.QUIT:
            return False

        with self._lock:
            if event is Event.MOVE_UP:
                if self.store.select_previous():
                    self.scroll_offset = 0
            elif event is Event.MOVE_DOWN:
                if self.store.select_next():
                    self.scroll_offset = 0
            elif event is Event.MARK_READ:
                self._handle_mark_read()
            elif event is Event.UNSUBSCRIBE:
                self._handle_unsubscribe()
            elif event is Event.SCROLL_UP:
                self.scroll_offset = max(0, self.scroll_offset - self.scroll_step)
            elif event is Event.SCROLL_DOWN:
                self._handle_scroll_down(visible_height)
        return True

    def snapshot(self) -> Snapshot:
        with self._lock:
            current = self.store.current()
            return Snapshot(
                subjects=tuple(m.subject for m in self.store.messages),
                selected_index=self.store.selected_index,
                body=current.rendered_body if current else None,
                scroll_offset=self.scroll_offset,
                status_message=self.status_message,
            )

    # --- transitions (lock held) ---

    def _handle_mark_read(self) -> None:
        message = self.store.current()
        if message is None:
            self.status_message = STATUS_NO_SELECTION
            return

        try:
            self._mark_read(message.id)
        except RemoteError as exc:
            logger.warning("Mark as read failed for %s: %s", message.id, exc)
            self.status_message = STATUS_MARK_READ_FAILED.format(error=exc)
            return

        self.store.remove_selected()
        self.marked_read_count += 1
        self.scroll_offset = 0
        self.status_message = STATUS_MARKED_READ

    def _handle_unsubscribe(self) -> None:
        message = self.store.current()
        if message is None:
            self.status_message = STATUS_NO_SELECTION
            return

        target = message.unsubscribe_target
        if target is None:
            self.status_message = STATUS_NO_UNSUBSCRIBE
        elif isinstance(target, HttpLink):
            try:
                self._open_link(target.url)
            except LinkOpenError as exc:
                logger.warning("Could not open %s: %s", target.url, exc)
                self.status_message = STATUS_UNSUBSCRIBE_FAILED.format(error=exc)
            else:
                self.status_message = STATUS_LINK_OPENED
        elif isinstance(target, MailtoLink):
            self.status_message = STATUS_MAILTO.format(address=target.address)
        else:
            self.status_message = STATUS_UNSUPPORTED.format(raw=target.raw)

    def _handle_scroll_down(self, visible_height: int) -> None:
        message = self.store.current()
        if message is None:
            return
        line_count = len(message.rendered_body.splitlines())
        max_scroll = max(0, line_count - visible_height)
        self.scroll_offset = min(self.scroll_offset + self.scroll_step, max_scroll)
