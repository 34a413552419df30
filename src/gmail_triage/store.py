"""In-memory mailbox: the fetched messages plus a selection cursor."""

from __future__ import annotations

from .models import NormalizedMessage


class MailboxStore:
    """Ordered messages (fetch order) and the index of the selected one.

    When the store is non-empty ``0 <= selected_index < len(store)``; when it
    is empty the index is 0 and means "no selection". Messages are never
    edited in place, only replaced or removed.
    """

    def __init__(self, messages: list[NormalizedMessage] | None = None) -> None:
        self._messages: list[NormalizedMessage] = []
        self.selected_index = 0
        if messages:
            self.replace_all(messages)

    def __len__(self) -> int:
        return len(self._messages)

    @property
    def messages(self) -> tuple[NormalizedMessage, ...]:
        return tuple(self._messages)

    def replace_all(self, messages: list[NormalizedMessage]) -> None:
        self._messages = list(messages)
        self.selected_index = 0

    def select_previous(self) -> bool:
        """Move the cursor up one; returns False at the top or when empty."""
        if self.selected_index <= 0 or not self._messages:
            return False
        self.selected_index -= 1
        return True

    def select_next(self) -> bool:
        """Move the cursor down one; returns False at the bottom or when empty."""
        if self.selected_index >= len(self._messages) - 1:
            return False
        self.selected_index += 1
        return True

    def remove_selected(self) -> NormalizedMessage | None:
        """Drop the selected message and clamp the cursor to the new length."""
        if not self._messages:
            return None
        removed = self._messages.pop(self.selected_index)
        if self.selected_index >= len(self._messages):
            self.selected_index = max(len(self._messages) - 1, 0)
        return removed

    def current(self) -> NormalizedMessage | None:
        if not self._messages:
            return None
        return self._messages[self.selected_index]
