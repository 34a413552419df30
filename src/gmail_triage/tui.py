"""Full-screen terminal session: keys in, controller events out, redraw."""

from __future__ import annotations

from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal
from textual.widgets import Static

from .controller import Controller, Event
from .display import render_body, render_controls, render_status, render_subject_list

_PANEL_BORDER = 2


class TriageApp(App):
    TITLE = "Gmail Triage"

    CSS = """
    #main {
        height: 1fr;
    }
    #subjects {
        width: 30%;
        height: 100%;
    }
    #body {
        width: 70%;
        height: 100%;
    }
    #status {
        height: 1;
    }
    #controls {
        height: 1;
    }
    """

    BINDINGS = [
        Binding("q", "handle_event('quit')", "Quit"),
        Binding("up", "handle_event('move_up')", "Up", priority=True),
        Binding("down", "handle_event('move_down')", "Down", priority=True),
        Binding("r", "handle_event('mark_read')", "Mark as Read"),
        Binding("u", "handle_event('unsubscribe')", "Unsubscribe"),
        Binding("pageup", "handle_event('scroll_up')", "Scroll Up", priority=True),
        Binding("pagedown", "handle_event('scroll_down')", "Scroll Down", priority=True),
    ]

    def __init__(self, controller: Controller) -> None:
        super().__init__()
        self.controller = controller

    def compose(self) -> ComposeResult:
        yield Horizontal(Static(id="subjects"), Static(id="body"), id="main")
        yield Static(id="status")
        yield Static(render_controls(), id="controls")

    def on_mount(self) -> None:
        self.call_after_refresh(self.refresh_view)

    def on_resize(self, event: events.Resize) -> None:
        self.call_after_refresh(self.refresh_view)

    def body_height(self) -> int:
        """Rows available for body text inside the content panel."""
        return max(self.query_one("#body", Static).size.height - _PANEL_BORDER, 1)

    def action_handle_event(self, name: str) -> None:
        keep_running = self.controller.handle(Event(name), visible_height=self.body_height())
        if not keep_running:
            self.exit()
            return
        self.refresh_view()

    def refresh_view(self) -> None:
        snapshot = self.controller.snapshot()
        height = self.body_height()
        main_height = height + _PANEL_BORDER
        self.query_one("#subjects", Static).update(render_subject_list(snapshot, height=main_height))
        self.query_one("#body", Static).update(render_body(snapshot, height))
        status = self.query_one("#status", Static)
        status.update(render_status(snapshot, status.size.width))
