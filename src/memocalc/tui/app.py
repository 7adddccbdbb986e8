"""memocalc TUI.

- One input line using the REPL grammar
- ctrl+z / ctrl+y undo and redo without typing
- Value, last message and undo log are re-rendered after every command
- All state lives in a Session; the app only renders it
"""

from __future__ import annotations

import logging

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.widgets import Footer, Header, Input, Static

from memocalc.cli.parse import Command, Redo, Undo
from memocalc.cli.session import Reply, Session


log = logging.getLogger(__name__)


class CalcApp(App):
    TITLE = "memocalc"
    CSS = """
    #value {
        padding: 1 2;
        text-style: bold;
    }
    #message {
        padding: 0 2;
        text-style: italic;
    }
    #history {
        padding: 1 2;
        height: 1fr;
    }
    """
    BINDINGS = [
        Binding("ctrl+z", "undo", "Undo", priority=True),
        Binding("ctrl+y", "redo", "Redo", priority=True),
        Binding("ctrl+q", "quit", "Quit", priority=True),
    ]

    def __init__(self, session: Session | None = None, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.session = session or Session()
        self.last_message = ""

    def compose(self) -> ComposeResult:
        yield Header()
        yield Vertical(
            Static(id="value"),
            Static(id="message"),
            Static(id="history"),
            id="main",
        )
        yield Input(placeholder="+ 5, * 3, undo, hist, help ...", id="command")
        yield Footer()

    def on_mount(self) -> None:
        self._render_state()
        self.query_one("#command", Input).focus()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        line = event.value
        event.input.value = ""

        reply = self.session.handle_line(line)
        if reply is None:
            return
        self._show(reply)

    def action_undo(self) -> None:
        self._run(Undo())

    def action_redo(self) -> None:
        self._run(Redo())

    # =====================
    # Internal helpers
    # =====================

    def _run(self, command: Command) -> None:
        self._show(self.session.dispatch(command))

    def _show(self, reply: Reply) -> None:
        if reply.done:
            log.debug("session closed from input")
            self.exit()
            return
        self.last_message = reply.message
        self._render_state()

    def _render_state(self) -> None:
        self.query_one("#value", Static).update(
            Text(f"Value = {self.session.value}")
        )
        self.query_one("#message", Static).update(Text(self.last_message))
        self.query_one("#history", Static).update(
            Text(self.session.history.render_undo_log() or "(history empty)")
        )
