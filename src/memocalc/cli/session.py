"""
Calculator session shared by the REPL and the TUI.

Architecture:
- parse.parse_line() turns text into a frozen command
- Session.dispatch(command) applies it to the core and returns a Reply
- Session.handle_line(text) does both and turns input errors into a Reply

Each session owns its own Accumulator and History.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from memocalc.cli.parse import (
    USAGE,
    Apply,
    Command,
    Help,
    InputError,
    Quit,
    Redo,
    ShowHistory,
    ShowValue,
    Undo,
    UnknownCommand,
    parse_line,
)
from memocalc.core import Accumulator, DivisionByZero, History, make


log = logging.getLogger(__name__)


HELP_TEXT = """\
Commands:
  + n     | add n
  - n     | sub n
  * n     | mul n
  / n     | div n
  clear   | set the value to 0
  undo    | undo the last operation
  redo    | redo the last undone operation
  val     | show the current value
  hist    | show history (most recent first)
  help    | this help
  exit    | quit"""


@dataclass(frozen=True)
class Reply:
    """Text to show the user, and whether the session should end."""
    message: str
    done: bool = False


@dataclass
class Session:
    accumulator: Accumulator = field(default_factory=Accumulator)
    history: History = field(default_factory=History)

    @property
    def value(self) -> float:
        return self.accumulator.get_value()

    def dispatch(self, command: Command) -> Reply:
        match command:
            case Apply(kind=kind, operand=operand):
                op = make(kind, self.accumulator, operand)
                try:
                    self.history.run(op)
                except DivisionByZero as e:
                    log.warning("%s rejected: %s", op.label, e)
                    return Reply(f"Error: {e}")
                log.debug("%s -> %s", op.label, self.value)
                prefix = "Clear." if kind == "clear" else "OK."
                return Reply(f"{prefix} Value = {self.value}")

            case Undo():
                op = self.history.undo()
                if op is None:
                    return Reply("Nothing to undo.")
                log.debug("undo %s -> %s", op.label, self.value)
                return Reply(f"Undone. Value = {self.value}")

            case Redo():
                op = self.history.redo()
                if op is None:
                    return Reply("Nothing to redo.")
                log.debug("redo %s -> %s", op.label, self.value)
                return Reply(f"Redone. Value = {self.value}")

            case ShowValue():
                return Reply(f"Value = {self.value}")

            case ShowHistory():
                text = self.history.render_undo_log()
                return Reply(text.rstrip("\n") if text else "(history empty)")

            case Help():
                return Reply(HELP_TEXT)

            case Quit():
                return Reply("Bye!", done=True)

        raise TypeError(f"Unhandled command: {command!r}")

    def handle_line(self, line: str) -> Reply | None:
        """Parse and dispatch one line. Returns None for a blank line."""
        try:
            command = parse_line(line)
        except UnknownCommand as e:
            log.info("%s", e)
            return Reply("Unknown command. Type 'help'.")
        except InputError as e:
            log.info("input error: %s", e)
            return Reply(f"Input error: {e}. {USAGE}")

        if command is None:
            return None
        return self.dispatch(command)
