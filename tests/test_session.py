"""Front-end parsing and session dispatch.

Covers the command grammar and the messages shown to the user.
Errors from parsing never reach the core.
"""

import pytest

from memocalc.cli.parse import (
    Apply,
    Help,
    InvalidNumber,
    MissingOperand,
    Quit,
    Redo,
    ShowHistory,
    ShowValue,
    Undo,
    UnknownCommand,
    parse_line,
)
from memocalc.cli.session import HELP_TEXT, Reply, Session


# ── Parsing ──────────────────────────────────────────────────


@pytest.mark.parametrize(
    "line, expected",
    [
        ("add 5", Apply("add", 5.0)),
        ("+ 5", Apply("add", 5.0)),
        ("sub 2.5", Apply("sub", 2.5)),
        ("- -1", Apply("sub", -1.0)),
        ("MUL 3", Apply("mul", 3.0)),
        ("* 3", Apply("mul", 3.0)),
        ("div 4", Apply("div", 4.0)),
        ("/ 1e3", Apply("div", 1000.0)),
        ("clear", Apply("clear")),
        ("undo", Undo()),
        ("Redo", Redo()),
        ("val", ShowValue()),
        ("hist", ShowHistory()),
        ("help", Help()),
        ("exit", Quit()),
        ("quit", Quit()),
        ("  add   7   extra  ", Apply("add", 7.0)),
    ],
)
def test_parse_line(line, expected):
    assert parse_line(line) == expected


def test_parse_blank_line():
    assert parse_line("") is None
    assert parse_line("   \t ") is None


def test_parse_missing_operand():
    with pytest.raises(MissingOperand) as exc:
        parse_line("add")
    assert exc.value.keyword == "add"


def test_parse_invalid_number():
    with pytest.raises(InvalidNumber) as exc:
        parse_line("* five")
    assert exc.value.token == "five"


def test_parse_unknown_command():
    with pytest.raises(UnknownCommand):
        parse_line("pow 2")


def test_input_errors_are_value_errors():
    with pytest.raises(ValueError):
        parse_line("div")


# ── Session ──────────────────────────────────────────────────


def feed(session: Session, *lines: str) -> list[Reply]:
    return [session.handle_line(line) for line in lines]


def test_session_starts_at_zero():
    session = Session()
    assert session.value == 0.0
    assert session.handle_line("val") == Reply("Value = 0.0")


def test_session_operation_messages():
    session = Session()
    replies = feed(session, "+ 5", "* 3", "clear")
    assert [r.message for r in replies] == [
        "OK. Value = 5.0",
        "OK. Value = 15.0",
        "Clear. Value = 0.0",
    ]


def test_session_undo_redo_messages():
    session = Session()
    feed(session, "add 5", "mul 3")
    assert session.handle_line("undo").message == "Undone. Value = 5.0"
    assert session.handle_line("undo").message == "Undone. Value = 0.0"
    assert session.handle_line("undo").message == "Nothing to undo."
    assert session.handle_line("redo").message == "Redone. Value = 5.0"
    assert session.handle_line("sub 2").message == "OK. Value = 3.0"
    assert session.handle_line("redo").message == "Nothing to redo."


def test_session_division_by_zero_continues():
    session = Session()
    feed(session, "+ 10")
    reply = session.handle_line("/ 0")
    assert reply == Reply("Error: Division by zero")
    assert session.value == 10.0
    assert len(session.history) == 1


def test_session_input_errors_do_not_touch_core():
    session = Session()
    missing = session.handle_line("add")
    invalid = session.handle_line("add x")
    unknown = session.handle_line("frobnicate")

    assert missing.message.startswith("Input error: 'add' needs an operand.")
    assert "Usage:" in invalid.message
    assert unknown.message == "Unknown command. Type 'help'."
    assert not session.history.can_undo()
    assert session.value == 0.0


def test_session_history_rendering():
    session = Session()
    assert session.handle_line("hist").message == "(history empty)"
    feed(session, "+ 1", "* 4")
    lines = session.handle_line("hist").message.splitlines()
    assert lines[0] == "History (most recent first):"
    assert lines[1].startswith("- Mul 4.0 [")
    assert lines[2].startswith("- Add 1.0 [")


def test_session_help_and_quit():
    session = Session()
    assert session.handle_line("help").message == HELP_TEXT
    reply = session.handle_line("exit")
    assert reply.done
    assert reply.message == "Bye!"


def test_session_blank_line():
    assert Session().handle_line("  ") is None


def test_sessions_are_independent():
    one, two = Session(), Session()
    one.handle_line("+ 3")
    assert two.value == 0.0
    assert two.handle_line("undo").message == "Nothing to undo."
