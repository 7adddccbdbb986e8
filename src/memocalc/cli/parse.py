"""
Line parser for the calculator front ends.

A line is "<keyword> [operand]". Keywords are case-insensitive; extra
tokens after the operand are ignored. Parsing never touches the core:
bad input raises an InputError subclass and nothing else happens.
"""

from dataclasses import dataclass
from typing import Optional, Union


USAGE = "Usage: '+ 5', '* 3', '/ 2', 'clear', 'undo', 'redo', 'val'."


# =============================================================================
# Errors
# =============================================================================


class InputError(ValueError):
    """Line could not be turned into a command."""


class MissingOperand(InputError):
    def __init__(self, keyword: str):
        self.keyword = keyword
        super().__init__(f"'{keyword}' needs an operand")


class InvalidNumber(InputError):
    def __init__(self, token: str):
        self.token = token
        super().__init__(f"not a number: {token!r}")


class UnknownCommand(InputError):
    def __init__(self, keyword: str):
        self.keyword = keyword
        super().__init__(f"unknown command: {keyword!r}")


# =============================================================================
# Commands
# =============================================================================


@dataclass(frozen=True)
class Apply:
    """Run an arithmetic operation."""
    kind: str
    operand: Optional[float] = None


@dataclass(frozen=True)
class Undo:
    pass


@dataclass(frozen=True)
class Redo:
    pass


@dataclass(frozen=True)
class ShowValue:
    pass


@dataclass(frozen=True)
class ShowHistory:
    pass


@dataclass(frozen=True)
class Help:
    pass


@dataclass(frozen=True)
class Quit:
    pass


Command = Union[Apply, Undo, Redo, ShowValue, ShowHistory, Help, Quit]


# Keyword -> operation kind for commands that take an operand
OPERAND_KEYWORDS = {
    "add": "add",
    "+": "add",
    "sub": "sub",
    "-": "sub",
    "mul": "mul",
    "*": "mul",
    "div": "div",
    "/": "div",
}

SIMPLE_KEYWORDS = {
    "clear": Apply("clear"),
    "undo": Undo(),
    "redo": Redo(),
    "val": ShowValue(),
    "hist": ShowHistory(),
    "help": Help(),
    "exit": Quit(),
    "quit": Quit(),
}


def parse_operand(keyword: str, tokens: list[str]) -> float:
    if len(tokens) < 2:
        raise MissingOperand(keyword)
    try:
        return float(tokens[1])
    except ValueError:
        raise InvalidNumber(tokens[1]) from None


def parse_line(line: str) -> Optional[Command]:
    """Parse one input line. Returns None for a blank line."""
    tokens = line.split()
    if not tokens:
        return None

    keyword = tokens[0].lower()
    if keyword in SIMPLE_KEYWORDS:
        return SIMPLE_KEYWORDS[keyword]
    if keyword in OPERAND_KEYWORDS:
        return Apply(OPERAND_KEYWORDS[keyword], parse_operand(keyword, tokens))
    raise UnknownCommand(tokens[0])
