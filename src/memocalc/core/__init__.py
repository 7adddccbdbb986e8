"""Undo/redo core: accumulator, reversible operations and the history log."""

from memocalc.core.accumulator import Accumulator, Snapshot
from memocalc.core.history import History
from memocalc.core.operations import (
    CalcError,
    DivisionByZero,
    Operation,
    OpKind,
    add,
    clear,
    divide,
    make,
    multiply,
    subtract,
)

__all__ = [
    "Accumulator",
    "CalcError",
    "DivisionByZero",
    "History",
    "OpKind",
    "Operation",
    "Snapshot",
    "add",
    "clear",
    "divide",
    "make",
    "multiply",
    "subtract",
]
