"""Reversible arithmetic operations.

One tagged type covers every kind of operation:

- kind selects the transform applied to the accumulator
- execute() saves a snapshot first, then mutates
- undo() restores the last snapshot (no-op if never executed)
- label and timestamp are fixed at construction
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Literal, Optional

from memocalc.core.accumulator import Accumulator, Snapshot


OpKind = Literal["add", "sub", "mul", "div", "clear"]

_LABELS = {
    "add": "Add",
    "sub": "Sub",
    "mul": "Mul",
    "div": "Div",
    "clear": "Clear",
}


class CalcError(Exception):
    """Base error raised by the calculator core."""


class DivisionByZero(CalcError, ZeroDivisionError):
    """Divide executed with a zero operand."""

    def __init__(self) -> None:
        super().__init__("Division by zero")


@dataclass(eq=False)
class Operation:
    accumulator: Accumulator
    kind: OpKind
    operand: Optional[float] = None
    label: str = ""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    backup: Optional[Snapshot] = None

    def __post_init__(self) -> None:
        if self.kind not in _LABELS:
            raise ValueError(f"Unknown operation kind: {self.kind!r}")
        if self.kind == "clear":
            self.operand = None
        elif self.operand is None:
            raise ValueError(f"Operation {self.kind!r} requires an operand")
        else:
            self.operand = float(self.operand)
        if not self.label:
            name = _LABELS[self.kind]
            self.label = name if self.operand is None else f"{name} {self.operand}"

    def execute(self) -> None:
        """Save a backup of the accumulator, then apply this operation."""
        self.backup = self.accumulator.save()
        value = self.accumulator.get_value()
        n = self.operand

        match self.kind:
            case "add":
                value = value + n
            case "sub":
                value = value - n
            case "mul":
                value = value * n
            case "div":
                if n == 0:
                    raise DivisionByZero()
                value = value / n
            case "clear":
                value = 0.0

        self.accumulator.set_value(value)

    def undo(self) -> None:
        if self.backup is not None:
            self.accumulator.restore(self.backup)


# =============================================================================
# Constructors
# =============================================================================


def add(accumulator: Accumulator, operand: float) -> Operation:
    return Operation(accumulator, "add", operand)


def subtract(accumulator: Accumulator, operand: float) -> Operation:
    return Operation(accumulator, "sub", operand)


def multiply(accumulator: Accumulator, operand: float) -> Operation:
    return Operation(accumulator, "mul", operand)


def divide(accumulator: Accumulator, operand: float) -> Operation:
    return Operation(accumulator, "div", operand)


def clear(accumulator: Accumulator) -> Operation:
    return Operation(accumulator, "clear")


def make(
    kind: str, accumulator: Accumulator, operand: Optional[float] = None
) -> Operation:
    """Build an operation from its kind name."""
    if kind not in _LABELS:
        raise ValueError(f"Unknown operation kind: {kind!r}")
    return Operation(accumulator, kind, operand)  # type: ignore[arg-type]
