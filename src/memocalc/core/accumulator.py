"""The single numeric register operations act upon."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Snapshot:
    """Immutable capture of the accumulator value."""

    value: float


class Accumulator:
    def __init__(self, value: float = 0.0) -> None:
        self._value = value

    def get_value(self) -> float:
        return self._value

    def set_value(self, value: float) -> None:
        self._value = value

    def save(self) -> Snapshot:
        return Snapshot(self._value)

    def restore(self, snapshot: Snapshot) -> None:
        self._value = snapshot.value
