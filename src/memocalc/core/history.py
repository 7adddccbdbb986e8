"""Undo/redo log of executed operations.

- run() executes an operation and records it; redo history is dropped
- A failed run() leaves both stacks untouched
- Redo stack only grows while performing undo
- redo() re-executes, so the operation's backup tracks the current value
"""

from __future__ import annotations

from typing import List, Optional

from memocalc.core.operations import Operation


class History:
    """Two-stack history of operations applied to one accumulator."""

    def __init__(self) -> None:
        self._undo: List[Operation] = []
        self._redo: List[Operation] = []

    def run(self, op: Operation) -> None:
        """Execute an operation and record it. Exceptions propagate unrecorded."""
        op.execute()
        self._undo.append(op)
        self._redo.clear()

    def undo(self) -> Optional[Operation]:
        """Reverse the most recent operation; None if there is nothing to undo."""
        if not self._undo:
            return None
        op = self._undo.pop()
        op.undo()
        self._redo.append(op)
        return op

    def redo(self) -> Optional[Operation]:
        """Re-apply the most recently undone operation; None if there is none."""
        if not self._redo:
            return None
        op = self._redo.pop()
        op.execute()
        self._undo.append(op)
        return op

    def can_undo(self) -> bool:
        return bool(self._undo)

    def can_redo(self) -> bool:
        return bool(self._redo)

    def render_undo_log(self) -> str:
        """Undo stack, most recent first, one line per operation."""
        if not self._undo:
            return ""
        lines = ["History (most recent first):"]
        for op in reversed(self._undo):
            lines.append(f"- {op.label} [{op.timestamp.isoformat()}]")
        return "\n".join(lines) + "\n"

    def __len__(self) -> int:
        """Number of undoable operations."""
        return len(self._undo)

    def redo_len(self) -> int:
        """Number of redoable operations."""
        return len(self._redo)
