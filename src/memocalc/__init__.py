"""memocalc: console calculator with undo/redo."""

__version__ = "0.1.0"
