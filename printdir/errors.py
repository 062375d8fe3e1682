"""Exception hierarchy shared by the traversal, journal, and CLI layers."""

from __future__ import annotations

from pathlib import Path


class PrintdirError(Exception):
    """Base class for errors the CLI reports and turns into exit status 1."""


class TraversalError(PrintdirError):
    """A directory could not be listed (permission, race, or not a directory)."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"cannot list {path}: {reason}")
        self.path = path
        self.reason = reason


class ReplayError(PrintdirError):
    """The command journal holds no replayable command."""


class OutputError(PrintdirError):
    """The tree artifact could not be opened for writing."""


__all__ = ["PrintdirError", "TraversalError", "ReplayError", "OutputError"]
