"""Command journal stored as the first line of the tree artifact.

The line is ``printdir`` followed by the shell-quoted arguments, so it stays a
valid shell command for people reading the file while being re-parseable
in-process with ``shlex`` for replay.
"""

from __future__ import annotations

import shlex
from collections.abc import Sequence
from pathlib import Path

from .errors import ReplayError
from .tree.types import OUTPUT_FILENAME

COMMAND_TOKEN = "printdir"
REPLAY_FLAG = "--use-prev-cmd"


def journal_path(directory: Path) -> Path:
    return directory / OUTPUT_FILENAME


def build_command_line(argv: Sequence[str]) -> str:
    """Return the journal line for a run invoked with ``argv`` (program name excluded)."""
    if not argv:
        return COMMAND_TOKEN
    return f"{COMMAND_TOKEN} {shlex.join(list(argv))}"


def read_stored_command(path: Path) -> str:
    """Return the first line of the journal, or raise ``ReplayError`` if unusable."""
    try:
        with path.open("r", encoding="utf-8", errors="replace") as handle:
            first_line = handle.readline().rstrip("\r\n")
    except OSError as exc:
        raise ReplayError("No previous command found.") from exc

    if not first_line.startswith(COMMAND_TOKEN):
        raise ReplayError("No previous command found.")
    return first_line


def parse_command_line(line: str) -> list[str]:
    """Split a stored command into the argument list to replay.

    The leading ``printdir`` token is dropped. Commands that would replay
    themselves again are rejected.
    """
    try:
        tokens = shlex.split(line)
    except ValueError as exc:
        raise ReplayError(f"Stored command is malformed: {line}") from exc
    if not tokens or tokens[0] != COMMAND_TOKEN:
        raise ReplayError("No previous command found.")
    args = tokens[1:]
    if REPLAY_FLAG in args:
        raise ReplayError(f"Stored command cannot itself use {REPLAY_FLAG}: {line}")
    return args


def load_replay_args(directory: Path) -> tuple[str, list[str]]:
    """Read the journal under ``directory`` and return ``(line, args)``."""
    line = read_stored_command(journal_path(directory))
    return line, parse_command_line(line)


__all__ = [
    "COMMAND_TOKEN",
    "REPLAY_FLAG",
    "journal_path",
    "build_command_line",
    "read_stored_command",
    "parse_command_line",
    "load_replay_args",
]
