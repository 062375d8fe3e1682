"""Line sinks for rendered tree rows.

``TreeOutput`` writes every row to the console and, when a file path is given,
to that file as well. The file is truncated when the sink opens, so each
non-replay run starts from an empty artifact.
"""

from __future__ import annotations

import sys
from collections.abc import Iterable
from pathlib import Path
from typing import TextIO

from .errors import OutputError


class TreeOutput:
    def __init__(self, console: TextIO | None = None, file_path: Path | None = None) -> None:
        self.console = console if console is not None else sys.stdout
        self.file_path = file_path
        self._file: TextIO | None = None

    def __enter__(self) -> "TreeOutput":
        if self.file_path is not None:
            try:
                self._file = self.file_path.open("w", encoding="utf-8", newline="\n")
            except OSError as exc:
                reason = exc.strerror or exc.__class__.__name__
                raise OutputError(f"cannot write {self.file_path}: {reason}") from exc
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None

    def write_file_only(self, line: str) -> None:
        """Write ``line`` to the artifact without echoing it on the console."""
        if self._file is not None:
            self._file.write(line + "\n")

    def emit(self, line: str) -> None:
        self.console.write(line + "\n")
        if self._file is not None:
            self._file.write(line + "\n")

    def emit_all(self, lines: Iterable[str]) -> int:
        """Drain ``lines`` into the sink in order and return how many were written."""
        count = 0
        for line in lines:
            self.emit(line)
            count += 1
        return count


__all__ = ["TreeOutput"]
