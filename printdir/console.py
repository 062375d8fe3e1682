"""Console message presets routed through the stdlib ``logging`` module.

Records are written to stderr as ``[INFO] message`` / ``[ERROR] message`` with
the level tag colored via pygments' ANSI helpers. INFO records keep a dashed
rule underneath so they stand apart from tree output.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from typing import TextIO

from pygments.console import ansiformat

LOGGER_NAME = "printdir"
INFO_RULE = "-" * 10


@dataclass(frozen=True)
class MessagePreset:
    """Prefix text, pygments color spec, and optional trailing text for one level."""

    prefix: str
    color: str
    suffix: str = ""


PRESETS: dict[int, MessagePreset] = {
    logging.DEBUG: MessagePreset(prefix="[DEBUG] ", color="brightblack"),
    logging.INFO: MessagePreset(prefix="[INFO] ", color="*brightcyan*", suffix="\n" + INFO_RULE),
    logging.WARNING: MessagePreset(prefix="[WARNING] ", color="*yellow*"),
    logging.ERROR: MessagePreset(prefix="[ERROR] ", color="*brightred*"),
    logging.CRITICAL: MessagePreset(prefix="[ERROR] ", color="*brightred*"),
}


def preset_for(levelno: int) -> MessagePreset:
    """Return the preset for ``levelno``, falling back to the nearest lower level."""
    for level in sorted(PRESETS, reverse=True):
        if levelno >= level:
            return PRESETS[level]
    return PRESETS[logging.DEBUG]


class PresetFormatter(logging.Formatter):
    def __init__(self, color: bool) -> None:
        super().__init__("%(message)s")
        self.color = color

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        preset = preset_for(record.levelno)
        prefix = ansiformat(preset.color, preset.prefix) if self.color else preset.prefix
        return f"{prefix}{message}{preset.suffix}"


def stream_supports_color(stream: TextIO) -> bool:
    isatty = getattr(stream, "isatty", None)
    if isatty is None:
        return False
    try:
        return bool(isatty())
    except ValueError:
        return False


def configure_logging(
    no_color: bool = False,
    stream: TextIO | None = None,
    level: int = logging.INFO,
) -> logging.Logger:
    """Install the preset handler on the ``printdir`` logger.

    Calling this again replaces the previously installed handler, so repeated
    in-process runs (tests, command replay) do not duplicate messages.
    """
    stream = stream if stream is not None else sys.stderr
    handler = logging.StreamHandler(stream)
    handler.setFormatter(PresetFormatter(color=not no_color and stream_supports_color(stream)))

    logger = logging.getLogger(LOGGER_NAME)
    for existing in list(logger.handlers):
        logger.removeHandler(existing)
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger


__all__ = [
    "LOGGER_NAME",
    "MessagePreset",
    "PRESETS",
    "PresetFormatter",
    "configure_logging",
    "preset_for",
    "stream_supports_color",
]
