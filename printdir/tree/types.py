"""Immutable datatypes for directory listing and tree rendering."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

OUTPUT_FILENAME = "dir_tree.txt"

ORDER_NAME = "name"
ORDER_NATIVE = "native"
SIBLING_ORDERS = (ORDER_NAME, ORDER_NATIVE)


@dataclass(frozen=True)
class FileSystemEntry:
    """One child of a listed directory."""

    name: str
    path: Path
    is_dir: bool


@dataclass(frozen=True)
class GlyphSet:
    """Connector pieces used to draw one tree row prefix."""

    name: str
    middle: str
    last: str
    vertical: str
    space: str


UNICODE_GLYPHS = GlyphSet(name="unicode", middle="├─ ", last="└─ ", vertical="│  ", space="   ")
ASCII_GLYPHS = GlyphSet(name="ascii", middle="|- ", last="\\- ", vertical="|  ", space="   ")


@dataclass(frozen=True)
class IgnorePolicy:
    """Name-based exclusion rules.

    ``ignore`` names are dropped together with their subtrees. ``no_content``
    names keep their own row but are never descended into. The reserved output
    file is excluded implicitly, and ``no_ignore`` lifts every name-based
    exclusion including that one. ``no_content`` is not affected by
    ``no_ignore``.
    """

    ignore: frozenset[str] = frozenset()
    no_content: frozenset[str] = frozenset()
    no_ignore: bool = False
    reserved_name: str = OUTPUT_FILENAME

    def is_ignored(self, name: str) -> bool:
        if self.no_ignore:
            return False
        return name in self.ignore or name == self.reserved_name

    def suppresses_contents(self, name: str) -> bool:
        return name in self.no_content


@dataclass(frozen=True)
class RenderConfig:
    """Everything the renderer needs for one run; built once, never mutated."""

    policy: IgnorePolicy = field(default_factory=IgnorePolicy)
    max_depth: int | None = None
    display_name: str | None = None
    show_hidden: bool = True
    glyphs: GlyphSet = UNICODE_GLYPHS
    order: str = ORDER_NAME
    follow_symlinks: bool = False
    strict: bool = False

    def depth_unbounded(self) -> bool:
        return self.max_depth is None or self.max_depth < 0

    def within_depth(self, depth: int) -> bool:
        """Return whether entries ``depth`` levels below the root may be listed."""
        if self.depth_unbounded():
            return True
        return depth <= int(self.max_depth)


__all__ = [
    "OUTPUT_FILENAME",
    "ORDER_NAME",
    "ORDER_NATIVE",
    "SIBLING_ORDERS",
    "FileSystemEntry",
    "GlyphSet",
    "UNICODE_GLYPHS",
    "ASCII_GLYPHS",
    "IgnorePolicy",
    "RenderConfig",
]
