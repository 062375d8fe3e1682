"""Directory-tree domain: listing, ordering, ignore rules, and row rendering.

This package has no console or file output of its own; callers drain the
``render_tree`` generator into whatever sink they need.
"""

from __future__ import annotations

from .fs import list_directory_children, order_children
from .rendering import format_row, render_tree, root_label, visible_children
from .types import (
    ASCII_GLYPHS,
    ORDER_NAME,
    ORDER_NATIVE,
    OUTPUT_FILENAME,
    SIBLING_ORDERS,
    UNICODE_GLYPHS,
    FileSystemEntry,
    GlyphSet,
    IgnorePolicy,
    RenderConfig,
)

__all__ = [
    "FileSystemEntry",
    "GlyphSet",
    "IgnorePolicy",
    "RenderConfig",
    "ASCII_GLYPHS",
    "UNICODE_GLYPHS",
    "ORDER_NAME",
    "ORDER_NATIVE",
    "SIBLING_ORDERS",
    "OUTPUT_FILENAME",
    "list_directory_children",
    "order_children",
    "visible_children",
    "format_row",
    "render_tree",
    "root_label",
]
