"""Depth-first tree rendering into connector-prefixed text rows.

``render_tree`` is a generator: rows are produced while the walk proceeds, and
every call performs a fresh scan. Connector prefixes are threaded through the
recursion so rows below an already-closed branch get blank padding instead of
a dangling vertical bar.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

from ..errors import TraversalError
from .fs import list_directory_children, order_children
from .types import FileSystemEntry, RenderConfig

logger = logging.getLogger(__name__)


def root_label(root: Path, display_name: str | None = None) -> str:
    """Return the label printed on the first row."""
    if display_name:
        return display_name
    return root.name or str(root)


def visible_children(directory: Path, config: RenderConfig) -> list[FileSystemEntry]:
    """List, order, and filter the children of ``directory``."""
    children = list_directory_children(
        directory,
        show_hidden=config.show_hidden,
        follow_symlinks=config.follow_symlinks,
    )
    ordered = order_children(children, config.order)
    return [child for child in ordered if not config.policy.is_ignored(child.name)]


def format_row(prefix: str, name: str, is_last: bool, config: RenderConfig) -> str:
    branch = config.glyphs.last if is_last else config.glyphs.middle
    return f"{prefix}{branch}{name}"


def _resolved(path: Path) -> Path:
    try:
        return path.resolve()
    except (OSError, RuntimeError):
        return path


def _walk(
    directory: Path,
    prefix: str,
    depth: int,
    config: RenderConfig,
    ancestors: frozenset[Path] = frozenset(),
) -> Iterator[str]:
    children = visible_children(directory, config)
    glyphs = config.glyphs
    if config.follow_symlinks:
        ancestors = ancestors | {_resolved(directory)}

    for idx, child in enumerate(children):
        last = idx == len(children) - 1
        yield format_row(prefix, child.name, last, config)

        if not child.is_dir:
            continue
        if config.policy.suppresses_contents(child.name):
            continue
        if not config.within_depth(depth + 1):
            continue
        # Links back into the ancestor chain are listed but not expanded.
        if config.follow_symlinks and _resolved(child.path) in ancestors:
            continue

        child_prefix = prefix + (glyphs.space if last else glyphs.vertical)
        try:
            yield from _walk(child.path, child_prefix, depth + 1, config, ancestors)
        except TraversalError as exc:
            if config.strict:
                raise
            logger.warning("Skipping unreadable directory: %s", exc)
            yield f"{child_prefix}{glyphs.last}<error: {exc.reason}>"


def render_tree(root: Path, config: RenderConfig | None = None) -> Iterator[str]:
    """Yield the root label followed by one row per visible entry."""
    config = config or RenderConfig()
    yield root_label(root, config.display_name)
    if config.within_depth(1):
        yield from _walk(root, "", 1, config)


__all__ = ["root_label", "visible_children", "format_row", "render_tree"]
