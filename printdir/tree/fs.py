"""Directory scanning and sibling ordering for tree rendering."""

from __future__ import annotations

import os
from pathlib import Path

from ..errors import TraversalError
from .types import ORDER_NATIVE, FileSystemEntry


def list_directory_children(
    directory: Path,
    show_hidden: bool = True,
    follow_symlinks: bool = False,
) -> list[FileSystemEntry]:
    """List immediate children of ``directory`` in enumeration order.

    Raises ``TraversalError`` when the directory cannot be scanned. The
    ``scandir`` handle is closed before this function returns.
    """
    children: list[FileSystemEntry] = []
    try:
        with os.scandir(directory) as entries:
            for child in entries:
                name = child.name
                if not show_hidden and name.startswith("."):
                    continue
                try:
                    is_dir = child.is_dir(follow_symlinks=follow_symlinks)
                except OSError:
                    is_dir = False
                children.append(FileSystemEntry(name=name, path=Path(child.path), is_dir=is_dir))
    except OSError as exc:
        reason = exc.strerror or exc.__class__.__name__
        raise TraversalError(directory, reason) from exc
    return children


def order_children(children: list[FileSystemEntry], order: str) -> list[FileSystemEntry]:
    """Return directories first, then everything else.

    ``name`` order sorts each group case-insensitively with the exact name as
    tie-breaker. ``native`` order keeps files in enumeration order and puts
    directories in reverse enumeration order.
    """
    dirs = [child for child in children if child.is_dir]
    others = [child for child in children if not child.is_dir]
    if order == ORDER_NATIVE:
        dirs.reverse()
        return dirs + others

    key = lambda item: (item.name.casefold(), item.name)
    dirs.sort(key=key)
    others.sort(key=key)
    return dirs + others


__all__ = ["list_directory_children", "order_children"]
