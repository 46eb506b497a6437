"""Iterative directory walk feeding candidate files to a visitor."""
from __future__ import annotations

import os
from pathlib import Path
from typing import AbstractSet, Callable, Iterable, List, Set, Tuple, Union

from .exclude import is_excluded
from .logutil import get_logger

PathLike = Union[str, "os.PathLike[str]"]


def walk(
    roots: Iterable[PathLike],
    excludes: AbstractSet[str],
    visit: Callable[[Path], None],
) -> int:
    """Depth-first walk over ``roots`` using an explicit stack.

    Excluded paths are dropped before they are listed, so nothing below an
    excluded directory is ever seen. Directories that cannot be listed are
    logged and abandoned. Every other path is handed to ``visit``, once per
    underlying file even when roots overlap. Sibling
    order is whatever the OS returns, reversed by the stack; callers must not
    depend on it.

    Returns the number of paths passed to ``visit``.
    """
    log = get_logger()
    stack: List[Path] = []
    for root in roots:
        path = Path(root)
        if not os.path.lexists(path):
            log.warning("Target path not found: %s", path)
            continue
        stack.append(path)

    listed: Set[Tuple[int, int]] = set()
    # Files already handed out; overlapping roots or hard links name the same inode
    dispatched: Set[Tuple[int, int]] = set()
    visited = 0
    while stack:
        path = stack.pop()
        if is_excluded(path, excludes):
            continue

        if path.is_dir():
            try:
                st = path.stat()
                key = (st.st_dev, st.st_ino)
                if key in listed:
                    log.info("Already walked %s; skipping (symlink loop?)", path)
                    continue
                listed.add(key)
                with os.scandir(path) as entries:
                    children = [Path(entry.path) for entry in entries]
            except OSError as exc:
                log.warning("Failed to read dir %s: %s", path, exc)
                continue
            stack.extend(children)
        else:
            try:
                st = path.stat()
            except OSError:
                # dangling link or vanished file; let the pipeline report it
                st = None
            if st is not None:
                key = (st.st_dev, st.st_ino)
                if key in dispatched:
                    log.debug("Already queued %s; skipping duplicate", path)
                    continue
                dispatched.add(key)
            visited += 1
            visit(path)
    return visited


__all__ = ["walk"]
