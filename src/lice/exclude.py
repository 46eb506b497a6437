from pathlib import PurePath
from typing import AbstractSet, Union

from .logutil import get_logger


def _is_text(component: str) -> bool:
    # os.fsdecode() maps undecodable bytes to lone surrogates; those cannot be
    # encoded back to UTF-8.
    try:
        component.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def is_excluded(path: Union[str, PurePath], patterns: AbstractSet[str]) -> bool:
    """True if any component of ``path`` equals one of ``patterns`` exactly.

    A component that is not valid UTF-8 excludes the whole path.
    """
    for component in PurePath(path).parts:
        if not _is_text(component):
            get_logger().warning("Skipping non-UTF8 path: %r", path)
            return True
        if component in patterns:
            get_logger().info("[Exclude] Skipping: %s (matches '%s')", path, component)
            return True
    return False


__all__ = ["is_excluded"]
