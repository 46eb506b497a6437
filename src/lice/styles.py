"""Comment style registry.

Maps a file extension onto the comment syntax used to render the license
header for that language. The set of styles is small and closed; lookups
for anything outside the table return ``None`` and the caller skips the
file.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional


@dataclass(frozen=True)
class CommentProfile:
    # Opening marker written on its own line, e.g. "/*\n"; empty for line comments
    start: str
    # Written before every header line, e.g. " * " or "# "
    prefix: str
    # Closing marker including the blank separator line; empty for line comments
    end: str

    @property
    def is_block(self) -> bool:
        return bool(self.start) and bool(self.end)

    @property
    def opener(self) -> str:
        """Bare block opener without layout whitespace ("/*")."""
        return self.start.strip()

    @property
    def closer(self) -> str:
        """Bare block closer without layout whitespace ("*/")."""
        return self.end.strip()


STYLE_C_LIKE = CommentProfile(start="/*\n", prefix=" * ", end=" */\n\n")
STYLE_DOUBLE_SLASH = CommentProfile(start="", prefix="// ", end="")  # Rust, Go, Java, JS/TS
STYLE_HASH = CommentProfile(start="", prefix="# ", end="")  # Python, shell, Ruby, YAML, TOML
STYLE_DASH = CommentProfile(start="", prefix="-- ", end="")  # Lua, Haskell, SQL

EXTENSION_STYLES: Dict[str, CommentProfile] = {
    "c": STYLE_C_LIKE,
    "h": STYLE_C_LIKE,
    "cpp": STYLE_C_LIKE,
    "hpp": STYLE_C_LIKE,
    "css": STYLE_C_LIKE,
    "rs": STYLE_DOUBLE_SLASH,
    "go": STYLE_DOUBLE_SLASH,
    "java": STYLE_DOUBLE_SLASH,
    "js": STYLE_DOUBLE_SLASH,
    "ts": STYLE_DOUBLE_SLASH,
    "py": STYLE_HASH,
    "sh": STYLE_HASH,
    "rb": STYLE_HASH,
    "yaml": STYLE_HASH,
    "toml": STYLE_HASH,
    "lua": STYLE_DASH,
    "hs": STYLE_DASH,
    "sql": STYLE_DASH,
}


def resolve(extension: Optional[str]) -> Optional[CommentProfile]:
    """Return the comment profile for ``extension`` (without the dot), or None.

    Matching is exact and case-sensitive, the same way the table is written.
    """
    if not extension:
        return None
    return EXTENSION_STYLES.get(extension)


__all__ = [
    "CommentProfile",
    "EXTENSION_STYLES",
    "STYLE_C_LIKE",
    "STYLE_DASH",
    "STYLE_DOUBLE_SLASH",
    "STYLE_HASH",
    "resolve",
]
