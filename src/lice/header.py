"""Header synthesis, detection and replacement.

All functions here are pure: they take file content as text and return
text. Reading and writing files is the engine's job.
"""
from __future__ import annotations

from enum import Enum
from typing import List, Tuple

from .styles import CommentProfile

SHEBANG = "#!"


class Outcome(str, Enum):
    INSERTED = "inserted"
    UPDATED = "updated"
    SKIPPED_MALFORMED = "malformed"


def split_lines(text: str) -> List[str]:
    """Split on newlines, dropping one trailing '\\r' per line and the empty
    tail produced by a final newline."""
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [ln[:-1] if ln.endswith("\r") else ln for ln in lines]


def shebang_offset(content: str) -> int:
    """Index just past the interpreter directive line, or 0 when there is none."""
    if content.startswith(SHEBANG):
        newline = content.find("\n")
        if newline >= 0:
            return newline + 1
    return 0


def synthesize(raw_text: str, profile: CommentProfile) -> str:
    """Render ``raw_text`` as a comment header in the given style.

    Block styles are wrapped in ``start``/``end`` (``end`` carries the blank
    separator line). Line styles get one extra newline after the last line
    instead. Trailing whitespace is trimmed from every template line.
    """
    parts = [profile.start] if profile.is_block else []
    for line in split_lines(raw_text):
        parts.append(f"{profile.prefix}{line.rstrip()}\n")
    parts.append(profile.end if profile.is_block else "\n")
    return "".join(parts)


def is_current(file_content: str, header_text: str) -> bool:
    """True when the file (after any shebang line) already opens with the header.

    Leading whitespace in the file and surrounding whitespace of the header are
    ignored; everything else must match exactly.
    """
    body = file_content[shebang_offset(file_content):]
    return body.lstrip().startswith(header_text.strip())


def _split_directive(content: str) -> Tuple[str, str]:
    offset = shebang_offset(content)
    if offset:
        return content[:offset], content[offset:]
    if content.startswith(SHEBANG):
        # Directive with no newline: the whole file is the directive line.
        return content + "\n", ""
    return "", content


def _replace_block(content: str, header_text: str, profile: CommentProfile) -> Tuple[str, Outcome]:
    directive, rest = _split_directive(content)
    stripped = rest.lstrip()
    if not stripped.startswith(profile.opener):
        return directive + header_text + rest, Outcome.INSERTED

    search_from = len(rest) - len(stripped) + len(profile.opener)
    end_idx = rest.find(profile.closer, search_from)
    if end_idx < 0:
        # Unterminated comment: leave the file alone rather than guess.
        return content, Outcome.SKIPPED_MALFORMED
    body = rest[end_idx + len(profile.closer):]
    return directive + header_text + body.lstrip(), Outcome.UPDATED


def _replace_lines(content: str, header_text: str, profile: CommentProfile) -> Tuple[str, Outcome]:
    # directive kept byte-for-byte, line ending included
    directive, rest = _split_directive(content)
    lines = split_lines(rest)
    idx = 0

    marker = profile.prefix.strip()
    consumed_comment = False
    while idx < len(lines):
        trimmed = lines[idx].strip()
        if trimmed.startswith(marker):
            consumed_comment = True
            idx += 1
        elif not trimmed:
            # one blank separator closes the old header
            idx += 1
            break
        else:
            break

    new_content = directive + header_text + "\n".join(lines[idx:])
    if not new_content.endswith("\n"):
        new_content += "\n"
    return new_content, Outcome.UPDATED if consumed_comment else Outcome.INSERTED


def replace(file_content: str, header_text: str, profile: CommentProfile) -> Tuple[str, Outcome]:
    """Compute new file content carrying ``header_text``.

    Returns ``(new_content, outcome)``. On ``SKIPPED_MALFORMED`` the content is
    returned unchanged and must not be written back.
    """
    if profile.is_block:
        return _replace_block(file_content, header_text, profile)
    return _replace_lines(file_content, header_text, profile)


__all__ = [
    "Outcome",
    "is_current",
    "replace",
    "shebang_offset",
    "split_lines",
    "synthesize",
]
