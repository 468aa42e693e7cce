"""Text helpers: placeholder suppression, date ranges and wrapping."""

from __future__ import annotations

import re
from typing import Any, List, Optional

PLACEHOLDER_MARKER = "TODO"

_WHITESPACE_RE = re.compile(r"\s+")


def is_placeholder(value: Any) -> bool:
    """True for values that mark a field as intentionally not filled in."""
    if value is None:
        return False
    return str(value).strip().startswith(PLACEHOLDER_MARKER)


def safe_text(value: Any) -> str:
    """Return the trimmed text of ``value``, or ``""`` if it is not provided.

    ``None``, blank strings and ``TODO`` placeholders all count as not
    provided.
    """
    if value is None:
        return ""
    text = str(value).strip()
    if not text or is_placeholder(text):
        return ""
    return text


def join_present(parts: List[str], separator: str) -> str:
    """Join the non-empty parts with ``separator``."""
    return separator.join(part for part in parts if part)


def format_range(start: Any, end: Any, present: str) -> str:
    """Format a start/end date pair.

    Args:
        start: Start value (may be missing or a placeholder)
        end: End value (may be missing or a placeholder)
        present: Word used for an open-ended range

    Returns:
        ``"start – end"``, ``"start – present"``, ``"end"`` or ``""``
    """
    s = safe_text(start)
    e = safe_text(end)
    if s and e:
        return f"{s} – {e}"
    if s:
        return f"{s} – {present}"
    return e


def collapse_whitespace(text: str) -> str:
    return _WHITESPACE_RE.sub(" ", str(text)).strip()


def wrap_text(text: str, max_chars: int) -> List[str]:
    """Greedily pack characters into lines of at most ``max_chars``.

    Whitespace runs are collapsed first. Lines are cut at character
    boundaries, not word boundaries, which suits CJK text.

    Args:
        text: Text to wrap
        max_chars: Maximum characters per line (values below 1 count as 1)

    Returns:
        Wrapped lines; empty list for blank input
    """
    collapsed = collapse_whitespace(text)
    if not collapsed:
        return []

    max_chars = max(1, max_chars)
    lines: List[str] = []
    current = ""
    for char in collapsed:
        if len(current) >= max_chars:
            lines.append(current)
            current = char
            continue
        current += char
    if current:
        lines.append(current)
    return lines


def wrap_with_prefix(text: str, max_chars: int, prefix: Optional[str] = "") -> List[str]:
    """Wrap ``text`` behind ``prefix``, padding continuation lines to align."""
    prefix = prefix or ""
    wrapped = wrap_text(text, max_chars - len(prefix))
    padding = " " * len(prefix)
    return [f"{prefix if index == 0 else padding}{line}" for index, line in enumerate(wrapped)]
