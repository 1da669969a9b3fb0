"""Text processing utilities for trimming and display."""

import re
from typing import List

# Whitespace and line terminators removed when trimming, including the byte order
# mark (U+FEFF) that str.strip() keeps and the separators \x1c-\x1f it drops.
_TRIM_CHARACTERS = r"\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"
_TRIM_PATTERN = re.compile(f"^[{_TRIM_CHARACTERS}]+|[{_TRIM_CHARACTERS}]+$")


def trim(text: str) -> str:
    """
    Strip leading and trailing whitespace, byte order marks included.

    Example:
        >>> trim("\\ufeffJohn Smith  ")
        'John Smith'
    """
    return _TRIM_PATTERN.sub("", text)


def truncate_display(text: str, max_len: int) -> str:
    """
    Truncate text for display with ellipsis if needed.

    Args:
        text: Text to truncate
        max_len: Maximum length including ellipsis

    Returns:
        Original text if within max_len, otherwise truncated with "..."

    Example:
        >>> truncate_display("short", 10)
        'short'
        >>> truncate_display("this is a very long string", 10)
        'this is...'
    """
    return text if len(text) <= max_len else text[: max_len - 3] + "..."


def preview_lines(lines: List[str], max_lines: int = 3, max_len: int = 60) -> str:
    """
    Build a one-line preview of the first few lines of recovered text.

    Example:
        >>> preview_lines(["Jane Doe", "jane@x.com", "Python", "SQL"], max_lines=2)
        'Jane Doe | jane@x.com | ... (+2 lines)'
    """
    if not lines:
        return "(no text)"

    shown = [truncate_display(line, max_len) for line in lines[:max_lines]]
    remaining = len(lines) - len(shown)
    if remaining > 0:
        shown.append(f"... (+{remaining} lines)")
    return " | ".join(shown)
