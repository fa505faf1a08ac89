"""ANSI text utilities - measuring and truncating strings with escape codes."""

from __future__ import annotations

import re

from wcwidth import wcswidth, wcwidth

# Pattern to match ANSI CSI sequences (parameters, intermediates, final byte)
_ANSI_ESCAPE = re.compile(r'\x1b\[[0-?]*[ -/]*[@-~]')
# Same pattern, captured, so split() keeps the sequences
_ANSI_TOKENS = re.compile(f'({_ANSI_ESCAPE.pattern})')


def strip_ansi(s: str) -> str:
    """Remove all ANSI CSI sequences from a string."""
    return _ANSI_ESCAPE.sub('', s)


def char_width(char: str) -> int:
    """Terminal cells taken by a single character (control characters take none)."""
    return max(wcwidth(char), 0)


def width(s: str) -> int:
    """
    Visible width of a string in terminal cells.

    Escape sequences take no space, wide East-Asian characters and emoji
    take two cells, combining marks take none.
    """
    plain = strip_ansi(s)
    cells = wcswidth(plain)
    if cells < 0:
        # Control characters make wcswidth give up; count the rest per character
        return sum(char_width(c) for c in plain)
    return cells


def width_per_line(s: str) -> list[int]:
    """Visible width of each newline-separated line."""
    return [width(line) for line in s.split('\n')]


def max_width(s: str) -> int:
    """Width of the widest line (0 for an empty string)."""
    return max(width_per_line(s))


def line_count(s: str) -> int:
    """Number of lines; an empty string is one line."""
    return s.count('\n') + 1


def truncate(s: str, max_width: int, suffix: str = '') -> str:
    """
    Truncate an ANSI-escaped string to max visible width.

    Escape sequences are kept verbatim and do not count toward the width.
    When the string is cut, ``suffix`` is appended and any escape sequences
    from the dropped tail are emitted after it, so a trailing reset still
    closes the styling.

    Args:
        s: String to truncate
        max_width: Maximum visible width of the result
        suffix: Marker appended when the string is cut (e.g. "...")
    """
    if max_width <= 0:
        return ''
    if width(s) <= max_width:
        return s

    suffix_width = width(suffix)
    if suffix_width >= max_width:
        # Not even the suffix fits; show as much of it as possible
        return truncate(suffix, max_width)

    budget = max_width - suffix_width
    kept: list[str] = []
    tail_escapes: list[str] = []
    visible = 0
    cut = False

    for token in _ANSI_TOKENS.split(s):
        if not token:
            continue
        if _ANSI_ESCAPE.fullmatch(token):
            (tail_escapes if cut else kept).append(token)
            continue
        if cut:
            continue
        for char in token:
            w = char_width(char)
            if visible + w > budget:
                cut = True
                break
            kept.append(char)
            visible += w

    return ''.join(kept) + suffix + ''.join(tail_escapes)


def pad_to_width(s: str, target: int, char: str = ' ') -> str:
    """Pad string with char to reach width visible cells."""
    current = width(s)
    if current >= target:
        return s
    return s + char * (target - current)
