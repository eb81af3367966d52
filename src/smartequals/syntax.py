"""String and comment detection for R-like source.

Hosts must tell the resolver whether the cursor sits inside a string
literal or a comment. Real editors answer from their own syntax tables;
this module gives in-memory hosts the same answer for R-like buffers.

The scanner is a small finite state machine run from the start of the
editable region to the cursor:
- CODE: ordinary text
- STRING: inside a ``"``, ``'`` or backtick quoted literal (backslash escapes)
- COMMENT: after ``#`` outside a string, up to the end of the line

Raw strings (``r"(...)"``) are not modelled.

Thread Safety:
    All functions are pure: safe to call from any thread.

"""

from __future__ import annotations

from enum import Enum, auto


class SyntaxState(Enum):
    """Scanner states at a buffer position."""

    CODE = auto()  # Outside strings and comments
    STRING = auto()  # Inside a quoted literal
    COMMENT = auto()  # Inside a line comment


QUOTE_CHARS = frozenset("\"'`")
COMMENT_CHAR = "#"


def scan_state(text: str, end: int, *, start: int = 0) -> SyntaxState:
    """Return the scanner state at ``end`` after scanning ``text[start:end]``.

    Args:
        text: Buffer contents.
        end: Position to report the state at (typically the cursor).
        start: Where scanning begins (start of the editable region).

    Returns:
        SyntaxState in effect just before ``end``.

    Raises:
        ValueError: If the range falls outside ``text``.

    """
    if not 0 <= start <= end <= len(text):
        raise ValueError(f"Invalid scan range {start}..{end} for text of length {len(text)}")

    state = SyntaxState.CODE
    quote = ""
    pos = start
    while pos < end:
        char = text[pos]
        if state is SyntaxState.CODE:
            if char in QUOTE_CHARS:
                state = SyntaxState.STRING
                quote = char
            elif char == COMMENT_CHAR:
                state = SyntaxState.COMMENT
        elif state is SyntaxState.STRING:
            if char == "\\":
                # Skip the escaped character
                pos += 1
            elif char == quote:
                state = SyntaxState.CODE
                quote = ""
        elif char == "\n":
            state = SyntaxState.CODE
        pos += 1
    return state


def in_string_or_comment(text: str, pos: int, *, start: int = 0) -> bool:
    """True if ``pos`` lies inside a string literal or a comment."""
    return scan_state(text, pos, start=start) is not SyntaxState.CODE


__all__ = [
    "COMMENT_CHAR",
    "QUOTE_CHARS",
    "SyntaxState",
    "in_string_or_comment",
    "scan_state",
]
