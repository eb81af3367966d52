"""Per-keypress cursor context.

A CursorContext is the resolver's entire view of the buffer: the two
characters before the cursor, the editable-region text preceding it for
token look-back, and the host's answers to "inside a string or comment?"
and "is this the target language?". It is built fresh for every key press
and discarded afterwards.

Example:
    >>> ctx = CursorContext.from_text("x <- ", 5)
    >>> ctx.prev_char, ctx.look_back(3)
    (' ', '<- ')
    >>> ctx.look_back(9) is None
    True
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from smartequals.host import EditorHost


@dataclass(frozen=True, slots=True)
class CursorContext:
    """Snapshot of the text before the cursor for a single key press.

    Attributes:
        prev_char: Character immediately before the cursor (None at region start)
        prev_prev_char: Character two positions back (None if out of region)
        inside_string_or_comment: Cursor is in a string literal or comment
        is_target_language: Buffer is in the assignment token's language
        raw_override: Caller explicitly asked for a literal trigger key
        preceding: Editable-region text before the cursor, used for look-back.
            May be a suffix of the region text; look-back past its start is
            treated as out of range. When empty, look-back never matches, so
            a repeated press is not recognized; hosts should pass it.

    Raises:
        ValueError: If ``preceding`` disagrees with ``prev_char`` or
            ``prev_prev_char``.

    """

    prev_char: str | None
    prev_prev_char: str | None
    inside_string_or_comment: bool = False
    is_target_language: bool = True
    raw_override: bool = False
    preceding: str = ""

    def __post_init__(self) -> None:
        preceding = self.preceding
        if not preceding:
            return
        if preceding[-1] != self.prev_char or (
            len(preceding) > 1 and preceding[-2] != self.prev_prev_char
        ):
            raise ValueError(
                f"Inconsistent cursor context: preceding ends with {preceding[-2:]!r} "
                f"but prev_prev_char={self.prev_prev_char!r}, prev_char={self.prev_char!r}"
            )

    def look_back(self, n: int) -> str | None:
        """Return the ``n`` characters before the cursor.

        Returns None when the read would run past the start of the editable
        region. Never raises for non-negative ``n``.
        """
        if n < 0 or n > len(self.preceding):
            return None
        if n == 0:
            return ""
        return self.preceding[-n:]

    @classmethod
    def from_text(
        cls,
        text: str,
        cursor: int,
        *,
        region_start: int = 0,
        inside_string_or_comment: bool = False,
        is_target_language: bool = True,
        raw_override: bool = False,
    ) -> CursorContext:
        """Build a context from a plain string and a cursor offset.

        Characters before ``region_start`` are invisible, as if the buffer
        were narrowed to ``text[region_start:]``.

        Raises:
            ValueError: If cursor or region_start fall outside the text.

        """
        if not 0 <= region_start <= cursor <= len(text):
            raise ValueError(
                f"Invalid cursor {cursor} for region starting at {region_start} "
                f"in text of length {len(text)}"
            )
        preceding = text[region_start:cursor]
        return cls(
            prev_char=preceding[-1] if preceding else None,
            prev_prev_char=preceding[-2] if len(preceding) > 1 else None,
            inside_string_or_comment=inside_string_or_comment,
            is_target_language=is_target_language,
            raw_override=raw_override,
            preceding=preceding,
        )

    @classmethod
    def from_host(
        cls,
        host: EditorHost,
        *,
        raw_override: bool = False,
    ) -> CursorContext:
        """Build a context by querying an EditorHost."""
        preceding = host.text_before(host.cursor - host.region_start) or ""
        return cls(
            prev_char=host.char_before(1),
            prev_prev_char=host.char_before(2),
            inside_string_or_comment=host.in_string_or_comment(),
            is_target_language=host.is_target_language(),
            raw_override=raw_override,
            preceding=preceding,
        )


__all__ = ["CursorContext"]
