"""In-memory text buffer implementing the EditorHost protocol.

TextBuffer holds text, a cursor and the buffer's language, and answers the
resolver's queries directly from the text. It supports narrowing the
editable region, the way an interactive console only edits input after its
process mark or an embedded code chunk is edited on its own.

Example:
    >>> buf = TextBuffer("x ", language="R")
    >>> buf.insert("<- ")
    >>> buf.text, buf.cursor
    ('x <- ', 5)
    >>> with buf.narrow(2):
    ...     buf.text_before(3), buf.text_before(4)
    ('<- ', None)
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from contextlib import contextmanager

from smartequals.syntax import in_string_or_comment

DEFAULT_TARGET_LANGUAGES = frozenset({"R", "S"})


class TextBuffer:
    """Mutable string buffer with a cursor and an optional narrowed region.

    Args:
        text: Initial contents.
        cursor: Initial cursor; defaults to the end of the text.
        language: Name of the buffer's language (e.g. "R").
        target_languages: Languages the assignment token applies to.

    Raises:
        ValueError: If the cursor is outside the text.

    """

    __slots__ = ("_text", "_cursor", "_region_start", "language", "target_languages")

    def __init__(
        self,
        text: str = "",
        cursor: int | None = None,
        *,
        language: str = "R",
        target_languages: Iterable[str] = DEFAULT_TARGET_LANGUAGES,
    ) -> None:
        self._text = text
        self._cursor = len(text) if cursor is None else cursor
        self._region_start = 0
        self.language = language
        self.target_languages = frozenset(target_languages)
        self._check_position(self._cursor)

    def __repr__(self) -> str:
        return (
            f"TextBuffer({self._text!r}, cursor={self._cursor}, "
            f"region_start={self._region_start}, language={self.language!r})"
        )

    @property
    def text(self) -> str:
        return self._text

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def region_start(self) -> int:
        return self._region_start

    def move_to(self, pos: int) -> None:
        """Move the cursor to ``pos`` within the editable region."""
        self._check_position(pos)
        self._cursor = pos

    def char_before(self, offset: int = 1) -> str | None:
        pos = self._cursor - offset
        if offset < 1 or pos < self._region_start:
            return None
        return self._text[pos]

    def text_before(self, n: int) -> str | None:
        start = self._cursor - n
        if n < 0 or start < self._region_start:
            return None
        return self._text[start : self._cursor]

    def in_string_or_comment(self) -> bool:
        return in_string_or_comment(self._text, self._cursor, start=self._region_start)

    def is_target_language(self) -> bool:
        return self.language in self.target_languages

    def delete_backward(self, n: int) -> None:
        """Delete up to ``n`` characters before the cursor, stopping at the region start."""
        if n < 0:
            raise ValueError(f"Cannot delete a negative count: {n}")
        start = max(self._region_start, self._cursor - n)
        self._text = self._text[:start] + self._text[self._cursor :]
        self._cursor = start

    def insert(self, text: str) -> None:
        self._text = self._text[: self._cursor] + text + self._text[self._cursor :]
        self._cursor += len(text)

    @contextmanager
    def narrow(self, start: int) -> Iterator[TextBuffer]:
        """Restrict the editable region to begin at ``start`` for the block.

        Restores the previous region even if an exception is raised.

        Raises:
            ValueError: If ``start`` is after the cursor or before the current
                region start; nested narrowing can only shrink the region.

        """
        if not self._region_start <= start <= self._cursor:
            raise ValueError(
                f"Cannot narrow to {start}: region starts at {self._region_start}, "
                f"cursor at {self._cursor}"
            )
        previous = self._region_start
        self._region_start = start
        try:
            yield self
        finally:
            self._region_start = min(previous, len(self._text))

    def _check_position(self, pos: int) -> None:
        if not self._region_start <= pos <= len(self._text):
            raise ValueError(
                f"Position {pos} outside editable region "
                f"{self._region_start}..{len(self._text)}"
            )


__all__ = ["DEFAULT_TARGET_LANGUAGES", "TextBuffer"]
