"""EditorHost protocol for the editor collaborator.

The resolver never touches an editor directly. A host exposes the cursor,
read-only look-back, two context predicates and the two mutation
primitives that an EditAction is applied through. ``TextBuffer`` in
``smartequals.buffer`` is the in-memory implementation; adapters for real
editors implement the same surface.

Thread Safety:
Hosts are driven from the editor's single input-event loop. Implementations
need not be thread-safe; a key press is resolved and applied before the
next event is processed.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class EditorHost(Protocol):
    """Protocol for editor buffers the trigger key is pressed in.

    Offsets are absolute character positions. ``region_start`` marks the
    beginning of the editable region (a console's process mark, the start
    of an embedded code chunk, or 0); nothing before it is visible to
    look-back.
    """

    @property
    def cursor(self) -> int:
        """Absolute position of the insertion point."""
        ...

    @property
    def region_start(self) -> int:
        """Absolute start of the editable region."""
        ...

    def char_before(self, offset: int = 1) -> str | None:
        """Character ``offset`` positions before the cursor, or None outside the region."""
        ...

    def text_before(self, n: int) -> str | None:
        """The ``n`` characters before the cursor, or None if that leaves the region."""
        ...

    def in_string_or_comment(self) -> bool:
        """True when the cursor sits inside a string literal or a comment."""
        ...

    def is_target_language(self) -> bool:
        """True when the buffer holds the language the assignment token belongs to."""
        ...

    def delete_backward(self, n: int) -> None:
        """Delete ``n`` characters before the cursor."""
        ...

    def insert(self, text: str) -> None:
        """Insert ``text`` at the cursor, leaving the cursor after it."""
        ...


__all__ = ["EditorHost"]
