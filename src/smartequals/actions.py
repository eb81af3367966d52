"""Edit actions produced by the resolver.

An EditAction is an ordered tuple of primitive operations applied at the
cursor: delete characters backward, then insert text. The host applies the
whole action in order as one edit.

Example:
    >>> from smartequals.actions import DeleteBackward, EditAction, Insert
    >>> action = EditAction((DeleteBackward(3), Insert("== ")))
    >>> action.apply("x <- ", 5)
    ('x == ', 5)

Thread Safety:
    All types are frozen dataclasses; ``apply`` is a pure function.

"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from smartequals.errors import SmartEqualsError

if TYPE_CHECKING:
    from smartequals.host import EditorHost


@dataclass(frozen=True, slots=True)
class DeleteBackward:
    """Delete ``count`` characters immediately before the cursor."""

    count: int

    def __post_init__(self) -> None:
        if self.count < 0:
            raise ValueError(f"DeleteBackward count must be >= 0, got {self.count}")


@dataclass(frozen=True, slots=True)
class Insert:
    """Insert ``text`` at the cursor; the cursor ends up after it."""

    text: str


type EditOp = DeleteBackward | Insert


@dataclass(frozen=True, slots=True)
class EditAction:
    """Ordered sequence of edit operations for one key press.

    Attributes:
        ops: Operations in the order the host must apply them.

    """

    ops: tuple[EditOp, ...] = field(default_factory=tuple)

    @classmethod
    def insert(cls, text: str) -> EditAction:
        """Shorthand for an action that only inserts ``text``."""
        return cls((Insert(text),))

    @property
    def inserted_text(self) -> str:
        """Concatenation of all inserted text, ignoring deletions."""
        return "".join(op.text for op in self.ops if isinstance(op, Insert))

    @property
    def deleted_count(self) -> int:
        """Total number of characters deleted backward."""
        return sum(op.count for op in self.ops if isinstance(op, DeleteBackward))

    def apply(self, text: str, cursor: int, *, region_start: int = 0) -> tuple[str, int]:
        """Apply the action to a string buffer.

        Deletions that would cross ``region_start`` stop at it.

        Args:
            text: Buffer contents before the edit.
            cursor: Cursor offset in ``text``.
            region_start: Start of the editable region.

        Returns:
            Tuple of (new_text, new_cursor).

        Raises:
            ValueError: If cursor or region_start fall outside the text.

        """
        if not 0 <= region_start <= cursor <= len(text):
            raise ValueError(
                f"Invalid cursor {cursor} for region starting at {region_start} "
                f"in text of length {len(text)}"
            )
        for op in self.ops:
            match op:
                case DeleteBackward(count=count):
                    start = max(region_start, cursor - count)
                    text = text[:start] + text[cursor:]
                    cursor = start
                case Insert(text=inserted):
                    text = text[:cursor] + inserted + text[cursor:]
                    cursor += len(inserted)
        return text, cursor

    def apply_to(self, host: EditorHost) -> None:
        """Apply the action through an EditorHost's mutation primitives."""
        for op in self.ops:
            match op:
                case DeleteBackward(count=count):
                    if count:
                        host.delete_backward(count)
                case Insert(text=inserted):
                    if inserted:
                        host.insert(inserted)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-compatible dict."""
        ops: list[dict[str, Any]] = []
        for op in self.ops:
            match op:
                case DeleteBackward(count=count):
                    ops.append({"op": "delete", "count": count})
                case Insert(text=inserted):
                    ops.append({"op": "insert", "text": inserted})
        return {"ops": ops}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> EditAction:
        """Reconstruct an EditAction from ``to_dict`` output.

        Raises:
            SmartEqualsError: If an operation name is not recognized.

        """
        return cls(tuple(_op_from_dict(item) for item in data.get("ops", ())))


def _op_from_dict(item: Mapping[str, Any]) -> EditOp:
    name = item.get("op")
    if name == "delete":
        return DeleteBackward(int(item["count"]))
    if name == "insert":
        return Insert(str(item["text"]))
    raise SmartEqualsError(f"Unknown edit operation: {name!r}")


__all__ = [
    "DeleteBackward",
    "EditAction",
    "EditOp",
    "Insert",
]
