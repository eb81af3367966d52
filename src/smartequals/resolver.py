"""Equals-key resolver.

Decides what pressing the trigger key should do, given only the text before
the cursor. The decision is evaluated in order, first match wins:

1. Pass-through: raw override, a non-target language, a string or comment,
   or a previous character that is not a space, tab or ``=``. Inserts a
   literal ``=``, so default arguments like ``f(x=1)`` stay bare.
2. Chained ``==``: the previous character is ``=``. The left operand is
   space-separated first if needed, then ``= `` completes `` == ``.
3. Assignment: the previous character is a space or tab. Inserts the
   assignment token, unless the token was just inserted, in which case it
   is replaced by ``== ``.

The resolver keeps no state between calls. The "just inserted" case is
recognized by reading the buffer again, so edits made by other means
between key presses cannot desynchronize it.

Example:
    >>> from smartequals import CursorContext, EqualsConfig, resolve
    >>> config = EqualsConfig(assignment_token="<- ")
    >>> resolve(CursorContext.from_text("x ", 2), config).apply("x ", 2)
    ('x <- ', 5)
    >>> resolve(CursorContext.from_text("x <- ", 5), config).apply("x <- ", 5)
    ('x == ', 5)

Thread Safety:
    ``resolve`` is a pure function: safe to call from any thread.

"""

from __future__ import annotations

from smartequals.actions import DeleteBackward, EditAction, Insert
from smartequals.config import EqualsConfig
from smartequals.context import CursorContext
from smartequals.errors import ConfigError
from smartequals.utils.logger import get_logger

logger = get_logger(__name__)

# Whitespace that marks a spaced operator context
_BLANKS = frozenset(" \t")

# Characters after which the trigger key may need disambiguation
_ACTIVE_PREV = frozenset(" \t=")

_LITERAL = "="
_EQUALITY_TAIL = "= "
_EQUALITY = "== "


def resolve(context: CursorContext, config: EqualsConfig) -> EditAction:
    """Resolve one trigger key press into an EditAction.

    Args:
        context: Snapshot of the text before the cursor.
        config: Active configuration (assignment token and trigger key).

    Returns:
        The EditAction the host should apply at the cursor.

    Raises:
        ConfigError: If the assignment token is empty. EqualsConfig rejects
            this at construction; the check here guards duck-typed configs.

    """
    token = config.assignment_token
    if not token:
        raise ConfigError("assignment_token", "must be a non-empty string")

    if _is_pass_through(context):
        logger.debug("pass-through: prev_char=%r", context.prev_char)
        return EditAction.insert(_LITERAL)

    if context.prev_char == "=":
        if context.prev_prev_char not in _BLANKS:
            logger.debug("chained equals: spacing left operand %r", context.prev_prev_char)
            return EditAction((DeleteBackward(1), Insert(" ="), Insert(_EQUALITY_TAIL)))
        logger.debug("chained equals: left operand already spaced")
        return EditAction.insert(_EQUALITY_TAIL)

    if context.look_back(len(token)) == token:
        logger.debug("repeated trigger: replacing %r with %r", token, _EQUALITY)
        return EditAction((DeleteBackward(len(token)), Insert(_EQUALITY)))

    logger.debug("assignment: inserting %r", token)
    return EditAction.insert(token)


def _is_pass_through(context: CursorContext) -> bool:
    """True when the key press needs no disambiguation."""
    return (
        context.raw_override
        or not context.is_target_language
        or context.prev_char not in _ACTIVE_PREV
        or context.inside_string_or_comment
    )


__all__ = ["resolve"]
