"""
smartequals — Context-sensitive equals key for R-like editors

Decides, from the text before the cursor alone, whether pressing ``=``
should insert a literal ``=``, a space-padded ``==``, or the language's
assignment token. Pressing the key twice in a row turns a freshly
inserted assignment into an equality comparison.

Quick Start:
    >>> from smartequals import CursorContext, EqualsConfig, resolve
    >>> config = EqualsConfig(assignment_token="<- ")
    >>> action = resolve(CursorContext.from_text("x ", 2), config)
    >>> action.apply("x ", 2)
    ('x <- ', 5)

    >>> # Or drive a buffer through the enable/disable lifecycle
    >>> from smartequals import ConfigStack, SmartEqualsMode, TextBuffer
    >>> mode = SmartEqualsMode(ConfigStack())
    >>> mode.enable()
    >>> buf = TextBuffer("f(x")
    >>> _ = mode.press(buf)
    >>> buf.text
    'f(x='

Installation:
    pip install smartequals          # zero runtime dependencies
"""

from smartequals.actions import DeleteBackward, EditAction, EditOp, Insert
from smartequals.buffer import DEFAULT_TARGET_LANGUAGES, TextBuffer
from smartequals.config import DEFAULT_ASSIGNMENT_TOKEN, DEFAULT_TRIGGER_KEY, EqualsConfig
from smartequals.context import CursorContext
from smartequals.errors import ConfigError, SmartEqualsError
from smartequals.host import EditorHost
from smartequals.mode import ConfigStack, SmartEqualsMode
from smartequals.resolver import resolve
from smartequals.syntax import SyntaxState, in_string_or_comment, scan_state

__version__ = "0.1.0"

__all__ = [  # noqa: RUF022 — grouped by category for maintainability
    "__version__",
    # Resolver
    "resolve",
    "CursorContext",
    # Actions
    "DeleteBackward",
    "EditAction",
    "EditOp",
    "Insert",
    # Configuration
    "DEFAULT_ASSIGNMENT_TOKEN",
    "DEFAULT_TRIGGER_KEY",
    "EqualsConfig",
    "ConfigStack",
    "SmartEqualsMode",
    # Hosts
    "DEFAULT_TARGET_LANGUAGES",
    "EditorHost",
    "TextBuffer",
    # Syntax
    "SyntaxState",
    "in_string_or_comment",
    "scan_state",
    # Errors
    "ConfigError",
    "SmartEqualsError",
]
