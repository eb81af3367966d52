"""Enable/disable lifecycle and key-press handling.

The host integration layer owns a ConfigStack. Enabling smart-equals pushes
a configuration whose assignment token has its leading space stripped (the
resolver only fires after a space) and whose trigger key is the mode's key.
Disabling unwinds the stack to the snapshot taken on enable, so the previous
configuration is restored exactly.

Usage:
    >>> from smartequals import ConfigStack, SmartEqualsMode, TextBuffer
    >>> mode = SmartEqualsMode(ConfigStack())
    >>> buf = TextBuffer("x ")
    >>> with mode.enabled():
    ...     _ = mode.press(buf)
    >>> buf.text
    'x <- '

Thread Safety:
    Not thread-safe. Enable, disable and key presses are serialized by the
    editor's single-threaded event loop.

"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import replace
from typing import TYPE_CHECKING

from smartequals.actions import EditAction
from smartequals.config import DEFAULT_TRIGGER_KEY, EqualsConfig
from smartequals.context import CursorContext
from smartequals.errors import SmartEqualsError
from smartequals.resolver import resolve
from smartequals.utils.logger import get_logger

if TYPE_CHECKING:
    from smartequals.host import EditorHost

logger = get_logger(__name__)


class ConfigStack:
    """Explicit stack of EqualsConfig values.

    The bottom entry is the base configuration and can never be popped.

    Args:
        base: Base configuration; defaults to ``EqualsConfig()``.

    """

    __slots__ = ("_stack",)

    def __init__(self, base: EqualsConfig | None = None) -> None:
        self._stack: list[EqualsConfig] = [base if base is not None else EqualsConfig()]

    def __len__(self) -> int:
        return len(self._stack)

    @property
    def current(self) -> EqualsConfig:
        """The configuration in effect."""
        return self._stack[-1]

    def push(self, config: EqualsConfig) -> None:
        self._stack.append(config)

    def pop(self) -> EqualsConfig:
        """Remove and return the top configuration.

        Raises:
            SmartEqualsError: If only the base configuration is left.

        """
        if len(self._stack) == 1:
            raise SmartEqualsError("Cannot pop the base configuration")
        return self._stack.pop()

    def unwind(self, depth: int) -> None:
        """Pop entries until the stack holds ``depth`` configurations."""
        if depth < 1:
            raise SmartEqualsError(f"Cannot unwind below the base configuration: {depth}")
        del self._stack[depth:]

    @contextmanager
    def scoped(self, config: EqualsConfig) -> Iterator[EqualsConfig]:
        """Push ``config`` for the duration of the block.

        Restores the previous stack even if an exception is raised.
        """
        depth = len(self._stack)
        self.push(config)
        try:
            yield config
        finally:
            self.unwind(depth)


class SmartEqualsMode:
    """Two-state toggle for smart-equals handling of the trigger key.

    Holds a memento of the configuration in effect when it was enabled and
    restores it on disable.

    Args:
        stack: The host's configuration stack.
        trigger_key: Key the mode handles while enabled.

    """

    __slots__ = ("_stack", "_trigger_key", "_previous", "_depth")

    def __init__(self, stack: ConfigStack, *, trigger_key: str = DEFAULT_TRIGGER_KEY) -> None:
        self._stack = stack
        self._trigger_key = trigger_key
        self._previous: EqualsConfig | None = None
        self._depth = 0

    @property
    def is_enabled(self) -> bool:
        return self._previous is not None

    @property
    def previous_config(self) -> EqualsConfig | None:
        """Configuration saved on enable, or None while disabled."""
        return self._previous

    @property
    def config(self) -> EqualsConfig:
        """Configuration currently read by key presses."""
        return self._stack.current

    def enable(self) -> None:
        """Enable the mode. Does nothing if already enabled.

        Raises:
            ConfigError: If the mode's trigger key is not a single character.

        """
        if self.is_enabled:
            return
        previous = self._stack.current
        active = replace(previous.strip_leading_space(), trigger_key=self._trigger_key)
        self._depth = len(self._stack)
        self._stack.push(active)
        self._previous = previous
        logger.debug(
            "smart-equals enabled: token %r -> %r, key %r",
            previous.assignment_token,
            active.assignment_token,
            active.trigger_key,
        )

    def disable(self) -> None:
        """Disable the mode and restore the saved configuration. Idempotent."""
        if self._previous is None:
            return
        self._stack.unwind(self._depth)
        logger.debug(
            "smart-equals disabled: restored token %r", self._stack.current.assignment_token
        )
        self._previous = None

    def toggle(self) -> bool:
        """Flip the mode; returns True if it is now enabled."""
        if self.is_enabled:
            self.disable()
        else:
            self.enable()
        return self.is_enabled

    @contextmanager
    def enabled(self) -> Iterator[SmartEqualsMode]:
        """Enable the mode for the duration of the block."""
        was_enabled = self.is_enabled
        self.enable()
        try:
            yield self
        finally:
            if not was_enabled:
                self.disable()

    def press(self, host: EditorHost, *, raw: bool = False) -> EditAction:
        """Handle one trigger key press in ``host``.

        While disabled the trigger key is inserted literally. While enabled
        the cursor context is read from the host, resolved, and the result
        applied to the host.

        Args:
            host: Buffer the key was pressed in.
            raw: Insert the key literally regardless of context.

        Returns:
            The EditAction that was applied.

        """
        config = self._stack.current
        if not self.is_enabled:
            action = EditAction.insert(config.trigger_key)
        else:
            context = CursorContext.from_host(host, raw_override=raw)
            action = resolve(context, config)
        action.apply_to(host)
        return action


__all__ = ["ConfigStack", "SmartEqualsMode"]
