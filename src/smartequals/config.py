"""Immutable resolver configuration for smartequals.

The resolver reads two values at call time: the assignment token it inserts
and the key that triggers it. Both live in a frozen EqualsConfig which is
passed explicitly to ``resolve``. Nothing here is a module-level mutable
global; scoping and the enable/disable lifecycle are handled by
``smartequals.mode.ConfigStack``.

Usage:
    >>> from smartequals.config import EqualsConfig
    >>> config = EqualsConfig(assignment_token=" <- ")
    >>> config.strip_leading_space().assignment_token
    '<- '

Thread Safety:
    EqualsConfig is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import Any

from smartequals.errors import ConfigError

DEFAULT_ASSIGNMENT_TOKEN = " <- "
DEFAULT_TRIGGER_KEY = "="


@dataclass(frozen=True, slots=True)
class EqualsConfig:
    """Immutable resolver configuration.

    Attributes:
        assignment_token: The target language's assignment operator as it
            should be inserted (e.g. " <- "). Must be non-empty.
        trigger_key: Single character that invokes the resolver.

    Raises:
        ConfigError: If the token is empty or the trigger key is not a
            single character.

    """

    assignment_token: str = DEFAULT_ASSIGNMENT_TOKEN
    trigger_key: str = DEFAULT_TRIGGER_KEY

    def __post_init__(self) -> None:
        if not isinstance(self.assignment_token, str) or not self.assignment_token:
            raise ConfigError("assignment_token", "must be a non-empty string")
        if not isinstance(self.trigger_key, str) or len(self.trigger_key) != 1:
            raise ConfigError(
                "trigger_key", f"must be a single character, got {self.trigger_key!r}"
            )

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> EqualsConfig:
        """Create EqualsConfig from a mapping.

        Useful when the host keeps its settings in a plain dict (user init
        files, JSON settings, etc.). Only keys that are EqualsConfig fields
        are used; unknown keys are silently ignored.

        Args:
            config_dict: Mapping with config values keyed by field name.

        Returns:
            New EqualsConfig instance with values from the mapping.

        Example:
            >>> EqualsConfig.from_dict({"assignment_token": " := ", "x": 1})
            EqualsConfig(assignment_token=' := ', trigger_key='=')

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)

    def strip_leading_space(self) -> EqualsConfig:
        """Return a copy whose token has one leading space removed.

        The resolver only fires after a space, so an enabled mode keeps the
        token without its own leading space. A token that is a single space
        is left alone so the result stays non-empty.
        """
        token = self.assignment_token
        if token.startswith(" ") and len(token) > 1:
            return replace(self, assignment_token=token[1:])
        return self


__all__ = [
    "DEFAULT_ASSIGNMENT_TOKEN",
    "DEFAULT_TRIGGER_KEY",
    "EqualsConfig",
]
