"""ContextVar-based parse configuration for delimit.

Provides thread-local configuration using Python's ContextVars (PEP 567).
The tree transformer and every InlineParser created without an explicit
config read the active value.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    from delimit.config import ParseConfig, parse_config_context
    from delimit import parse_inline

    with parse_config_context(ParseConfig(softbreaks=True)):
        nodes = parse_inline("first line\\nsecond line")

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class ParseConfig:
    """Immutable inline parse configuration.

    Attributes:
        softbreaks: Emit SoftBreak nodes for newlines instead of keeping them
            inside Text runs.
        keep_inert_delimiters: Emit ``*`` runs that can neither open nor close
            as literal Text. By default such runs are dropped.

    """

    softbreaks: bool = False
    keep_inert_delimiters: bool = False

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> "ParseConfig":
        """Create ParseConfig from dictionary.

        Only includes keys that are valid ParseConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = ParseConfig.from_dict({"softbreaks": True, "other": 1})
            >>> config.softbreaks
            True

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ParseConfig = ParseConfig()

_parse_config: ContextVar[ParseConfig] = ContextVar(
    "delimit_parse_config",
    default=_DEFAULT_CONFIG,
)


def get_parse_config() -> ParseConfig:
    """Get current parse configuration (thread-local)."""
    return _parse_config.get()


def set_parse_config(config: ParseConfig) -> None:
    """Set parse configuration for the current context.

    Only affects the current thread's context. Other threads are unaffected.
    """
    _parse_config.set(config)


def reset_parse_config() -> None:
    """Reset to the default configuration singleton."""
    _parse_config.set(_DEFAULT_CONFIG)


@contextmanager
def parse_config_context(config: ParseConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with parse_config_context(ParseConfig(softbreaks=True)):
        ...     get_parse_config().softbreaks
        True
        >>> get_parse_config().softbreaks
        False

    """
    previous = _parse_config.get()
    _parse_config.set(config)
    try:
        yield
    finally:
        _parse_config.set(previous)


__all__ = [
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
]
