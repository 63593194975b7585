"""ContextVar-based render configuration for Hornbook.

Provides thread-local configuration using Python's ContextVars (PEP 567).
A TemplateBuilder reads the active config once, when it is created.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    from hornbook.config import RenderConfig, render_config_context

    with render_config_context(RenderConfig(escape_single_quotes=True)):
        html = into_string(page)

"""

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Immutable render configuration.

    Attributes:
        escape_single_quotes: Also escape ``'`` as ``&#x27;`` in escaping writes
        max_size_hint: Upper bound applied to size hints before they are used
            as a capacity reservation. Hints never affect output.

    """

    escape_single_quotes: bool = False
    max_size_hint: int = 1 << 20

    @classmethod
    def from_dict(cls, config_dict: dict) -> "RenderConfig":
        """Create RenderConfig from dictionary.

        Only includes keys that are valid RenderConfig fields; unknown keys
        are silently ignored.

        Args:
            config_dict: Dictionary with config values. Keys should match
                RenderConfig attribute names.

        Returns:
            New RenderConfig instance with values from dict.

        Example:
            >>> config = RenderConfig.from_dict({
            ...     "escape_single_quotes": True,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.escape_single_quotes
            True

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)

    def clamp_size_hint(self, hint: int) -> int:
        """Clamp a producer's size hint into ``[0, max_size_hint]``."""
        if hint <= 0:
            return 0
        return min(hint, self.max_size_hint)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: RenderConfig = RenderConfig()

_render_config: ContextVar[RenderConfig] = ContextVar(
    "render_config",
    default=_DEFAULT_CONFIG,
)


def get_render_config() -> RenderConfig:
    """Get current render configuration (thread-local)."""
    return _render_config.get()


def set_render_config(config: RenderConfig) -> None:
    """Set render configuration for current context.

    Args:
        config: RenderConfig instance to use for this context.

    """
    _render_config.set(config)


def reset_render_config() -> None:
    """Reset to default configuration."""
    _render_config.set(_DEFAULT_CONFIG)


@contextmanager
def render_config_context(config: RenderConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Args:
        config: RenderConfig to use within the context.

    Yields:
        None

    Example:
        >>> with render_config_context(RenderConfig(escape_single_quotes=True)):
        ...     html = into_string("it's")
        >>> html
        'it&#x27;s'

    Thread Safety:
        Only affects the current thread's context. Properly restores previous
        config even if an exception is raised.

    """
    previous = _render_config.get()
    _render_config.set(config)
    try:
        yield
    finally:
        _render_config.set(previous)


__all__ = [
    "RenderConfig",
    "get_render_config",
    "set_render_config",
    "reset_render_config",
    "render_config_context",
]
