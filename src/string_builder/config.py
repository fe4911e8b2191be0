"""ContextVar-based builder configuration for string_builder.

Provides per-context configuration using Python's ContextVars (PEP 567).
A Builder reads the active config once, when it is constructed.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    from string_builder.config import BuilderConfig, builder_config_context

    with builder_config_context(BuilderConfig(default_capacity=64)):
        builder = Builder()  # reserves 64 bytes

    # Or set it for the current context
    set_builder_config(BuilderConfig(max_capacity=1 << 20))
    try:
        ...
    finally:
        reset_builder_config()

"""

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Iterator

DEFAULT_CAPACITY = 1024


@dataclass(frozen=True, slots=True)
class BuilderConfig:
    """Immutable builder configuration.

    Attributes:
        default_capacity: Bytes reserved by Builder() when no size is given
        max_capacity: Largest buffer a Builder may grow to (None = unbounded).
            Appends that would exceed it raise WriteError.

    """

    default_capacity: int = DEFAULT_CAPACITY
    max_capacity: int | None = None

    def __post_init__(self) -> None:
        if self.default_capacity < 0:
            msg = f"default_capacity must be non-negative, got {self.default_capacity}"
            raise ValueError(msg)
        if self.max_capacity is not None and self.max_capacity < 0:
            msg = f"max_capacity must be non-negative, got {self.max_capacity}"
            raise ValueError(msg)

    @classmethod
    def from_dict(cls, config_dict: dict) -> "BuilderConfig":
        """Create BuilderConfig from dictionary.

        Only includes keys that are valid BuilderConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = BuilderConfig.from_dict({
            ...     "default_capacity": 256,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.default_capacity
            256

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: BuilderConfig = BuilderConfig()

_builder_config: ContextVar[BuilderConfig] = ContextVar(
    "builder_config",
    default=_DEFAULT_CONFIG,
)


def get_builder_config() -> BuilderConfig:
    """Get the builder configuration for the current context."""
    return _builder_config.get()


def set_builder_config(config: BuilderConfig) -> None:
    """Set builder configuration for the current context.

    Only affects the current thread's context. Builders that already
    exist keep the config they were created with.
    """
    _builder_config.set(config)


def reset_builder_config() -> None:
    """Reset to the default configuration."""
    _builder_config.set(_DEFAULT_CONFIG)


@contextmanager
def builder_config_context(config: BuilderConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Example:
        >>> with builder_config_context(BuilderConfig(max_capacity=16)):
        ...     builder = Builder(8)
        >>> # Previous config restored, even if an exception was raised

    """
    previous = _builder_config.get()
    _builder_config.set(config)
    try:
        yield
    finally:
        _builder_config.set(previous)


__all__ = [
    "DEFAULT_CAPACITY",
    "BuilderConfig",
    "builder_config_context",
    "get_builder_config",
    "reset_builder_config",
    "set_builder_config",
]
