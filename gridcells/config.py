"""Environment-driven configuration for gridcells."""

from __future__ import annotations

import math
import os
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass

_LOG_FORMATS: frozenset[str] = frozenset({"text", "json"})


@dataclass(frozen=True, slots=True)
class GridcellsConfig:
    """Immutable library configuration."""

    log_level: str = "WARNING"
    log_format: str = "text"  # text|json
    reverse_lookup_tolerance: float = 0.0


_CONFIG: ContextVar[GridcellsConfig | None] = ContextVar("gridcells_config", default=None)


def _env_value(name: str, env: Mapping[str, str] | None) -> str | None:
    """Return the stripped variable, treating blank values as unset."""
    source = os.environ if env is None else env
    value = source.get(name)
    if value is None:
        return None
    return str(value).strip() or None


def _tolerance(env: Mapping[str, str] | None) -> float:
    raw = _env_value("GRIDCELLS_REVERSE_LOOKUP_TOLERANCE", env)
    if raw is None:
        return 0.0
    try:
        value = float(raw)
    except ValueError:
        return 0.0
    # Reverse lookup needs a finite, non-negative window.
    if not math.isfinite(value) or value < 0:
        return 0.0
    return value


def _log_format(env: Mapping[str, str] | None) -> str:
    value = (_env_value("GRIDCELLS_LOG_FORMAT", env) or "text").lower()
    return value if value in _LOG_FORMATS else "text"


def resolve_log_level_name(
    default: str = "WARNING", *, env: Mapping[str, str] | None = None
) -> str:
    """Resolve log level with the package-prefixed override taking precedence."""
    value = _env_value("GRIDCELLS_LOG_LEVEL", env) or _env_value("LOG_LEVEL", env) or default
    return value.upper()


def load_config(*, env: Mapping[str, str] | None = None) -> GridcellsConfig:
    """Load configuration from environment variables."""
    return GridcellsConfig(
        log_level=resolve_log_level_name(env=env),
        log_format=_log_format(env),
        reverse_lookup_tolerance=_tolerance(env),
    )


def initialize_config(*, env: Mapping[str, str] | None = None) -> GridcellsConfig:
    config = load_config(env=env)
    _CONFIG.set(config)
    return config


def set_config(config: GridcellsConfig) -> GridcellsConfig:
    _CONFIG.set(config)
    return config


def get_config() -> GridcellsConfig:
    config = _CONFIG.get()
    if config is not None:
        return config
    return initialize_config()


@contextmanager
def use_config(config: GridcellsConfig) -> Iterator[GridcellsConfig]:
    """Make ``config`` active for the duration of a block."""
    token = _CONFIG.set(config)
    try:
        yield config
    finally:
        _CONFIG.reset(token)


__all__ = [
    "GridcellsConfig",
    "get_config",
    "initialize_config",
    "load_config",
    "resolve_log_level_name",
    "set_config",
    "use_config",
]
