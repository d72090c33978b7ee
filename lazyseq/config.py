"""
lazyseq.config - Library settings

Holds the settings that influence how sequences present themselves. The
only knob today is the print length used by ``repr()``, which keeps an
accidental ``repr`` of an infinite sequence (in a REPL, a debugger or a log
line) from hanging.

Settings are read once from the environment:
    LAZYSEQ_PRINT_LENGTH=20     show at most 20 elements
    LAZYSEQ_PRINT_LENGTH=none   show every element

An unusable value at import time is logged and replaced by the default;
SeqConfig.from_env() itself rejects it with ValueError.
"""

import logging
import os
import threading
from dataclasses import dataclass, replace
from typing import Any, Optional

logger = logging.getLogger(__name__)

# Default configuration values
DEFAULT_PRINT_LENGTH = 100
PRINT_LENGTH_ENV = "LAZYSEQ_PRINT_LENGTH"


def _parse_print_length(raw: str) -> Optional[int]:
    value = raw.strip().lower()
    if value in ("", "none"):
        return None
    try:
        length = int(value)
    except ValueError:
        raise ValueError(
            f"{PRINT_LENGTH_ENV} must be an integer or 'none', got {raw!r}"
        ) from None
    if length < 0:
        raise ValueError(f"{PRINT_LENGTH_ENV} must not be negative, got {length}")
    return length


@dataclass(frozen=True)
class SeqConfig:
    """
    Settings for sequence presentation.

    Attributes:
        print_length: Maximum number of elements rendered by repr().
                      None renders every element (never returns for
                      infinite sequences).
    """

    print_length: Optional[int] = DEFAULT_PRINT_LENGTH

    def __post_init__(self):
        if self.print_length is not None and self.print_length < 0:
            raise ValueError(
                f"print_length must not be negative, got {self.print_length}"
            )

    @classmethod
    def from_env(cls, environ: Optional[dict[str, str]] = None) -> "SeqConfig":
        """
        Build a config from environment variables.

        Args:
            environ: Mapping to read from. If None, uses os.environ.

        Returns:
            A SeqConfig with defaults for every unset variable.
        """
        if environ is None:
            environ = dict(os.environ)
        raw = environ.get(PRINT_LENGTH_ENV)
        if raw is None:
            return cls()
        return cls(print_length=_parse_print_length(raw))

    def to_dict(self) -> dict[str, Any]:
        """Convert config to a dictionary."""
        return {"print_length": self.print_length}


def _initial_config(environ: Optional[dict[str, str]] = None) -> SeqConfig:
    try:
        return SeqConfig.from_env(environ)
    except ValueError as e:
        logger.warning("Ignoring invalid %s: %s", PRINT_LENGTH_ENV, e)
        return SeqConfig()


_config_lock = threading.Lock()
_config = _initial_config()


def get_config() -> SeqConfig:
    """Return the active settings."""
    return _config


def set_config(config: SeqConfig) -> SeqConfig:
    """Install new settings and return the previous ones."""
    global _config
    if not isinstance(config, SeqConfig):
        raise TypeError(f"Expected SeqConfig, got {type(config).__name__}")
    with _config_lock:
        previous = _config
        _config = config
    return previous


def configure(**changes: Any) -> SeqConfig:
    """
    Update individual settings.

    Example:
        configure(print_length=10)

    Returns:
        The previous settings, suitable for passing back to set_config().
    """
    return set_config(replace(get_config(), **changes))


__all__ = [
    "DEFAULT_PRINT_LENGTH",
    "PRINT_LENGTH_ENV",
    "SeqConfig",
    "get_config",
    "set_config",
    "configure",
]
