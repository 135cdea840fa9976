"""
do_collections Configuration.

Configuration dataclass and environment variable support.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional
import os


# =============================================================================
# Default Values
# =============================================================================

ENV_DEBUG_LOG = "DO_COLLECTIONS_DEBUG_LOG"
ENV_LOG_DIR = "DO_COLLECTIONS_LOG_DIR"
ENV_NULL_SEED_IS_UNSET = "DO_COLLECTIONS_NULL_SEED_IS_UNSET"

DEFAULT_DEBUG_LOG = False
DEFAULT_NULL_SEED_IS_UNSET = False
DEBUG_LOG_FILENAME = "debug_trace.log"

_FALSE_VALUES = ("", "0", "false", "no", "off")


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() not in _FALSE_VALUES


@dataclass
class DoConfig:
    """Runtime settings for the do_collections library.

    ::: This is-in-layer Infrastructure-Layer.
    ::: This is a value-object.
    ::: This is stateless.

    Priority: environment variables > defaults
    """
    debug_log: bool = DEFAULT_DEBUG_LOG
    log_dir: Optional[Path] = None
    # Legacy mode: a None accumulator counts as never seeded
    null_seed_is_unset: bool = DEFAULT_NULL_SEED_IS_UNSET

    @classmethod
    def from_env(cls) -> "DoConfig":
        """Create config from environment variables."""
        log_dir = os.getenv(ENV_LOG_DIR)
        return cls(
            debug_log=_env_flag(ENV_DEBUG_LOG, DEFAULT_DEBUG_LOG),
            log_dir=Path(log_dir) if log_dir else None,
            null_seed_is_unset=_env_flag(ENV_NULL_SEED_IS_UNSET, DEFAULT_NULL_SEED_IS_UNSET),
        )

    @property
    def log_file(self) -> Optional[Path]:
        """Path of the debug trace file, or None when logging to stderr only."""
        if self.log_dir is None:
            return None
        return self.log_dir / DEBUG_LOG_FILENAME


_config: Optional[DoConfig] = None


def get_config() -> DoConfig:
    """Return the process-wide config, loading it from the environment once."""
    global _config
    if _config is None:
        _config = DoConfig.from_env()
    return _config


def reset_config() -> None:
    """Forget the cached config so the next get_config() re-reads the environment."""
    global _config
    _config = None
