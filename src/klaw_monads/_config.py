"""Package configuration: MonadsConfig, init and environment detection."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from klaw_monads._logging import configure_logging

__all__ = [
    'MonadsConfig',
    'get_config',
    'init',
    'reset_config',
]

_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


@dataclass(frozen=True)
class MonadsConfig:
    """Configuration for klaw-monads.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = silent.
        json_output: Emit JSON log lines when True, console lines otherwise.
    """

    log_level: str | None = None
    json_output: bool = True


_config: MonadsConfig | None = None


def _detect_log_level() -> str | None:
    """Read KLAW_MONADS_LOG_LEVEL, ignoring unknown values."""
    env_level = os.environ.get('KLAW_MONADS_LOG_LEVEL', '').strip().upper()
    if not env_level:
        return None
    if env_level not in _LEVELS:
        logging.warning("Unknown KLAW_MONADS_LOG_LEVEL value '%s', logging stays disabled", env_level)
        return None
    return env_level


def _detect_json_output() -> bool:
    """Read KLAW_MONADS_LOG_JSON; anything but an explicit "off" keeps JSON."""
    return os.environ.get('KLAW_MONADS_LOG_JSON', '1').strip().lower() not in ('0', 'false', 'no')


def init(
    log_level: str | None = None,
    *,
    json_output: bool | None = None,
) -> MonadsConfig:
    """Initialize klaw-monads configuration.

    Explicit arguments win over environment variables. When a log level ends
    up set, logging is configured immediately.

    Args:
        log_level: Logging level, or None to fall back to KLAW_MONADS_LOG_LEVEL.
        json_output: Output format, or None to fall back to KLAW_MONADS_LOG_JSON.

    Returns:
        The active MonadsConfig.

    Raises:
        ValueError: If an explicit log_level is not a known level name.
    """
    global _config

    if log_level is None:
        level = _detect_log_level()
    else:
        level = log_level.strip().upper()
        if level not in _LEVELS:
            msg = f'Unknown log level {log_level!r}, expected one of {", ".join(_LEVELS)}'
            raise ValueError(msg)

    config = MonadsConfig(
        log_level=level,
        json_output=json_output if json_output is not None else _detect_json_output(),
    )
    if config.log_level is not None:
        configure_logging(config.log_level, json_output=config.json_output)

    _config = config
    return config


def get_config() -> MonadsConfig:
    """Get the active configuration, initializing from the environment if needed."""
    if _config is None:
        return init()
    return _config


def reset_config() -> None:
    """Forget the active configuration (mainly for tests)."""
    global _config
    _config = None
