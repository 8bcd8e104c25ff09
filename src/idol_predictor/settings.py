"""Environment-driven defaults for the command-line runner."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional, TypeVar


logger = logging.getLogger(__name__)

_STATE_ENV = "IDOL_PREDICTOR_STATE"
_STATE_URL_ENV = "IDOL_PREDICTOR_STATE_URL"
_ALGORITHM_ENV = "IDOL_PREDICTOR_ALGORITHM"
_HTTP_TIMEOUT_ENV = "IDOL_PREDICTOR_HTTP_TIMEOUT"
_LOG_LEVEL_ENV = "IDOL_PREDICTOR_LOG_LEVEL"

_ALGORITHM_DEFAULT = 0
_HTTP_TIMEOUT_DEFAULT = 10.0
_LOG_LEVEL_DEFAULT = "WARNING"

N = TypeVar("N", int, float)


def _env_number(name: str, parse: Callable[[str], N], default: N, *, floor: N) -> N:
    """Parse env var ``name`` with ``parse``, never returning less than ``floor``."""

    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return max(floor, parse(raw.strip()))
    except ValueError:
        logger.warning("Ignoring %s=%r (not a %s); using %s", name, raw, parse.__name__, default)
        return default


def _env_log_level(name: str, default: str) -> str:
    raw = os.getenv(name)
    if not raw:
        return default
    level = raw.strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        logger.warning("Invalid log level for %s: %s; using default %s", name, raw, default)
        return default
    return level


@dataclass(frozen=True)
class Settings:
    state_path: Optional[Path] = None
    state_url: Optional[str] = None
    algorithm_id: int = _ALGORITHM_DEFAULT
    http_timeout: float = _HTTP_TIMEOUT_DEFAULT
    log_level: str = _LOG_LEVEL_DEFAULT

    @classmethod
    def from_env(cls) -> "Settings":
        state_path = os.getenv(_STATE_ENV)
        return cls(
            state_path=Path(state_path) if state_path else None,
            state_url=os.getenv(_STATE_URL_ENV) or None,
            algorithm_id=_env_number(_ALGORITHM_ENV, int, _ALGORITHM_DEFAULT, floor=0),
            http_timeout=_env_number(_HTTP_TIMEOUT_ENV, float, _HTTP_TIMEOUT_DEFAULT, floor=0.1),
            log_level=_env_log_level(_LOG_LEVEL_ENV, _LOG_LEVEL_DEFAULT),
        )
