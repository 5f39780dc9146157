# -*- coding: utf-8 -*-

import logging
import os
from dataclasses import dataclass, fields

from domain.models import DEFAULT_REST_MS, DEFAULT_TOTAL_SETS, MAX_SETS, MIN_SETS

logger = logging.getLogger(__name__)

ENV_PREFIX = "SETCOUNTER_"
WHEEL_ITEM_HEIGHT = 50

# accepted (low, high) per integer field; None means unbounded
INT_RANGES = {
    "default_total_sets": (MIN_SETS, MAX_SETS),
    "default_rest_ms": (0, None),
    "tick_interval_ms": (1, None),
    "auto_dismiss_ms": (0, None),
    "load_poll_ms": (1, None),
    "wheel_snap_threshold": (1, WHEEL_ITEM_HEIGHT),
}


@dataclass(frozen=True)
class AppConfig:
    db_path: str = "counter.db"
    default_total_sets: int = DEFAULT_TOTAL_SETS
    default_rest_ms: int = DEFAULT_REST_MS
    tick_interval_ms: int = 1000
    auto_dismiss_ms: int = 3000
    load_poll_ms: int = 50
    wheel_snap_threshold: int = 25
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ=None) -> "AppConfig":
        """
        Reads SETCOUNTER_<FIELD> overrides, e.g. SETCOUNTER_DB_PATH.
        Malformed or out-of-range integers fall back to the default.
        """
        environ = os.environ if environ is None else environ
        values = {}
        for f in fields(cls):
            name = ENV_PREFIX + f.name.upper()
            raw = environ.get(name)
            if raw is None or raw.strip() == "":
                continue
            if f.type in (int, "int"):
                try:
                    n = int(raw)
                except ValueError:
                    logger.warning("ignoring %s=%r: not an integer", name, raw)
                    continue
                if not _in_range(n, INT_RANGES.get(f.name, (None, None))):
                    logger.warning("ignoring %s=%r: out of range", name, raw)
                    continue
                values[f.name] = n
            else:
                values[f.name] = raw.strip()
        return cls(**values)


def _in_range(n: int, bounds) -> bool:
    low, high = bounds
    if low is not None and n < low:
        return False
    if high is not None and n > high:
        return False
    return True
