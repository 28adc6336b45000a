from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional


_DEFAULT_RANGE_ENV = "READINGS_DEFAULT_RANGE"
_IMAGE_BASE_URL_ENV = "READINGS_IMAGE_BASE_URL"
_SEED_ENV = "READINGS_SEED"
_LOG_LEVEL_ENV = "LOG_LEVEL"

_KNOWN_RANGES = ("1h", "24h", "7d", "30d")


@dataclass(frozen=True)
class Settings:
    default_range: str
    image_base_url: str
    seed: Optional[int]
    log_level: str


def _read_str_env(name: str, default: str) -> str:
    value = os.getenv(name)
    if value is None:
        return default
    candidate = value.strip()
    return candidate or default


def _read_range(default: str) -> str:
    candidate = _read_str_env(_DEFAULT_RANGE_ENV, default)
    return candidate if candidate in _KNOWN_RANGES else default


def _read_seed() -> Optional[int]:
    value = os.getenv(_SEED_ENV)
    if value is None:
        return None
    candidate = value.strip()
    if not candidate:
        return None
    try:
        return int(candidate)
    except ValueError:
        return None


def _read_log_level(default: str) -> str:
    value = os.getenv(_LOG_LEVEL_ENV)
    if value is None:
        return default
    candidate = value.strip()
    if not candidate:
        return default
    return candidate.upper()


@lru_cache
def get_settings() -> Settings:
    return Settings(
        default_range=_read_range("24h"),
        image_base_url=_read_str_env(
            _IMAGE_BASE_URL_ENV, "https://example.com/sensor-images"
        ).rstrip("/"),
        seed=_read_seed(),
        log_level=_read_log_level("INFO"),
    )
