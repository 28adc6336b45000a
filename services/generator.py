"""Synthetic sensor reading generation for demo devices."""

from __future__ import annotations

import math
import random
from datetime import datetime, timedelta, timezone
from typing import Dict, Iterator, List, Optional, Tuple

from models.records import DetectedItem, Reading

DEFAULT_RANGE = "24h"

STEP_BY_RANGE: Dict[str, timedelta] = {
    "1h": timedelta(minutes=5),
    "24h": timedelta(minutes=30),
    "7d": timedelta(hours=4),
    "30d": timedelta(days=1),
}

WASTE_CATEGORIES = ("Paper", "Plastic", "Cardboard", "Metal", "Glass", "Organic")

_SECONDS_PER_DAY = 24 * 60 * 60
_BATTERY_DRAIN_WINDOW = timedelta(days=7)
_BATTERY_FLOOR = 20.0


def step_for_range(range_key: Optional[str]) -> timedelta:
    """Return the sampling step for a range keyword, defaulting to the 24h step."""
    return STEP_BY_RANGE.get(range_key or DEFAULT_RANGE, STEP_BY_RANGE[DEFAULT_RANGE])


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _clamp_percent(value: float) -> float:
    return max(0.0, min(100.0, value))


class SyntheticReadingGenerator:
    """Produces randomized but plausibly shaped bin readings over a time window.

    All randomness comes from ``rng`` so callers can pass a seeded
    ``random.Random`` to get reproducible series.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        image_base_url: str = "https://example.com/sensor-images",
    ) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.image_base_url = image_base_url.rstrip("/")

    def iter_readings(
        self,
        device_id: str,
        start_time: datetime,
        end_time: datetime,
        range_key: Optional[str] = DEFAULT_RANGE,
    ) -> Iterator[Reading]:
        start = _as_utc(start_time)
        end = _as_utc(end_time)
        step = step_for_range(range_key)

        current = start
        while current <= end:
            yield self._reading_at(device_id, current, start)
            current += step

    def generate(
        self,
        device_id: str,
        start_time: datetime,
        end_time: datetime,
        range_key: Optional[str] = DEFAULT_RANGE,
    ) -> List[Reading]:
        return list(self.iter_readings(device_id, start_time, end_time, range_key))

    def _reading_at(self, device_id: str, current: datetime, start: datetime) -> Reading:
        rng = self.rng
        phase = math.sin(current.timestamp() / _SECONDS_PER_DAY)

        fill_level = _clamp_percent(45 + 20 * phase + rng.uniform(-5, 5))
        # Left unclamped; may drift a little outside [0, 100].
        distance_to_top = 100 - fill_level + rng.uniform(-2.5, 2.5)
        items_detected = self._detect_items(fill_level)

        temperature = 20 + 5 * phase + rng.uniform(-1, 1)
        humidity = 50 + 10 * phase + rng.uniform(-2.5, 2.5)

        elapsed = (current - start) / _BATTERY_DRAIN_WINDOW
        battery_level = max(_BATTERY_FLOOR, 95 - elapsed * 10)

        last_collected = current - timedelta(days=rng.randint(1, 3))
        epoch_ms = int(current.timestamp() * 1000)

        return Reading(
            timestamp=current,
            fill_level=fill_level,
            distance_to_top=distance_to_top,
            items_detected=items_detected,
            temperature=temperature,
            humidity=humidity,
            battery_level=battery_level,
            last_collected=last_collected,
            processing_time=rng.uniform(150, 250),
            confidence=rng.uniform(0.85, 0.95),
            image_url=f"{self.image_base_url}/{device_id}/{epoch_ms}.jpg",
        )

    def _detect_items(self, fill_level: float) -> Tuple[DetectedItem, ...]:
        rng = self.rng
        counts = {category: 0 for category in WASTE_CATEGORIES}
        confidences: Dict[str, float] = {}

        total_draws = int(fill_level // 10) + rng.randint(0, 2)
        for _ in range(total_draws):
            category = rng.choice(WASTE_CATEGORIES)
            counts[category] += rng.randint(1, 5)
            confidences[category] = rng.uniform(0.8, 0.95)

        return tuple(
            DetectedItem(category=category, confidence=confidences[category], count=count)
            for category, count in counts.items()
            if count > 0
        )
