"""Resolves requested time ranges into synthetic reading series."""

from __future__ import annotations

import logging
import random
from datetime import datetime, timedelta, timezone
from functools import lru_cache
from typing import Callable, Dict, List, Optional, Tuple

from models.records import Reading
from services.aggregator import ReadingAggregator, ReadingSummary
from services.generator import DEFAULT_RANGE, SyntheticReadingGenerator
from settings import get_settings

logger = logging.getLogger(__name__)

WINDOW_BY_RANGE: Dict[str, timedelta] = {
    "1h": timedelta(hours=1),
    "24h": timedelta(hours=24),
    "7d": timedelta(days=7),
    "30d": timedelta(days=30),
}


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ReadingService:
    """Builds the reading series a device would report over a recent window."""

    def __init__(
        self,
        aggregator: ReadingAggregator,
        image_base_url: str = "https://example.com/sensor-images",
        seed: Optional[int] = None,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self.aggregator = aggregator
        self.image_base_url = image_base_url
        self.seed = seed
        self.clock = clock

    def resolve_window(self, range_key: Optional[str]) -> Tuple[datetime, datetime]:
        """Return ``(start, end)`` ending now; unknown ranges use the 24h window."""
        window = WINDOW_BY_RANGE.get(range_key or DEFAULT_RANGE, WINDOW_BY_RANGE[DEFAULT_RANGE])
        end = self.clock()
        return end - window, end

    def get_readings(self, device_id: str, range_key: Optional[str] = DEFAULT_RANGE) -> List[Reading]:
        start, end = self.resolve_window(range_key)
        generator = SyntheticReadingGenerator(
            rng=random.Random(self.seed),
            image_base_url=self.image_base_url,
        )
        readings = generator.generate(device_id, start, end, range_key)
        logger.info(
            "Generated synthetic readings",
            extra={
                "device_id": device_id,
                "range": range_key,
                "reading_count": len(readings),
                "window_start": start,
                "window_end": end,
            },
        )
        return readings

    def summarize(self, device_id: str, range_key: Optional[str] = DEFAULT_RANGE) -> ReadingSummary:
        return self.aggregator.aggregate(self.get_readings(device_id, range_key))


@lru_cache
def build_default_reading_service() -> ReadingService:
    """Factory that wires the reading service from environment settings."""
    settings = get_settings()
    return ReadingService(
        aggregator=ReadingAggregator(),
        image_base_url=settings.image_base_url,
        seed=settings.seed,
    )
