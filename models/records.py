"""Domain models shared across services."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Tuple


@dataclass(frozen=True, slots=True)
class DetectedItem:
    """Waste category spotted by the bin camera in a single reading."""

    category: str
    confidence: float
    count: int


@dataclass(frozen=True, slots=True)
class Reading:
    """A single simulated sensor reading for a waste bin."""

    timestamp: datetime
    fill_level: float
    distance_to_top: float
    items_detected: Tuple[DetectedItem, ...]
    temperature: float
    humidity: float
    battery_level: float
    last_collected: datetime
    processing_time: float
    confidence: float
    image_url: str
    unit: str = "percent"

    @property
    def value(self) -> float:
        return self.fill_level
