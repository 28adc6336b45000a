"""Pydantic schemas for the HTTP API layer."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from models.records import DetectedItem, Reading
from services.aggregator import ReadingSummary


class TimeRange(str, Enum):
    """Time windows a client may request readings for."""

    one_hour = "1h"
    one_day = "24h"
    one_week = "7d"
    one_month = "30d"


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class DetectedItemSchema(_CamelModel):
    """Waste category count detected in a reading."""

    category: str
    confidence: float = Field(..., ge=0, le=1)
    count: int = Field(..., ge=1)

    @classmethod
    def from_item(cls, item: DetectedItem) -> "DetectedItemSchema":
        return cls(category=item.category, confidence=item.confidence, count=item.count)


class ReadingSchema(_CamelModel):
    """A single simulated sensor reading."""

    timestamp: datetime
    value: float
    unit: str
    fill_level: float = Field(..., ge=0, le=100)
    distance_to_top: float = Field(
        ..., description="Roughly the inverse of fill level; not clamped."
    )
    items_detected: List[DetectedItemSchema] = Field(default_factory=list)
    temperature: float
    humidity: float
    battery_level: float = Field(..., ge=20, le=100)
    last_collected: datetime
    processing_time: float
    confidence: float
    image_url: str

    @classmethod
    def from_reading(cls, reading: Reading) -> "ReadingSchema":
        return cls(
            timestamp=reading.timestamp,
            value=reading.value,
            unit=reading.unit,
            fill_level=reading.fill_level,
            distance_to_top=reading.distance_to_top,
            items_detected=[DetectedItemSchema.from_item(item) for item in reading.items_detected],
            temperature=reading.temperature,
            humidity=reading.humidity,
            battery_level=reading.battery_level,
            last_collected=reading.last_collected,
            processing_time=reading.processing_time,
            confidence=reading.confidence,
            image_url=reading.image_url,
        )


class ReadingSummarySchema(_CamelModel):
    """Aggregate metrics computed over a reading series."""

    reading_count: int = Field(..., ge=0)
    min_fill_level: Optional[float] = None
    max_fill_level: Optional[float] = None
    mean_fill_level: Optional[float] = None
    latest_battery_level: Optional[float] = None
    per_category_count: Dict[str, int] = Field(default_factory=dict)

    @classmethod
    def from_summary(cls, summary: ReadingSummary) -> "ReadingSummarySchema":
        return cls(
            reading_count=summary.reading_count,
            min_fill_level=summary.min_fill_level,
            max_fill_level=summary.max_fill_level,
            mean_fill_level=summary.mean_fill_level,
            latest_battery_level=summary.latest_battery_level,
            per_category_count=dict(summary.per_category_count),
        )
