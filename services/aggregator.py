"""Aggregation logic for synthetic sensor readings."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable

from models.records import Reading


@dataclass
class ReadingSummary:
    """Computed statistics for a series of readings."""

    reading_count: int = 0
    min_fill_level: float | None = None
    max_fill_level: float | None = None
    mean_fill_level: float | None = None
    latest_battery_level: float | None = None
    per_category_count: Dict[str, int] = field(default_factory=dict)


class ReadingAggregator:
    """Pure aggregation component that can be unit tested in isolation."""

    def aggregate(self, readings: Iterable[Reading]) -> ReadingSummary:
        summary = ReadingSummary()
        total = 0.0

        for reading in readings:
            summary.reading_count += 1
            fill_level = reading.fill_level
            total += fill_level

            if summary.min_fill_level is None or fill_level < summary.min_fill_level:
                summary.min_fill_level = fill_level
            if summary.max_fill_level is None or fill_level > summary.max_fill_level:
                summary.max_fill_level = fill_level

            summary.latest_battery_level = reading.battery_level

            for item in reading.items_detected:
                summary.per_category_count[item.category] = (
                    summary.per_category_count.get(item.category, 0) + item.count
                )

        if summary.reading_count:
            summary.mean_fill_level = total / summary.reading_count

        return summary
