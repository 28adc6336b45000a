"""Unit tests for the aggregation logic."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from models.records import DetectedItem, Reading
from services.aggregator import ReadingAggregator


def _reading(fill_level: float, battery: float = 90.0, *items: DetectedItem) -> Reading:
    """Helper to build deterministic readings."""

    timestamp = datetime(2024, 1, 1, tzinfo=timezone.utc)
    return Reading(
        timestamp=timestamp,
        fill_level=fill_level,
        distance_to_top=100 - fill_level,
        items_detected=tuple(items),
        temperature=20.0,
        humidity=50.0,
        battery_level=battery,
        last_collected=timestamp - timedelta(days=1),
        processing_time=200.0,
        confidence=0.9,
        image_url="https://example.com/sensor-images/bin/0.jpg",
    )


def test_aggregate_empty_iterable_returns_default_summary() -> None:
    aggregator = ReadingAggregator()

    summary = aggregator.aggregate([])

    assert summary.reading_count == 0
    assert summary.min_fill_level is None
    assert summary.max_fill_level is None
    assert summary.mean_fill_level is None
    assert summary.latest_battery_level is None
    assert summary.per_category_count == {}


def test_aggregate_computes_statistics() -> None:
    aggregator = ReadingAggregator()
    readings = [
        _reading(10.0, 95.0, DetectedItem("Paper", 0.9, 2)),
        _reading(30.0, 94.0, DetectedItem("Paper", 0.85, 3), DetectedItem("Glass", 0.8, 1)),
        _reading(20.0, 93.0),
    ]

    summary = aggregator.aggregate(readings)

    assert summary.reading_count == 3
    assert summary.min_fill_level == 10.0
    assert summary.max_fill_level == 30.0
    assert summary.mean_fill_level == 20.0
    assert summary.latest_battery_level == 93.0
    assert summary.per_category_count == {"Paper": 5, "Glass": 1}
