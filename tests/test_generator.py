"""Unit tests for the synthetic reading generator."""

from __future__ import annotations

import random
from datetime import datetime, timedelta, timezone

import pytest

from services.generator import (
    STEP_BY_RANGE,
    WASTE_CATEGORIES,
    SyntheticReadingGenerator,
    step_for_range,
)

START = datetime(2024, 1, 1, 0, 0, tzinfo=timezone.utc)


def _generator(seed: int = 7) -> SyntheticReadingGenerator:
    return SyntheticReadingGenerator(rng=random.Random(seed))


def test_one_hour_window_yields_thirteen_readings_five_minutes_apart() -> None:
    readings = _generator().generate("bin-1", START, START + timedelta(hours=1), "1h")

    assert len(readings) == 13
    assert readings[0].timestamp == START
    assert readings[-1].timestamp == START + timedelta(hours=1)
    for previous, current in zip(readings, readings[1:]):
        assert current.timestamp - previous.timestamp == timedelta(minutes=5)
    assert all(reading.last_collected <= reading.timestamp for reading in readings)


@pytest.mark.parametrize(
    ("range_key", "window"),
    [
        ("1h", timedelta(hours=1)),
        ("24h", timedelta(hours=24)),
        ("7d", timedelta(days=7)),
        ("30d", timedelta(days=30)),
    ],
)
def test_reading_count_matches_step_policy(range_key: str, window: timedelta) -> None:
    step = STEP_BY_RANGE[range_key]

    readings = _generator().generate("bin-1", START, START + window, range_key)

    assert len(readings) == window // step + 1


def test_unknown_range_falls_back_to_daily_step() -> None:
    assert step_for_range("90d") == timedelta(minutes=30)
    assert step_for_range(None) == timedelta(minutes=30)

    readings = _generator().generate("bin-1", START, START + timedelta(hours=2), "bogus")

    assert len(readings) == 5


def test_start_after_end_yields_empty_sequence() -> None:
    readings = _generator().generate("bin-1", START + timedelta(minutes=1), START, "1h")

    assert readings == []


def test_value_ranges_hold_over_long_window() -> None:
    readings = _generator(seed=3).generate("bin-1", START, START + timedelta(days=30), "7d")

    assert readings
    for reading in readings:
        assert 0 <= reading.fill_level <= 100
        assert reading.value == reading.fill_level
        assert reading.unit == "percent"
        assert -2.5 <= reading.distance_to_top <= 102.5
        assert 20 <= reading.battery_level <= 95
        assert 150 <= reading.processing_time <= 250
        assert 0.85 <= reading.confidence <= 0.95
        assert timedelta(days=1) <= reading.timestamp - reading.last_collected <= timedelta(days=3)


def test_battery_never_drops_below_floor() -> None:
    readings = _generator().generate("bin-1", START, START + timedelta(days=400), "30d")

    assert readings[0].battery_level == 95
    assert readings[-1].battery_level == 20
    assert min(reading.battery_level for reading in readings) == 20


def test_items_detected_omit_zero_counts_and_keep_category_order() -> None:
    readings = _generator(seed=11).generate("bin-1", START, START + timedelta(days=7), "7d")

    for reading in readings:
        categories = [item.category for item in reading.items_detected]
        assert categories == [c for c in WASTE_CATEGORIES if c in categories]
        for item in reading.items_detected:
            assert item.count >= 1
            assert 0.8 <= item.confidence <= 0.95


def test_seeded_generators_produce_identical_series() -> None:
    end = START + timedelta(hours=24)

    first = _generator(seed=42).generate("bin-1", START, end, "24h")
    second = _generator(seed=42).generate("bin-1", START, end, "24h")
    other = _generator(seed=43).generate("bin-1", START, end, "24h")

    assert first == second
    assert first != other


def test_iter_readings_is_lazy_and_restartable() -> None:
    generator = _generator()
    end = START + timedelta(hours=1)

    iterator = generator.iter_readings("bin-1", START, end, "1h")
    first = next(iterator)

    assert first.timestamp == START
    assert len(list(generator.iter_readings("bin-1", START, end, "1h"))) == 13


def test_image_url_embeds_device_and_epoch_millis() -> None:
    generator = SyntheticReadingGenerator(
        rng=random.Random(1), image_base_url="https://images.test/bins/"
    )

    reading = generator.generate("bin-9", START, START, "1h")[0]

    expected_ms = int(START.timestamp() * 1000)
    assert reading.image_url == f"https://images.test/bins/bin-9/{expected_ms}.jpg"


def test_naive_datetimes_are_treated_as_utc() -> None:
    naive_start = datetime(2024, 1, 1, 0, 0)

    readings = _generator().generate("bin-1", naive_start, naive_start + timedelta(hours=1), "1h")

    assert readings[0].timestamp == START
    assert readings[0].timestamp.tzinfo == timezone.utc


def test_unseeded_generator_varies_between_calls() -> None:
    generator = SyntheticReadingGenerator()
    end = START + timedelta(hours=24)

    first = generator.generate("bin-1", START, end, "24h")
    second = SyntheticReadingGenerator().generate("bin-1", START, end, "24h")

    assert [r.timestamp for r in first] == [r.timestamp for r in second]
    assert [r.fill_level for r in first] != [r.fill_level for r in second]
