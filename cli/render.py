from __future__ import annotations

from typing import Any, Dict, Iterable, List, Tuple

import typer

_READING_COLUMNS = (
    ("timestamp", "timestamp", 26),
    ("fill %", "fillLevel", 8),
    ("temp C", "temperature", 8),
    ("humid %", "humidity", 8),
    ("battery %", "batteryLevel", 10),
)


def echo_heading(text: str) -> None:
    typer.secho(text, bold=True)


def echo_key_values(pairs: Iterable[Tuple[str, Any]]) -> None:
    for key, value in pairs:
        typer.echo(f"{key}: {value}")


def _cell(value: Any, width: int) -> str:
    if isinstance(value, float):
        text = f"{value:.1f}"
    elif value is None:
        text = "-"
    else:
        text = str(value)
    return text.ljust(width)


def _items_cell(items: List[Dict[str, Any]]) -> str:
    if not items:
        return "-"
    return ", ".join(f"{item.get('category')}x{item.get('count')}" for item in items)


def render_readings(device_id: str, readings: List[Dict[str, Any]]) -> None:
    echo_heading(f"Readings for device {device_id}")
    if not readings:
        typer.echo("No readings in the requested window.")
        return

    header = "".join(title.ljust(width) for title, _, width in _READING_COLUMNS)
    typer.echo(f"{header}items")
    for reading in readings:
        row = "".join(_cell(reading.get(key), width) for _, key, width in _READING_COLUMNS)
        typer.echo(f"{row}{_items_cell(reading.get('itemsDetected') or [])}")
    typer.echo()
    typer.echo(f"{len(readings)} readings")


def render_summary(device_id: str, payload: Dict[str, Any]) -> None:
    echo_heading(f"Summary for device {device_id}")
    echo_key_values(
        [
            ("reading_count", payload.get("readingCount")),
            ("min_fill_level", payload.get("minFillLevel")),
            ("max_fill_level", payload.get("maxFillLevel")),
            ("mean_fill_level", payload.get("meanFillLevel")),
            ("latest_battery_level", payload.get("latestBatteryLevel")),
        ]
    )

    per_category = payload.get("perCategoryCount") or {}
    typer.echo()
    echo_heading("Items detected")
    if per_category:
        for category, count in per_category.items():
            typer.echo(f"  - {category}: {count}")
    else:
        typer.echo("No items detected.")
