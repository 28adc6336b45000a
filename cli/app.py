from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum
from typing import Optional

import typer

from cli.client import ApiClient
from cli.config import CLIConfig, load_config
from cli.render import render_readings, render_summary


class RangeOption(str, Enum):
    one_hour = "1h"
    one_day = "24h"
    one_week = "7d"
    one_month = "30d"


@dataclass
class CLIState:
    config: CLIConfig
    client: ApiClient


app = typer.Typer(
    help="Utilities for fetching synthetic readings from the sensor readings service.",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def _get_state(ctx: typer.Context) -> CLIState:
    state = ctx.obj
    if not isinstance(state, CLIState):
        raise typer.Exit(code=1)
    return state


@app.callback()
def main(
    ctx: typer.Context,
    base_url: Optional[str] = typer.Option(
        None,
        "--base-url",
        "-b",
        help="Service base URL (defaults to API_BASE_URL env or http://localhost:8000).",
    ),
    timeout: Optional[float] = typer.Option(
        None,
        "--timeout",
        help="HTTP timeout in seconds.",
    ),
) -> None:
    """Entry point for the CLI."""
    config = load_config(base_url=base_url, timeout=timeout)
    client = ApiClient(config)
    ctx.obj = CLIState(config=config, client=client)
    ctx.call_on_close(client.close)


@app.command("readings")
def readings_command(
    ctx: typer.Context,
    device_id: str = typer.Argument(..., help="Device identifier."),
    range_: Optional[RangeOption] = typer.Option(
        None, "--range", "-r", help="Time range; the service default applies when omitted."
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the raw JSON payload."),
) -> None:
    """Fetch the simulated reading series for a device."""
    state = _get_state(ctx)
    readings = state.client.get_readings(device_id, range_.value if range_ else None)
    if as_json:
        typer.echo(json.dumps(readings, indent=2))
        return
    render_readings(device_id, readings)


@app.command("summary")
def summary_command(
    ctx: typer.Context,
    device_id: str = typer.Argument(..., help="Device identifier."),
    range_: Optional[RangeOption] = typer.Option(
        None, "--range", "-r", help="Time range; the service default applies when omitted."
    ),
) -> None:
    """Fetch fill-level and item aggregates for a device."""
    state = _get_state(ctx)
    payload = state.client.get_summary(device_id, range_.value if range_ else None)
    render_summary(device_id, payload)
