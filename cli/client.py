from __future__ import annotations

from typing import Any, Dict, List, Optional

import httpx
import typer

from cli.config import CLIConfig


class ApiClient:
    """Minimal HTTP client for the sensor readings service."""

    def __init__(self, config: CLIConfig) -> None:
        self._config = config
        self._client = httpx.Client(base_url=config.base_url, timeout=config.timeout)

    def close(self) -> None:
        self._client.close()

    def get_readings(self, device_id: str, range_key: Optional[str] = None) -> List[Dict[str, Any]]:
        payload = self._get(f"/devices/{device_id}/data", range_key)
        if not isinstance(payload, list):
            raise typer.BadParameter("Unexpected response payload when fetching readings.")
        return payload

    def get_summary(self, device_id: str, range_key: Optional[str] = None) -> Dict[str, Any]:
        payload = self._get(f"/devices/{device_id}/summary", range_key)
        if not isinstance(payload, dict):
            raise typer.BadParameter("Unexpected response payload when fetching summary.")
        return payload

    def _get(self, path: str, range_key: Optional[str]) -> Any:
        params = {"range": range_key} if range_key else None
        try:
            response = self._client.get(path, params=params)
            if response.status_code == 404:
                raise typer.BadParameter(f"Resource {path} was not found.")
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            self._handle_http_error(exc)
        except httpx.RequestError as exc:
            self._handle_transport_error(exc)
        return response.json()

    def _handle_transport_error(self, exc: httpx.RequestError) -> None:
        typer.secho(
            f"Could not reach {self._config.base_url}: {exc}",
            fg=typer.colors.RED,
            err=True,
        )
        raise typer.Exit(code=1)

    @staticmethod
    def _handle_http_error(exc: httpx.HTTPStatusError) -> None:
        detail: Any = None
        try:
            data = exc.response.json()
            detail = data.get("detail")
        except Exception:  # noqa: BLE001 - best effort parsing
            detail = exc.response.text.strip()
        message = (
            f"Request failed with status {exc.response.status_code}: {detail or 'no detail provided.'}"
        )
        typer.secho(message, fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
