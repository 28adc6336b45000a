"""HTTP route definitions for the service."""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from app.schemas import ReadingSchema, ReadingSummarySchema, TimeRange
from services.readings import ReadingService, build_default_reading_service
from settings import get_settings

router = APIRouter()


def get_reading_service() -> ReadingService:
    return build_default_reading_service()


def _resolve_range(range_: Optional[TimeRange]) -> str:
    if range_ is None:
        return get_settings().default_range
    return range_.value


@router.get(
    "/devices/{device_id}/data",
    response_model=List[ReadingSchema],
    summary="Simulated sensor readings for a device over a recent window.",
)
async def get_device_data(
    device_id: str,
    range_: Optional[TimeRange] = Query(
        None,
        alias="range",
        description="Time range for data; defaults to the configured range.",
    ),
    service: ReadingService = Depends(get_reading_service),
) -> List[ReadingSchema]:
    readings = service.get_readings(device_id, _resolve_range(range_))
    return [ReadingSchema.from_reading(reading) for reading in readings]


@router.get(
    "/devices/{device_id}/summary",
    response_model=ReadingSummarySchema,
    summary="Aggregates over the simulated readings for a device.",
)
async def get_device_summary(
    device_id: str,
    range_: Optional[TimeRange] = Query(None, alias="range"),
    service: ReadingService = Depends(get_reading_service),
) -> ReadingSummarySchema:
    summary = service.summarize(device_id, _resolve_range(range_))
    return ReadingSummarySchema.from_summary(summary)


@router.get(
    "/health",
    summary="Health check endpoint.",
    status_code=status.HTTP_200_OK,
)
async def healthcheck() -> dict[str, str]:
    return {"status": "ok"}


@router.get(
    "/",
    summary="Root endpoint mirrors health information.",
    status_code=status.HTTP_200_OK,
)
async def root() -> dict[str, str]:
    return {"status": "ok", "detail": "See /health for service status."}
