"""Pydantic models describing a carrier tracking-status payload."""

from __future__ import annotations

from datetime import datetime
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class TrackingState(StrEnum):
    UNKNOWN = "UNKNOWN"
    PRE_TRANSIT = "PRE_TRANSIT"
    TRANSIT = "TRANSIT"
    DELIVERED = "DELIVERED"
    RETURNED = "RETURNED"
    FAILURE = "FAILURE"


class ShippoBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class TrackingEvent(ShippoBaseModel):
    status: TrackingState = TrackingState.UNKNOWN
    status_details: str = ""
    status_date: datetime | None = None


class TrackingStatus(ShippoBaseModel):
    carrier: str = ""
    tracking_number: str = ""
    eta: datetime | None = None
    tracking_status: TrackingEvent = Field(default_factory=TrackingEvent)
    tracking_history: list[TrackingEvent] = Field(default_factory=list[TrackingEvent])
