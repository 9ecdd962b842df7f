"""Public interface for the tracking-status adapter."""

from __future__ import annotations

from .schema import TrackingEvent, TrackingState, TrackingStatus
from .source import TrackingStatusFiles
from .translator import (
    carrier_tracking_link,
    expand_inbound_shipment,
    first_transit_time,
    tracking_api_carrier,
)

__all__ = [
    "TrackingEvent",
    "TrackingState",
    "TrackingStatus",
    "TrackingStatusFiles",
    "carrier_tracking_link",
    "expand_inbound_shipment",
    "first_transit_time",
    "tracking_api_carrier",
]
