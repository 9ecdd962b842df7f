"""Expand inbound shipments with their carrier tracking status."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING, cast

from airsync.domain.entities import INBOUND_SHIPMENT

from .schema import TrackingState

if TYPE_CHECKING:
    from collections.abc import Mapping

    from airsync.config.tracking import TrackingConfig
    from airsync.domain.records import FieldValue, Record

    from .schema import TrackingStatus

_CARRIER_TRACKING_URLS: dict[str, str] = {
    "usps": "https://tools.usps.com/go/TrackConfirmAction_input?origTrackNum={}",
    "ups": "https://www.ups.com/track?tracknum={}",
    "fedex": "https://www.fedex.com/apps/fedextrack/?tracknumbers={}",
    "dhl": "https://www.dhl.com/en/express/tracking.html?AWB={}",
}

# the tracking API names some carriers differently
_TRACKING_API_CARRIERS: dict[str, str] = {"dhl": "dhl_express"}


def tracking_api_carrier(carrier: str) -> str:
    lowered = carrier.strip().lower()
    return _TRACKING_API_CARRIERS.get(lowered, lowered)


def carrier_tracking_link(carrier: str, tracking_number: str) -> str:
    """Public tracking page on the carrier's site, or ``""`` for unknown carriers."""

    template = _CARRIER_TRACKING_URLS.get(carrier.strip().lower())
    return template.format(tracking_number) if template else ""


def _utc(value: datetime | None) -> datetime | None:
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def first_transit_time(status: TrackingStatus, current: datetime | None) -> datetime | None:
    """Earliest in-transit history date, never later than ``current``."""

    earliest = current
    for event in status.tracking_history:
        if event.status is not TrackingState.TRANSIT or event.status_date is None:
            continue
        event_date = _utc(event.status_date)
        if earliest is None or (event_date is not None and event_date < earliest):
            earliest = event_date
    return earliest


def expand_inbound_shipment(
    row: Mapping[str, FieldValue],
    status: TrackingStatus,
    *,
    tracking: TrackingConfig,
) -> Record:
    """Derive an inbound shipment from its remote row and the carrier's tracking status."""

    shipment = INBOUND_SHIPMENT.complete(row)
    carrier = cast(str, shipment["carrier"])
    # the row keeps the number it is keyed by; links use the carrier's form
    row_number = cast(str, shipment["tracking_number"])
    tracking_number = status.tracking_number or row_number
    current_shipped = cast("datetime | None", shipment["shipped_time"])

    shipment["tracking_number"] = row_number or tracking_number
    shipment["tracking_status"] = str(status.tracking_status.status)
    shipment["tracking_link"] = carrier_tracking_link(carrier, tracking_number)
    shipment["public_tracking_link"] = tracking.public_tracking_link(
        carrier=carrier, tracking_number=tracking_number
    )
    shipment["eta"] = _utc(status.eta)
    shipment["messages"] = status.tracking_status.status_details
    shipment["shipped_time"] = first_transit_time(status, current_shipped)
    if status.tracking_status.status is TrackingState.DELIVERED:
        shipment["delivered_time"] = _utc(status.tracking_status.status_date)
    return shipment
