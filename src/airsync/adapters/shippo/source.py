"""Tracking statuses captured as JSON files, one per shipment."""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from airsync.domain.errors import PermanentServiceError

from .schema import TrackingStatus
from .translator import tracking_api_carrier

if TYPE_CHECKING:
    from pathlib import Path

log = getLogger(__name__)

SERVICE_NAME = "shippo"


@dataclass(frozen=True, slots=True)
class TrackingStatusFiles:
    """Looks up ``<directory>/<carrier>/<tracking_number>.json``."""

    directory: Path

    def __call__(self, *, carrier: str, tracking_number: str) -> TrackingStatus:
        path = self.directory / tracking_api_carrier(carrier) / f"{tracking_number}.json"
        if not path.is_file():
            raise PermanentServiceError(
                f"no tracking status captured for {carrier} {tracking_number}",
                service=SERVICE_NAME,
            )
        log.debug(f"Reading tracking status from {path}")
        return TrackingStatus.model_validate_json(path.read_text(encoding="utf-8"))
