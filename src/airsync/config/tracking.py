"""Tracking link configuration."""

from __future__ import annotations

from dataclasses import dataclass

from .env import optional_env_var

DEFAULT_PUBLIC_TRACKING_BASE_URL = "https://track.oxide.computer"


@dataclass(frozen=True, slots=True)
class TrackingConfig:
    public_tracking_base_url: str = DEFAULT_PUBLIC_TRACKING_BASE_URL

    def public_tracking_link(self, *, carrier: str, tracking_number: str) -> str:
        base = self.public_tracking_base_url.rstrip("/")
        return f"{base}/{carrier}/{tracking_number}"


def get_tracking_config() -> TrackingConfig:
    return TrackingConfig(
        public_tracking_base_url=optional_env_var(
            "PUBLIC_TRACKING_BASE_URL", DEFAULT_PUBLIC_TRACKING_BASE_URL
        )
    )
