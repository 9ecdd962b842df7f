"""Ports for the systems records are derived from."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence


@runtime_checkable
class SheetValuesSource(Protocol):
    """Yields the raw cell grids of the swag request sheets, header row first."""

    def __call__(self) -> Iterable[Sequence[Sequence[str]]]: ...


@runtime_checkable
class TrackingStatusLookup[TStatus](Protocol):
    """Looks up the carrier tracking status for one shipment."""

    def __call__(self, *, carrier: str, tracking_number: str) -> TStatus: ...


@runtime_checkable
class UserDirectory[TUser](Protocol):
    """Lists every user known to the identity provider."""

    def list_users(self) -> Sequence[TUser]: ...
