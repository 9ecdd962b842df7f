"""Domain port definitions for adapters."""

from __future__ import annotations

from .local_store import LocalStore, MirrorStores, MirrorUnitOfWork
from .remote_store import RemoteStore
from .sources import SheetValuesSource, TrackingStatusLookup, UserDirectory

__all__ = [
    "LocalStore",
    "MirrorStores",
    "MirrorUnitOfWork",
    "RemoteStore",
    "SheetValuesSource",
    "TrackingStatusLookup",
    "UserDirectory",
]
