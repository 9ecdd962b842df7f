"""Ports for the local relational mirror."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import TracebackType

    from airsync.domain.records import NaturalKey, Record
    from airsync.domain.schema import EntitySchema


@runtime_checkable
class LocalStore(Protocol):
    """Relational upsert keyed by an entity's natural key."""

    @property
    def schema(self) -> EntitySchema: ...

    def upsert(
        self,
        natural_key: NaturalKey,
        fields: Record,
        *,
        remote_id: str | None = None,
    ) -> Record:
        """Insert or update the row for ``natural_key`` and return the stored row."""
        ...

    def get(self, natural_key: NaturalKey) -> Record | None: ...

    def list_all(self) -> Sequence[Record]: ...


@dataclass(slots=True)
class MirrorStores:
    """Local stores managed together by one unit of work."""

    inbound_shipments: LocalStore
    swag_inventory_items: LocalStore
    auth_logins: LocalStore


@runtime_checkable
class MirrorUnitOfWork(Protocol):
    """Transaction boundary around the local mirror stores."""

    @property
    def stores(self) -> MirrorStores: ...

    def __enter__(self) -> MirrorUnitOfWork: ...

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> bool: ...

    def commit(self) -> None: ...

    def rollback(self) -> None: ...
