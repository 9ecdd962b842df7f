"""Port for the external, human-editable tabular store."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence

    from airsync.domain.records import Record, RemoteRecord
    from airsync.domain.schema import EntitySchema


@runtime_checkable
class RemoteStore(Protocol):
    """One remote table, bound to the entity schema its rows follow.

    Implementations raise :class:`airsync.domain.errors.ExternalServiceError`
    subclasses when a call cannot complete.
    """

    @property
    def schema(self) -> EntitySchema: ...

    def list_records(self) -> Sequence[RemoteRecord]:
        """Return every record of the table, paging transparently, in listing order."""
        ...

    def create_record(self, fields: Record) -> RemoteRecord: ...

    def update_record(self, record_id: str, fields: Record) -> None: ...
