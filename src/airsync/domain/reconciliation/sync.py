"""Batch synchronisation of derived records into a remote store.

One batch lists the remote table once, then processes derived records one at
a time: match, reconcile, and issue at most one create or update call.

Failure handling differs by stage:

- the listing call failing aborts the batch (the error propagates);
- a derived record missing a natural-key field aborts the batch, because the
  derivation function broke its contract;
- a create or update failing is logged and recorded, and the batch continues.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from airsync.domain.errors import ExternalServiceError
from airsync.domain.records import RemoteRecord

from .actions import Create, NoOp, Update
from .matcher import RemoteIndex
from .reconciler import reconcile

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping, Sequence

    from airsync.domain.ports.remote_store import RemoteStore
    from airsync.domain.records import FieldValue, NaturalKey

    from .actions import SyncAction

log = getLogger(__name__)


@dataclass(slots=True, frozen=True)
class RecordFailure:
    key: NaturalKey
    action: str
    error: ExternalServiceError

    @property
    def transient(self) -> bool:
        return self.error.transient


@dataclass(slots=True)
class SyncResult:
    """Outcome of one batch."""

    created: int = 0
    updated: int = 0
    unchanged: int = 0
    failures: list[RecordFailure] = field(default_factory=list["RecordFailure"])
    records: dict[NaturalKey, RemoteRecord] = field(
        default_factory=dict["NaturalKey", "RemoteRecord"]
    )

    @property
    def processed(self) -> int:
        return self.created + self.updated + self.unchanged + len(self.failures)

    @property
    def failed(self) -> int:
        return len(self.failures)


def sync_records(
    derived_records: Iterable[Mapping[str, FieldValue]],
    *,
    store: RemoteStore,
    listing: Sequence[RemoteRecord] | None = None,
) -> SyncResult:
    """Reconcile each derived record against ``store``.

    ``listing`` is the snapshot to match against when the caller has already
    listed the table; otherwise the table is listed once here.
    ``SyncResult.records`` maps each successfully synced natural key to the
    remote record as it stands after the batch.
    """

    schema = store.schema
    snapshot = store.list_records() if listing is None else listing
    index = RemoteIndex.build(snapshot, schema=schema)
    log.info("Listed %s %s records from remote store", len(index), schema.name)

    # rows written during this batch; the listing snapshot itself stays untouched
    written: dict[NaturalKey, RemoteRecord] = {}
    result = SyncResult()

    for derived in derived_records:
        key = schema.require_key(derived)
        existing = written.get(key) or index.lookup(key)
        action = reconcile(derived, existing, schema=schema)
        try:
            synced = _execute(store, action, existing)
        except ExternalServiceError as exc:
            log.error(  # noqa: TRY400
                "Failed to %s %s %s (%s): %s",
                action.kind,
                schema.name,
                key,
                "transient" if exc.transient else "permanent",
                exc,
            )
            result.failures.append(RecordFailure(key=key, action=action.kind, error=exc))
            continue

        _count(result, action)
        written[key] = synced
        result.records[key] = synced

    log.info(
        "Finished %s sync: created=%s, updated=%s, unchanged=%s, failed=%s",
        schema.name,
        result.created,
        result.updated,
        result.unchanged,
        result.failed,
    )
    return result


def _execute(
    store: RemoteStore,
    action: SyncAction,
    existing: RemoteRecord | None,
) -> RemoteRecord:
    match action:
        case Create(fields=fields):
            created = store.create_record(fields)
            log.info("[%s] id=%s created", store.schema.name, created.id)
            return created
        case Update(record_id=record_id, fields=fields):
            store.update_record(record_id, fields)
            log.info("[%s] id=%s updated", store.schema.name, record_id)
            created_at = existing.created_at if existing is not None else None
            return RemoteRecord(id=record_id, created_at=created_at, fields=fields)
        case NoOp(record_id=record_id):
            log.debug("[%s] id=%s unchanged, skipping update", store.schema.name, record_id)
            if existing is None:
                raise RuntimeError("NoOp decided without an existing record")
            return existing


def _count(result: SyncResult, action: SyncAction) -> None:
    match action:
        case Create():
            result.created += 1
        case Update():
            result.updated += 1
        case NoOp():
            result.unchanged += 1
