"""Field-level merge of a derived record into an existing remote record."""

from __future__ import annotations

from typing import TYPE_CHECKING

from airsync.domain.records import is_zero
from airsync.domain.schema import FieldPolicy

from .actions import Create, NoOp, Update

if TYPE_CHECKING:
    from collections.abc import Mapping

    from airsync.domain.records import FieldValue, Record, RemoteRecord
    from airsync.domain.schema import EntitySchema

    from .actions import SyncAction


def merge(
    derived: Mapping[str, FieldValue],
    existing: Mapping[str, FieldValue],
    *,
    schema: EntitySchema,
) -> Record:
    """Merge ``derived`` over ``existing`` following each field's policy.

    - fill-if-blank: the derived value, unless it is the type's zero value
    - remote-owned: always the existing value
    - always-overwrite: always the derived value, zero or not
    """

    fresh = schema.complete(derived)
    current = schema.complete(existing)
    merged: Record = {}
    for name, spec in schema.fields.items():
        match spec.policy:
            case FieldPolicy.REMOTE_OWNED:
                merged[name] = current[name]
            case FieldPolicy.FILL_IF_BLANK:
                merged[name] = current[name] if is_zero(spec.type, fresh[name]) else fresh[name]
            case FieldPolicy.ALWAYS_OVERWRITE:
                merged[name] = fresh[name]
    return merged


def reconcile(
    derived: Mapping[str, FieldValue],
    existing: RemoteRecord | None,
    *,
    schema: EntitySchema,
) -> SyncAction:
    """Decide the single write, if any, that brings the remote store in line."""

    if existing is None:
        return Create(fields=dict(derived))

    merged = merge(derived, existing.fields, schema=schema)
    if merged == schema.complete(existing.fields):
        return NoOp(record_id=existing.id)
    return Update(record_id=existing.id, fields=merged)
