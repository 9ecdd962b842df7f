"""Convert between Airtable cell values and typed record fields."""

from __future__ import annotations

from datetime import UTC, date, datetime
from logging import getLogger
from typing import TYPE_CHECKING, cast

from airsync.domain.records import FieldType, RemoteRecord, is_zero

if TYPE_CHECKING:
    from collections.abc import Mapping

    from airsync.domain.records import FieldValue, Record
    from airsync.domain.schema import EntitySchema

    from .schema import AirtableRecordPayload

log = getLogger(__name__)


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def decode_value(field_type: FieldType, raw: object) -> FieldValue:
    """Decode one cell; unexpected shapes are logged and read as empty."""

    if raw is None:
        return None
    match field_type:
        case FieldType.STRING:
            if isinstance(raw, str):
                return raw
            if isinstance(raw, (int, float)):
                return str(raw)
        case FieldType.BOOLEAN:
            if isinstance(raw, bool):
                return raw
        case FieldType.NUMBER:
            if isinstance(raw, (int, float)) and not isinstance(raw, bool):
                return raw
        case FieldType.TIMESTAMP:
            if isinstance(raw, datetime):
                return _as_utc(raw)
            if isinstance(raw, str) and raw:
                try:
                    return _as_utc(datetime.fromisoformat(raw))
                except ValueError:
                    pass
        case FieldType.DATE:
            if isinstance(raw, date):
                return raw
            if isinstance(raw, str) and raw:
                try:
                    return date.fromisoformat(raw[:10])
                except ValueError:
                    pass
        case FieldType.STRING_LIST:
            if isinstance(raw, list):
                return [str(item) for item in cast(list[object], raw)]
    log.warning(f"Ignoring {type(raw).__name__} cell value for {field_type} field")
    return None


def encode_value(field_type: FieldType, value: FieldValue) -> object:
    if value is None:
        return None
    match field_type:
        case FieldType.TIMESTAMP if isinstance(value, datetime):
            return _as_utc(value).isoformat().replace("+00:00", "Z")
        case FieldType.DATE if isinstance(value, date):
            return value.isoformat()
        case FieldType.STRING if value == "":
            # clearing a text cell takes null, not an empty string
            return None
        case _:
            return value


def decode_fields(raw: Mapping[str, object], *, schema: EntitySchema) -> Record:
    """Decode the declared fields of a record; undeclared columns are dropped."""

    fields: Record = {}
    for name, spec in schema.fields.items():
        if name not in raw:
            continue
        value = decode_value(spec.type, raw[name])
        if value is not None:
            fields[name] = value
    return schema.complete(fields)


def encode_create_fields(
    fields: Mapping[str, FieldValue],
    *,
    schema: EntitySchema,
) -> dict[str, object]:
    """Encode a new record: zero-valued and read-only fields are left out."""

    encoded: dict[str, object] = {}
    for name, value in schema.complete(fields).items():
        spec = schema.fields[name]
        if spec.read_only or is_zero(spec.type, value):
            continue
        encoded[name] = encode_value(spec.type, value)
    return encoded


def encode_update_fields(
    fields: Mapping[str, FieldValue],
    *,
    schema: EntitySchema,
) -> dict[str, object]:
    """Encode every writable field so the update replaces the whole record."""

    completed = schema.complete(fields)
    return {
        name: encode_value(schema.fields[name].type, completed[name])
        for name in schema.writable_fields
    }


def to_remote_record(payload: AirtableRecordPayload, *, schema: EntitySchema) -> RemoteRecord:
    created_at = _as_utc(payload.created_time) if payload.created_time is not None else None
    return RemoteRecord(
        id=payload.id,
        created_at=created_at,
        fields=decode_fields(payload.fields, schema=schema),
    )
