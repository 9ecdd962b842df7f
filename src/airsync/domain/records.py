"""Record primitives shared by the reconciler, matcher and adapters."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import StrEnum

type FieldValue = str | bool | int | float | datetime | date | list[str] | None
type Record = dict[str, FieldValue]
type NaturalKey = tuple[FieldValue, ...]


class FieldType(StrEnum):
    """Value types a record field may carry."""

    STRING = "string"
    BOOLEAN = "boolean"
    TIMESTAMP = "timestamp"
    DATE = "date"
    NUMBER = "number"
    STRING_LIST = "string_list"


def zero_value(field_type: FieldType) -> FieldValue:
    """Return the type default a derivation leaves in fields it does not compute."""

    match field_type:
        case FieldType.STRING:
            return ""
        case FieldType.BOOLEAN:
            return False
        case FieldType.NUMBER:
            return 0
        case FieldType.STRING_LIST:
            return []
        case FieldType.TIMESTAMP | FieldType.DATE:
            return None


def is_zero(field_type: FieldType, value: FieldValue) -> bool:
    if value is None:
        return True
    match field_type:
        case FieldType.STRING:
            return value == ""
        case FieldType.BOOLEAN:
            return value is False
        case FieldType.NUMBER:
            return value == 0
        case FieldType.STRING_LIST:
            return isinstance(value, list) and not value
        case FieldType.TIMESTAMP | FieldType.DATE:
            return False


@dataclass(frozen=True, slots=True)
class RemoteRecord:
    """A record as persisted in the remote store.

    ``id`` and ``created_at`` are assigned by the store on creation and never
    change across later syncs of the same entity.
    """

    id: str
    created_at: datetime | None
    fields: Record = field(default_factory=dict["str", "FieldValue"])
