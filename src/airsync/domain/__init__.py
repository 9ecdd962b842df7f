"""Domain layer: record model, entity schemas and the reconciliation core."""

from __future__ import annotations

from .errors import ExternalServiceError, PermanentServiceError, TransientServiceError
from .records import FieldType, FieldValue, NaturalKey, Record, RemoteRecord, is_zero, zero_value
from .schema import EntitySchema, FieldPolicy, FieldSpec, SchemaMismatchError

__all__ = [
    "EntitySchema",
    "ExternalServiceError",
    "FieldPolicy",
    "FieldSpec",
    "FieldType",
    "FieldValue",
    "NaturalKey",
    "PermanentServiceError",
    "Record",
    "RemoteRecord",
    "SchemaMismatchError",
    "TransientServiceError",
    "is_zero",
    "zero_value",
]
