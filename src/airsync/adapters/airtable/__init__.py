"""Public interface for the Airtable adapter."""

from __future__ import annotations

from .client import AirtableClient
from .schema import AirtableRecordPayload, ListRecordsResponse
from .store import AirtableRemoteStore
from .translator import (
    decode_fields,
    encode_create_fields,
    encode_update_fields,
    to_remote_record,
)

__all__ = [
    "AirtableClient",
    "AirtableRecordPayload",
    "AirtableRemoteStore",
    "ListRecordsResponse",
    "decode_fields",
    "encode_create_fields",
    "encode_update_fields",
    "to_remote_record",
]
