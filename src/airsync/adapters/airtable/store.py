"""Airtable table bound to an entity schema."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .translator import encode_create_fields, encode_update_fields, to_remote_record

if TYPE_CHECKING:
    from collections.abc import Sequence

    from airsync.config.airtable import AirtableTable
    from airsync.domain.records import Record, RemoteRecord
    from airsync.domain.schema import EntitySchema

    from .client import AirtableClient


@dataclass(slots=True)
class AirtableRemoteStore:
    client: AirtableClient
    table: AirtableTable
    entity_schema: EntitySchema

    @property
    def schema(self) -> EntitySchema:
        return self.entity_schema

    def list_records(self) -> Sequence[RemoteRecord]:
        return [
            to_remote_record(payload, schema=self.entity_schema)
            for payload in self.client.list_records(self.table)
        ]

    def create_record(self, fields: Record) -> RemoteRecord:
        payload = self.client.create_record(
            self.table, encode_create_fields(fields, schema=self.entity_schema)
        )
        return to_remote_record(payload, schema=self.entity_schema)

    def update_record(self, record_id: str, fields: Record) -> None:
        self.client.update_record(
            self.table, record_id, encode_update_fields(fields, schema=self.entity_schema)
        )

