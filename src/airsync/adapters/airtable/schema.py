"""Pydantic models describing the Airtable REST payloads."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class AirtableBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class AirtableRecordPayload(AirtableBaseModel):
    id: str
    created_time: datetime | None = Field(default=None, alias="createdTime")
    # Airtable omits empty cells entirely
    fields: dict[str, object] = Field(default_factory=dict[str, object])


class ListRecordsResponse(AirtableBaseModel):
    records: list[AirtableRecordPayload] = Field(default_factory=list[AirtableRecordPayload])
    offset: str | None = None
