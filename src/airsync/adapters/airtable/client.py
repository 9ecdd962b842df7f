"""HTTP client for the Airtable REST API."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING
from urllib.parse import quote

from airsync.adapters.http_resilience import ResilientClient, raise_for_service_status
from airsync.config.airtable import AIRTABLE_BASE_URL, AIRTABLE_PAGE_SIZE
from airsync.domain.errors import PermanentServiceError

from .schema import AirtableRecordPayload, ListRecordsResponse

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    import httpx

    from airsync.config.airtable import AirtableConfig, AirtableTable
    from airsync.config.http_resilience import ResilienceConfig

log = getLogger(__name__)

SERVICE_NAME = "airtable"


def _default_client_factory(config: ResilienceConfig) -> ResilientClient:
    return ResilientClient(config)


@dataclass(slots=True)
class AirtableClient:
    """Record-level access to Airtable tables.

    Each public method runs its own event loop, matching the synchronous
    batch flow that drives it.
    """

    resilience: ResilienceConfig
    page_size: int = AIRTABLE_PAGE_SIZE
    client_factory: Callable[[ResilienceConfig], ResilientClient] = field(
        default=_default_client_factory
    )

    @classmethod
    def from_config(cls, config: AirtableConfig) -> AirtableClient:
        return cls(resilience=config.resilience)

    def list_records(self, table: AirtableTable) -> list[AirtableRecordPayload]:
        return asyncio.run(self._list_records_async(table))

    def get_record(self, table: AirtableTable, record_id: str) -> AirtableRecordPayload:
        return asyncio.run(self._get_record_async(table, record_id))

    def create_record(
        self,
        table: AirtableTable,
        fields: Mapping[str, object],
    ) -> AirtableRecordPayload:
        return asyncio.run(self._create_record_async(table, fields))

    def update_record(
        self,
        table: AirtableTable,
        record_id: str,
        fields: Mapping[str, object],
    ) -> AirtableRecordPayload:
        return asyncio.run(self._update_record_async(table, record_id, fields))

    def _table_url(self, table: AirtableTable) -> str:
        base_url = (self.resilience.base_url or AIRTABLE_BASE_URL).rstrip("/")
        return f"{base_url}/{table.base_id}/{quote(table.name, safe='')}"

    async def _list_records_async(self, table: AirtableTable) -> list[AirtableRecordPayload]:
        records: list[AirtableRecordPayload] = []
        offset: str | None = None
        page = 0
        async with self.client_factory(self.resilience) as client:
            while True:
                params: dict[str, str | int] = {"view": table.view, "pageSize": self.page_size}
                if offset is not None:
                    params["offset"] = offset
                response = await client.get(self._table_url(table), params=params)
                listing = _parse(ListRecordsResponse, response)
                records.extend(listing.records)
                page += 1
                if not listing.offset:
                    break
                offset = listing.offset
        log.debug(f"Listed {len(records)} records from {table.name} in {page} page(s)")
        return records

    async def _get_record_async(
        self,
        table: AirtableTable,
        record_id: str,
    ) -> AirtableRecordPayload:
        async with self.client_factory(self.resilience) as client:
            response = await client.get(f"{self._table_url(table)}/{record_id}")
        return _parse(AirtableRecordPayload, response)

    async def _create_record_async(
        self,
        table: AirtableTable,
        fields: Mapping[str, object],
    ) -> AirtableRecordPayload:
        async with self.client_factory(self.resilience) as client:
            response = await client.post(self._table_url(table), json={"fields": dict(fields)})
        return _parse(AirtableRecordPayload, response)

    async def _update_record_async(
        self,
        table: AirtableTable,
        record_id: str,
        fields: Mapping[str, object],
    ) -> AirtableRecordPayload:
        async with self.client_factory(self.resilience) as client:
            response = await client.patch(
                f"{self._table_url(table)}/{record_id}",
                json={"fields": dict(fields)},
            )
        return _parse(AirtableRecordPayload, response)


def _parse[TModel: (AirtableRecordPayload, ListRecordsResponse)](
    model: type[TModel],
    response: httpx.Response,
) -> TModel:
    raise_for_service_status(response, service=SERVICE_NAME)
    try:
        return model.model_validate(response.json())
    except ValueError as exc:
        raise PermanentServiceError(
            f"Unexpected Airtable response payload: {exc}",
            service=SERVICE_NAME,
            status_code=response.status_code,
            body=response.text,
        ) from exc
