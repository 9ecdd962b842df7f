from __future__ import annotations

import json
from typing import TYPE_CHECKING

import httpx
import pytest

from airsync.adapters.airtable import AirtableClient, AirtableRemoteStore
from airsync.config.airtable import AirtableTable
from airsync.config.http_resilience import ResilienceConfig
from airsync.domain.entities import INBOUND_SHIPMENT
from airsync.domain.errors import PermanentServiceError, TransientServiceError
from tests.helpers.http import make_client_factory

if TYPE_CHECKING:
    from collections.abc import Callable

TABLE = AirtableTable(base_id="appShipping", name="Inbound", view="Grid view")


def _client(handler: Callable[[httpx.Request], httpx.Response]) -> AirtableClient:
    return AirtableClient(
        resilience=ResilienceConfig(name="airtable", base_url="https://api.airtable.com/v0/"),
        page_size=2,
        client_factory=make_client_factory(handler),
    )


def _payload(record_id: str, **fields: object) -> dict[str, object]:
    return {"id": record_id, "createdTime": "2021-01-01T00:00:00.000Z", "fields": fields}


def test_list_records_follows_offsets() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        if request.url.params.get("offset") == "itr1":
            return httpx.Response(200, json={"records": [_payload("rec3")]})
        return httpx.Response(
            200, json={"records": [_payload("rec1"), _payload("rec2")], "offset": "itr1"}
        )

    records = _client(handler).list_records(TABLE)

    assert [record.id for record in records] == ["rec1", "rec2", "rec3"]
    assert len(seen) == 2
    assert seen[0].url.path == "/v0/appShipping/Inbound"
    assert seen[0].url.params["view"] == "Grid view"
    assert seen[0].url.params["pageSize"] == "2"
    assert "offset" not in seen[0].url.params


def test_table_names_are_url_encoded() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"records": []})

    table = AirtableTable(base_id="appSwag", name="Inventory Items", view="Grid view")
    _client(handler).list_records(table)

    assert seen[0].url.raw_path.startswith(b"/v0/appSwag/Inventory%20Items")


def test_create_posts_fields_envelope() -> None:
    bodies: list[dict[str, object]] = []

    def handler(request: httpx.Request) -> httpx.Response:
        assert request.method == "POST"
        bodies.append(json.loads(request.content))
        return httpx.Response(200, json=_payload("recNew", carrier="UPS"))

    created = _client(handler).create_record(TABLE, {"carrier": "UPS"})

    assert bodies == [{"fields": {"carrier": "UPS"}}]
    assert created.id == "recNew"


def test_update_patches_the_record() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=_payload("rec1"))

    _client(handler).update_record(TABLE, "rec1", {"notes": None})

    assert seen[0].method == "PATCH"
    assert seen[0].url.path == "/v0/appShipping/Inbound/rec1"
    assert json.loads(seen[0].content) == {"fields": {"notes": None}}


def test_get_record() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path.endswith("/rec9")
        return httpx.Response(200, json=_payload("rec9", carrier="DHL"))

    record = _client(handler).get_record(TABLE, "rec9")

    assert record.fields == {"carrier": "DHL"}


def test_validation_error_is_permanent() -> None:
    def handler(request: httpx.Request) -> httpx.Response:  # noqa: ARG001
        return httpx.Response(
            422,
            json={"error": {"type": "INVALID_VALUE_FOR_COLUMN", "message": "bad"}},
        )

    with pytest.raises(PermanentServiceError) as exc:
        _client(handler).create_record(TABLE, {"carrier": 1})

    assert exc.value.status_code == 422
    assert "INVALID_VALUE_FOR_COLUMN" in (exc.value.body or "")


def test_rate_limit_is_transient() -> None:
    def handler(request: httpx.Request) -> httpx.Response:  # noqa: ARG001
        return httpx.Response(429, json={"error": "RATE_LIMIT_REACHED"})

    with pytest.raises(TransientServiceError):
        _client(handler).list_records(TABLE)


def test_unexpected_payload_is_permanent() -> None:
    def handler(request: httpx.Request) -> httpx.Response:  # noqa: ARG001
        return httpx.Response(200, json={"records": "nope"})

    with pytest.raises(PermanentServiceError, match="Unexpected Airtable response"):
        _client(handler).list_records(TABLE)


def test_store_round_trips_through_schema() -> None:
    bodies: list[dict[str, object]] = []

    def handler(request: httpx.Request) -> httpx.Response:
        if request.method == "GET":
            return httpx.Response(
                200,
                json={
                    "records": [
                        _payload("rec1", tracking_number="1Z9", carrier="UPS", name="1Z9 UPS")
                    ]
                },
            )
        bodies.append(json.loads(request.content))
        return httpx.Response(200, json=_payload("rec2", tracking_number="9400", carrier="USPS"))

    store = AirtableRemoteStore(
        client=_client(handler), table=TABLE, entity_schema=INBOUND_SHIPMENT
    )

    listed = store.list_records()
    created = store.create_record({"tracking_number": "9400", "carrier": "USPS"})

    assert store.schema is INBOUND_SHIPMENT
    assert listed[0].fields["name"] == "1Z9 UPS"
    assert listed[0].fields["notes"] == ""
    assert bodies == [{"fields": {"tracking_number": "9400", "carrier": "USPS"}}]
    assert created.id == "rec2"
