from __future__ import annotations

from datetime import UTC, date, datetime

import pytest

from airsync.adapters.airtable import (
    AirtableRecordPayload,
    decode_fields,
    encode_create_fields,
    encode_update_fields,
    to_remote_record,
)
from airsync.adapters.airtable.translator import decode_value, encode_value
from airsync.domain.entities import INBOUND_SHIPMENT, OUTBOUND_SHIPMENT, SWAG_INVENTORY_ITEM
from airsync.domain.records import FieldType


def test_decode_fills_missing_cells_with_zero_values() -> None:
    fields = decode_fields(
        {"tracking_number": "1Z9", "carrier": "UPS", "Unrelated": "x"},
        schema=INBOUND_SHIPMENT,
    )

    assert fields["tracking_number"] == "1Z9"
    assert fields["notes"] == ""
    assert fields["shipped_time"] is None
    assert "Unrelated" not in fields
    assert set(fields) == set(INBOUND_SHIPMENT.fields)


def test_decode_timestamps_as_aware_utc() -> None:
    assert decode_value(FieldType.TIMESTAMP, "2021-03-04T05:06:07.000Z") == datetime(
        2021, 3, 4, 5, 6, 7, tzinfo=UTC
    )


def test_decode_date_accepts_timestamp_text() -> None:
    assert decode_value(FieldType.DATE, "2021-03-04T00:00:00Z") == date(2021, 3, 4)


def test_decode_unexpected_shape_reads_as_empty(caplog: pytest.LogCaptureFixture) -> None:
    assert decode_value(FieldType.BOOLEAN, "yes") is None
    assert "Ignoring str cell value" in caplog.text


def test_unparseable_date_text_reads_as_empty(caplog: pytest.LogCaptureFixture) -> None:
    fields = decode_fields(
        {"tracking_number": "1Z9", "carrier": "UPS", "eta": "next week"},
        schema=INBOUND_SHIPMENT,
    )

    assert fields["eta"] is None
    assert fields["tracking_number"] == "1Z9"
    assert decode_value(FieldType.DATE, "soon") is None
    assert "Ignoring str cell value for timestamp field" in caplog.text


def test_decode_numbers_into_text_fields() -> None:
    assert decode_value(FieldType.STRING, 94107) == "94107"
    assert decode_value(FieldType.NUMBER, True) is None


def test_encode_timestamp_uses_zulu_suffix() -> None:
    value = datetime(2021, 3, 4, 5, 6, 7, tzinfo=UTC)

    assert encode_value(FieldType.TIMESTAMP, value) == "2021-03-04T05:06:07Z"
    assert encode_value(FieldType.DATE, date(2021, 3, 4)) == "2021-03-04"
    assert encode_value(FieldType.STRING, "") is None


def test_create_leaves_out_zero_and_read_only_fields() -> None:
    encoded = encode_create_fields(
        {"item": "Hoodie", "size": "L", "current_stock": 0, "name": "Hoodie - L"},
        schema=SWAG_INVENTORY_ITEM,
    )

    assert encoded == {"item": "Hoodie", "size": "L"}


def test_update_sends_every_writable_field() -> None:
    encoded = encode_update_fields(
        {"tracking_number": "1Z9", "carrier": "UPS"},
        schema=INBOUND_SHIPMENT,
    )

    assert set(encoded) == set(INBOUND_SHIPMENT.writable_fields)
    assert "name" not in encoded
    assert encoded["tracking_status"] is None
    assert encoded["tracking_number"] == "1Z9"


def test_to_remote_record_keeps_identity() -> None:
    payload = AirtableRecordPayload.model_validate(
        {
            "id": "recA",
            "createdTime": "2020-09-01T10:00:00.000Z",
            "fields": {"email": "a@example.com", "created_time": "2020-09-01T09:59:00.000Z"},
        }
    )

    record = to_remote_record(payload, schema=OUTBOUND_SHIPMENT)

    assert record.id == "recA"
    assert record.created_at == datetime(2020, 9, 1, 10, 0, tzinfo=UTC)
    assert OUTBOUND_SHIPMENT.key_of(record.fields) == (
        datetime(2020, 9, 1, 9, 59, tzinfo=UTC),
        "a@example.com",
    )
