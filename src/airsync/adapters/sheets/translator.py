"""Derive outbound shipment records from swag request sheet rows.

The sheets are form responses: the header row names the questions, so
columns are located by substring match on the lower-cased header text.
Rows are read until the first one with an empty e-mail address; rows whose
``sent`` column reads true are skipped.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta, timezone
from logging import getLogger
from typing import TYPE_CHECKING

from airsync.domain.entities import OUTBOUND_SHIPMENT

if TYPE_CHECKING:
    from collections.abc import Sequence

    from airsync.domain.records import Record

log = getLogger(__name__)

SHEET_TIMESTAMP_FORMAT = "%m/%d/%Y %H:%M:%S"
# form timestamps are recorded in Pacific Standard Time
SHEET_TIMEZONE = timezone(timedelta(hours=-8))
DEFAULT_COUNTRY = "US"
NOT_APPLICABLE = "N/A"

# (header substring, column attribute); later matches win, as in a left-to-right scan
_HEADER_MATCHES: tuple[tuple[str, str], ...] = (
    ("timestamp", "timestamp"),
    ("name", "name"),
    ("email address", "email"),
    ("fleece", "fleece_size"),
    ("hoodie", "hoodie_size"),
    ("women's tee", "womens_shirt_size"),
    ("unisex tee", "unisex_shirt_size"),
    ("onesie", "kids_shirt_size"),
    ("street address line 1", "street_1"),
    ("street address line 2", "street_2"),
    ("city", "city"),
    ("state", "state"),
    ("zipcode", "zipcode"),
    ("country", "country"),
    ("phone", "phone"),
    ("sent", "sent"),
)

_CONTENT_LABELS: tuple[tuple[str, str], ...] = (
    ("hoodie_size", "Oxide Hoodie"),
    ("fleece_size", "Oxide Fleece"),
    ("womens_shirt_size", "Oxide Women's Shirt"),
    ("unisex_shirt_size", "Oxide Unisex Shirt"),
    ("kids_shirt_size", "Oxide Kids Shirt"),
)


class SheetFormatError(ValueError):
    """Raised when a sheet lacks the header or columns rows are derived from."""


@dataclass(slots=True)
class SwagSheetColumns:
    """Column index per known question; ``None`` when the sheet lacks it."""

    timestamp: int | None = None
    name: int | None = None
    email: int | None = None
    street_1: int | None = None
    street_2: int | None = None
    city: int | None = None
    state: int | None = None
    zipcode: int | None = None
    country: int | None = None
    phone: int | None = None
    sent: int | None = None
    fleece_size: int | None = None
    hoodie_size: int | None = None
    womens_shirt_size: int | None = None
    unisex_shirt_size: int | None = None
    kids_shirt_size: int | None = None

    @classmethod
    def parse(cls, header: Sequence[str]) -> SwagSheetColumns:
        columns = cls()
        for index, title in enumerate(header):
            lowered = title.lower()
            for needle, attribute in _HEADER_MATCHES:
                if needle in lowered:
                    setattr(columns, attribute, index)
        if columns.timestamp is None or columns.email is None:
            raise SheetFormatError("swag sheet header has no timestamp or e-mail column")
        return columns

    def cell(self, row: Sequence[str], attribute: str) -> str:
        index = getattr(self, attribute)
        if index is None or index >= len(row):
            return ""
        return row[index].strip()


def parse_sheet_timestamp(value: str) -> datetime:
    local = datetime.strptime(value.strip(), SHEET_TIMESTAMP_FORMAT)
    return local.replace(tzinfo=SHEET_TIMEZONE).astimezone(UTC)


def format_address(
    *,
    street_1: str,
    street_2: str,
    city: str,
    state: str,
    zipcode: str,
    country: str,
) -> str:
    street = f"{street_1}\n{street_2}" if street_2 else street_1
    formatted = f"{street}\n{city}, {state} {zipcode} {country}"
    return formatted.strip().strip(",").strip()


def format_contents(columns: SwagSheetColumns, row: Sequence[str]) -> str:
    lines: list[str] = []
    for attribute, label in _CONTENT_LABELS:
        size = columns.cell(row, attribute).upper()
        if size and NOT_APPLICABLE not in size:
            lines.append(f"1 x {label}, Size: {size}")
    return "\n".join(lines)


def is_sent(columns: SwagSheetColumns, row: Sequence[str]) -> bool:
    return "true" in columns.cell(row, "sent").lower()


def to_outbound_shipment(columns: SwagSheetColumns, row: Sequence[str]) -> Record:
    """Derive one outbound shipment from a response row."""

    street_1 = columns.cell(row, "street_1").upper()
    street_2 = columns.cell(row, "street_2").upper()
    city = columns.cell(row, "city").upper()
    state = columns.cell(row, "state").upper()
    zipcode = columns.cell(row, "zipcode").upper()
    country = columns.cell(row, "country").upper() or DEFAULT_COUNTRY
    return OUTBOUND_SHIPMENT.complete(
        {
            "created_time": parse_sheet_timestamp(columns.cell(row, "timestamp")),
            "name": columns.cell(row, "name"),
            "email": columns.cell(row, "email").lower(),
            "phone": columns.cell(row, "phone").lower(),
            "street_1": street_1,
            "street_2": street_2,
            "city": city,
            "state": state,
            "zipcode": zipcode,
            "country": country,
            "address_formatted": format_address(
                street_1=street_1,
                street_2=street_2,
                city=city,
                state=state,
                zipcode=zipcode,
                country=country,
            ),
            "contents": format_contents(columns, row),
        }
    )


def parse_swag_sheet(values: Sequence[Sequence[str]]) -> list[Record]:
    """Derive the outbound shipments still to be sent from one sheet's cells."""

    if not values:
        raise SheetFormatError("swag sheet has no values")
    columns = SwagSheetColumns.parse(values[0])

    shipments: list[Record] = []
    skipped = 0
    for row in values[1:]:
        if not columns.cell(row, "email"):
            break
        if is_sent(columns, row):
            skipped += 1
            continue
        shipments.append(to_outbound_shipment(columns, row))
    log.info(f"Derived {len(shipments)} outbound shipments ({skipped} already sent)")
    return shipments
