"""Public interface for the swag request sheet adapter."""

from __future__ import annotations

from .schema import ValueRange
from .source import ValueRangeFiles, load_value_range
from .translator import (
    SheetFormatError,
    SwagSheetColumns,
    format_address,
    parse_sheet_timestamp,
    parse_swag_sheet,
    to_outbound_shipment,
)

__all__ = [
    "SheetFormatError",
    "SwagSheetColumns",
    "ValueRange",
    "ValueRangeFiles",
    "format_address",
    "load_value_range",
    "parse_sheet_timestamp",
    "parse_swag_sheet",
    "to_outbound_shipment",
]
