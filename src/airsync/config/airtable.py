"""Airtable configuration values."""

from __future__ import annotations

from dataclasses import dataclass

from .env import optional_env_var, require_env_vars
from .http_resilience import RateLimit, ResilienceConfig, RetryPolicy

AIRTABLE_BASE_URL = "https://api.airtable.com/v0/"
AIRTABLE_GRID_VIEW = "Grid view"
AIRTABLE_PAGE_SIZE = 100

AIRTABLE_OUTBOUND_TABLE = "Outbound"
AIRTABLE_INBOUND_TABLE = "Inbound"
AIRTABLE_SWAG_INVENTORY_ITEMS_TABLE = "Inventory Items"
AIRTABLE_AUTH0_LOGINS_TABLE = "Auth0 Logins"


@dataclass(frozen=True, slots=True)
class AirtableTable:
    """Location of one table: its base, its name and the view to list."""

    base_id: str
    name: str
    view: str = AIRTABLE_GRID_VIEW


@dataclass(frozen=True, slots=True)
class AirtableTables:
    outbound_shipments: AirtableTable
    inbound_shipments: AirtableTable
    swag_inventory_items: AirtableTable
    auth_logins: AirtableTable


@dataclass(frozen=True)
class AirtableConfig:
    api_key: str
    tables: AirtableTables
    resilience: ResilienceConfig


def default_airtable_resilience(api_key: str) -> ResilienceConfig:
    # Airtable allows five requests per second per base.
    return ResilienceConfig(
        name="airtable",
        base_url=AIRTABLE_BASE_URL,
        timeout_seconds=30.0,
        retry=RetryPolicy(total=5),
        ratelimit=RateLimit(max_calls=5, per_seconds=1.0),
        default_headers={"Authorization": f"Bearer {api_key}"},
    )


def get_airtable_config(*, resilience: ResilienceConfig | None = None) -> AirtableConfig:
    values = require_env_vars(
        (
            "AIRTABLE_API_KEY",
            "AIRTABLE_BASE_ID_SHIPMENTS",
            "AIRTABLE_BASE_ID_SWAG",
            "AIRTABLE_BASE_ID_CUSTOMER_LEADS",
        )
    )
    view = optional_env_var("AIRTABLE_VIEW", AIRTABLE_GRID_VIEW)
    shipments = values["AIRTABLE_BASE_ID_SHIPMENTS"]
    tables = AirtableTables(
        outbound_shipments=AirtableTable(
            base_id=shipments,
            name=optional_env_var("AIRTABLE_OUTBOUND_TABLE", AIRTABLE_OUTBOUND_TABLE),
            view=view,
        ),
        inbound_shipments=AirtableTable(
            base_id=shipments,
            name=optional_env_var("AIRTABLE_INBOUND_TABLE", AIRTABLE_INBOUND_TABLE),
            view=view,
        ),
        swag_inventory_items=AirtableTable(
            base_id=values["AIRTABLE_BASE_ID_SWAG"],
            name=optional_env_var(
                "AIRTABLE_SWAG_INVENTORY_ITEMS_TABLE", AIRTABLE_SWAG_INVENTORY_ITEMS_TABLE
            ),
            view=view,
        ),
        auth_logins=AirtableTable(
            base_id=values["AIRTABLE_BASE_ID_CUSTOMER_LEADS"],
            name=optional_env_var("AIRTABLE_AUTH0_LOGINS_TABLE", AIRTABLE_AUTH0_LOGINS_TABLE),
            view=view,
        ),
    )
    api_key = values["AIRTABLE_API_KEY"]
    return AirtableConfig(
        api_key=api_key,
        tables=tables,
        resilience=resilience or default_airtable_resilience(api_key),
    )
