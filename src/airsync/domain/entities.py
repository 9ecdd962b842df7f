"""Entity schemas synced by airsync."""

from __future__ import annotations

from .records import FieldType
from .schema import EntitySchema, FieldPolicy, FieldSpec

FILL = FieldPolicy.FILL_IF_BLANK
OWNED = FieldPolicy.REMOTE_OWNED

OUTBOUND_SHIPMENT = EntitySchema.declare(
    "outbound_shipment",
    key=("created_time", "email"),
    fields=(
        FieldSpec("name"),
        FieldSpec("contents"),
        FieldSpec("street_1"),
        FieldSpec("street_2"),
        FieldSpec("city"),
        FieldSpec("state"),
        FieldSpec("zipcode"),
        FieldSpec("country"),
        FieldSpec("address_formatted"),
        FieldSpec("email"),
        FieldSpec("phone"),
        FieldSpec("status", policy=FILL),
        FieldSpec("carrier", policy=FILL),
        FieldSpec("tracking_number", policy=FILL),
        FieldSpec("tracking_link", policy=FILL),
        FieldSpec("public_tracking_link", policy=FILL),
        FieldSpec("tracking_status", policy=FILL),
        FieldSpec("label_link", policy=FILL),
        FieldSpec("reprint_label", FieldType.BOOLEAN),
        FieldSpec("resend_email_to_recipient", FieldType.BOOLEAN),
        FieldSpec("cost", FieldType.NUMBER, policy=FILL),
        FieldSpec("schedule_pickup", FieldType.BOOLEAN),
        FieldSpec("pickup_date", FieldType.DATE, policy=FILL),
        FieldSpec("created_time", FieldType.TIMESTAMP),
        FieldSpec("shipped_time", FieldType.TIMESTAMP, policy=FILL),
        FieldSpec("delivered_time", FieldType.TIMESTAMP, policy=FILL),
        FieldSpec("eta", FieldType.TIMESTAMP, policy=FILL),
        FieldSpec("shippo_id", policy=FILL),
        FieldSpec("messages", policy=FILL),
        FieldSpec("notes", policy=FILL),
        FieldSpec("geocode_cache", policy=OWNED),
    ),
)

INBOUND_SHIPMENT = EntitySchema.declare(
    "inbound_shipment",
    key=("tracking_number", "carrier"),
    fields=(
        FieldSpec("tracking_number", policy=FILL),
        FieldSpec("carrier", policy=FILL),
        FieldSpec("tracking_link", policy=FILL),
        FieldSpec("public_tracking_link"),
        FieldSpec("tracking_status", policy=FILL),
        FieldSpec("shipped_time", FieldType.TIMESTAMP, policy=FILL),
        FieldSpec("delivered_time", FieldType.TIMESTAMP, policy=FILL),
        FieldSpec("eta", FieldType.TIMESTAMP, policy=FILL),
        FieldSpec("messages"),
        # formula column in Airtable
        FieldSpec("name", policy=OWNED, read_only=True),
        FieldSpec("notes", policy=FILL),
    ),
)

SWAG_INVENTORY_ITEM = EntitySchema.declare(
    "swag_inventory_item",
    key=("item", "size"),
    fields=(
        FieldSpec("name", policy=OWNED, read_only=True),
        FieldSpec("item"),
        FieldSpec("size"),
        FieldSpec("current_stock", FieldType.NUMBER),
        FieldSpec("barcode"),
        FieldSpec("link_to_item", FieldType.STRING_LIST, policy=OWNED),
    ),
)

AUTH_LOGIN = EntitySchema.declare(
    "auth_login",
    key=("user_id",),
    fields=(
        FieldSpec("user_id"),
        FieldSpec("name"),
        FieldSpec("nickname"),
        FieldSpec("username"),
        FieldSpec("email"),
        FieldSpec("email_verified", FieldType.BOOLEAN),
        FieldSpec("picture"),
        FieldSpec("company", policy=FILL),
        FieldSpec("blog"),
        FieldSpec("phone"),
        FieldSpec("phone_verified", FieldType.BOOLEAN),
        FieldSpec("locale"),
        FieldSpec("login_provider"),
        FieldSpec("created_at", FieldType.TIMESTAMP),
        FieldSpec("updated_at", FieldType.TIMESTAMP),
        FieldSpec("last_login", FieldType.TIMESTAMP),
        FieldSpec("last_ip"),
        FieldSpec("logins_count", FieldType.NUMBER),
        FieldSpec("link_to_people", FieldType.STRING_LIST, policy=OWNED),
    ),
)

ALL_SCHEMAS: tuple[EntitySchema, ...] = (
    OUTBOUND_SHIPMENT,
    INBOUND_SHIPMENT,
    SWAG_INVENTORY_ITEM,
    AUTH_LOGIN,
)
