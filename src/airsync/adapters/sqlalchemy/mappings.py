"""SQLAlchemy tables mirroring the synced entities.

Tables are generated from the entity schemas: one nullable column per
declared field, a unique constraint over the natural key, and the remote
record id once it is known.
"""

from __future__ import annotations

import logging
import uuid
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from sqlalchemy import (
    JSON,
    Boolean,
    Column,
    Date,
    DateTime,
    Dialect,
    Float,
    String,
    Table,
    TypeDecorator,
    UniqueConstraint,
    Uuid,
    orm,
)

from airsync.domain.entities import AUTH_LOGIN, INBOUND_SHIPMENT, SWAG_INVENTORY_ITEM
from airsync.domain.records import FieldType

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine
    from sqlalchemy.types import TypeEngine

    from airsync.domain.schema import EntitySchema

log = logging.getLogger(__name__)

UUIDColumnType = Uuid[uuid.UUID]


class UTCDateTime(TypeDecorator[datetime]):
    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value: datetime | None, dialect: Dialect) -> datetime | None:
        _ = dialect
        if value is None:
            return None
        if value.tzinfo is None:
            value = value.replace(tzinfo=UTC)
        return value.astimezone(UTC)

    def process_result_value(self, value: datetime | None, dialect: Dialect) -> datetime | None:
        _ = dialect
        if value is None:
            return None
        return value if value.tzinfo else value.replace(tzinfo=UTC)


mapper_registry = orm.registry()
mapper_registry.metadata.naming_convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_N_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "pk": "pk_%(table_name)s",
}


def _column_type(field_type: FieldType) -> TypeEngine[object] | type[TypeEngine[object]]:
    match field_type:
        case FieldType.STRING:
            return String
        case FieldType.BOOLEAN:
            return Boolean
        case FieldType.TIMESTAMP:
            return UTCDateTime
        case FieldType.DATE:
            return Date
        case FieldType.NUMBER:
            return Float
        case FieldType.STRING_LIST:
            return JSON


def mirror_table(schema: EntitySchema, name: str) -> Table:
    """Build the mirror table for ``schema`` on the shared metadata."""

    return Table(
        name,
        mapper_registry.metadata,
        Column("id", UUIDColumnType, primary_key=True, default=uuid.uuid4),
        Column("remote_id", String, nullable=True),
        *(
            Column(field_name, _column_type(spec.type), nullable=True)
            for field_name, spec in schema.fields.items()
        ),
        UniqueConstraint(*schema.key_fields),
    )


inbound_shipment_table = mirror_table(INBOUND_SHIPMENT, "inbound_shipments")
swag_inventory_item_table = mirror_table(SWAG_INVENTORY_ITEM, "swag_inventory_items")
auth_login_table = mirror_table(AUTH_LOGIN, "auth_logins")


def create_all_tables(engine: Engine) -> None:
    log.debug(f"Creating mirror tables on {engine.url.render_as_string(hide_password=True)}")
    mapper_registry.metadata.create_all(engine)
