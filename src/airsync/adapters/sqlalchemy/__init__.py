"""SQLAlchemy adapter package for the local mirror."""

from __future__ import annotations

from .mappings import (
    auth_login_table,
    create_all_tables,
    inbound_shipment_table,
    mapper_registry,
    mirror_table,
    swag_inventory_item_table,
)
from .repositories import SqlAlchemyLocalStore
from .unit_of_work import (
    SqlAlchemyMirrorUnitOfWork,
    StartupError,
    is_started,
    shutdown,
    startup,
)

__all__ = [
    "SqlAlchemyLocalStore",
    "SqlAlchemyMirrorUnitOfWork",
    "StartupError",
    "auth_login_table",
    "create_all_tables",
    "inbound_shipment_table",
    "is_started",
    "mapper_registry",
    "mirror_table",
    "shutdown",
    "startup",
    "swag_inventory_item_table",
]
