"""Application orchestration entry points."""

from __future__ import annotations

import json
from collections.abc import Callable
from logging import getLogger
from typing import TYPE_CHECKING

from airsync.adapters.airtable import AirtableClient, AirtableRemoteStore
from airsync.adapters.auth0 import (
    Auth0User,
    Auth0UserDirectory,
    should_cache_users_page,
    to_auth_login,
)
from airsync.adapters.github import GitHubPushEvent, PushDecision, evaluate_push_event
from airsync.adapters.sheets import parse_swag_sheet
from airsync.adapters.shippo import TrackingStatus, expand_inbound_shipment
from airsync.adapters.sqlalchemy import SqlAlchemyMirrorUnitOfWork, is_started, startup
from airsync.config import (
    get_airtable_config,
    get_auth0_config,
    get_push_filter_rules,
    get_tracking_config,
)
from airsync.config.auth0 import DEFAULT_COMPANY_DOMAINS
from airsync.domain.entities import (
    AUTH_LOGIN,
    INBOUND_SHIPMENT,
    OUTBOUND_SHIPMENT,
    SWAG_INVENTORY_ITEM,
)
from airsync.domain.errors import ExternalServiceError
from airsync.domain.ports.local_store import MirrorUnitOfWork
from airsync.domain.reconciliation import SyncResult, sync_records
from airsync.domain.schema import SchemaMismatchError

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from airsync.config import AirtableConfig, PushFilterRules, TrackingConfig
    from airsync.domain.ports import (
        LocalStore,
        RemoteStore,
        SheetValuesSource,
        TrackingStatusLookup,
        UserDirectory,
    )
    from airsync.domain.records import Record
    from airsync.domain.schema import EntitySchema

UnitOfWorkFactory = Callable[[], MirrorUnitOfWork]

log = getLogger(__name__)


def build_airtable_store(
    schema: EntitySchema,
    *,
    config: AirtableConfig | None = None,
) -> AirtableRemoteStore:
    """Bind ``schema`` to the Airtable table that holds its records."""

    effective_config = config or get_airtable_config()
    tables = effective_config.tables
    table_by_schema = {
        OUTBOUND_SHIPMENT.name: tables.outbound_shipments,
        INBOUND_SHIPMENT.name: tables.inbound_shipments,
        SWAG_INVENTORY_ITEM.name: tables.swag_inventory_items,
        AUTH_LOGIN.name: tables.auth_logins,
    }
    return AirtableRemoteStore(
        client=AirtableClient.from_config(effective_config),
        table=table_by_schema[schema.name],
        entity_schema=schema,
    )


def _mirror_unit_of_work(factory: UnitOfWorkFactory | None) -> UnitOfWorkFactory:
    if factory is not None:
        return factory
    if not is_started():
        startup()
    return SqlAlchemyMirrorUnitOfWork


def _mirror_synced_records(
    store: LocalStore,
    records: Sequence[Record],
    result: SyncResult,
) -> None:
    for record in records:
        key = store.schema.key_of(record)
        synced = result.records.get(key)
        if synced is None:
            store.upsert(key, record)
        else:
            store.upsert(key, synced.fields, remote_id=synced.id)


def sync_outbound_shipments(
    *,
    sources: SheetValuesSource,
    store: RemoteStore | None = None,
) -> SyncResult:
    """Reconcile swag request sheet rows into the outbound shipments table."""

    shipments = [record for values in sources() for record in parse_swag_sheet(values)]
    log.info(f"Starting outbound shipment sync: derived={len(shipments)}")
    return sync_records(shipments, store=store or build_airtable_store(OUTBOUND_SHIPMENT))


def sync_inbound_shipments(
    *,
    tracking_lookup: TrackingStatusLookup[TrackingStatus],
    store: RemoteStore | None = None,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
    tracking: TrackingConfig | None = None,
) -> SyncResult:
    """Expand every inbound shipment with its tracking status, reconcile, then mirror it."""

    effective_store = store or build_airtable_store(INBOUND_SHIPMENT)
    effective_uow = _mirror_unit_of_work(unit_of_work_factory)
    effective_tracking = tracking or get_tracking_config()

    listing = effective_store.list_records()
    shipments: list[Record] = []
    for row in listing:
        carrier = row.fields.get("carrier")
        tracking_number = row.fields.get("tracking_number")
        if not carrier or not tracking_number:
            log.debug(f"Skipping blank inbound shipment {row.id}")
            continue
        try:
            status = tracking_lookup(carrier=str(carrier), tracking_number=str(tracking_number))
        except ExternalServiceError as exc:
            log.warning(f"No tracking status for {carrier} {tracking_number}: {exc}")
            continue
        shipments.append(expand_inbound_shipment(row.fields, status, tracking=effective_tracking))

    result = sync_records(shipments, store=effective_store, listing=listing)
    with effective_uow() as uow:
        _mirror_synced_records(uow.stores.inbound_shipments, shipments, result)
        uow.commit()
    return result


def sync_auth_logins(
    *,
    directory: UserDirectory[Auth0User] | None = None,
    company_domains: Mapping[str, str] | None = None,
    store: RemoteStore | None = None,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
) -> SyncResult:
    """Reconcile identity provider users into the auth logins table and the mirror."""

    if directory is None:
        config = get_auth0_config(cache_predicate=should_cache_users_page)
        directory = Auth0UserDirectory(config=config)
        company_domains = company_domains or config.company_domains
    domains = DEFAULT_COMPANY_DOMAINS if company_domains is None else company_domains
    effective_uow = _mirror_unit_of_work(unit_of_work_factory)

    logins = [to_auth_login(user, company_domains=domains) for user in directory.list_users()]
    log.info(f"Starting auth login sync: derived={len(logins)}")
    result = sync_records(logins, store=store or build_airtable_store(AUTH_LOGIN))
    with effective_uow() as uow:
        _mirror_synced_records(uow.stores.auth_logins, logins, result)
        uow.commit()
    return result


def record_swag_stock(
    *,
    item: str,
    size: str,
    current_stock: float,
    barcode: str = "",
    store: RemoteStore | None = None,
) -> SyncResult:
    """Reconcile one inventory count into the swag inventory table."""

    record = SWAG_INVENTORY_ITEM.complete(
        {"item": item, "size": size, "current_stock": current_stock, "barcode": barcode}
    )
    return sync_records([record], store=store or build_airtable_store(SWAG_INVENTORY_ITEM))


def mirror_swag_inventory(
    *,
    store: RemoteStore | None = None,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
) -> int:
    """Copy the swag inventory table into the local mirror; returns rows mirrored."""

    effective_store = store or build_airtable_store(SWAG_INVENTORY_ITEM)
    effective_uow = _mirror_unit_of_work(unit_of_work_factory)

    mirrored = 0
    with effective_uow() as uow:
        local = uow.stores.swag_inventory_items
        for record in effective_store.list_records():
            try:
                key = local.schema.require_key(record.fields)
            except SchemaMismatchError as exc:
                log.warning(f"Skipping inventory record {record.id}: {exc}")
                continue
            local.upsert(key, record.fields, remote_id=record.id)
            mirrored += 1
        uow.commit()
    log.info(f"Mirrored {mirrored} swag inventory items")
    return mirrored


def handle_github_push(
    payload: str | Mapping[str, object],
    *,
    event_name: str,
    rules: PushFilterRules | None = None,
) -> PushDecision:
    """Parse a push webhook body and decide whether it is one we act on."""

    raw = json.loads(payload) if isinstance(payload, str) else payload
    event = GitHubPushEvent.model_validate(raw)
    effective_rules = rules or get_push_filter_rules()
    return evaluate_push_event(event, event_name=event_name, rules=effective_rules)
