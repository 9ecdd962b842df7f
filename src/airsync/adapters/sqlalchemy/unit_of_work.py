"""SQLAlchemy-backed unit of work for the local mirror."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from airsync.config.storage import get_database_config
from airsync.domain.entities import AUTH_LOGIN, INBOUND_SHIPMENT, SWAG_INVENTORY_ITEM
from airsync.domain.ports.local_store import MirrorStores

from .mappings import (
    auth_login_table,
    create_all_tables,
    inbound_shipment_table,
    swag_inventory_item_table,
)
from .repositories import SqlAlchemyLocalStore

if TYPE_CHECKING:
    from types import TracebackType

    from sqlalchemy.engine import Engine


class StartupError(RuntimeError):
    """Raised when a SQLAlchemy unit of work is used before initialisation."""


@dataclass(slots=True)
class _AdapterState:
    _engine: Engine | None = None
    _session_factory: sessionmaker[Session] | None = None

    @property
    def engine(self) -> Engine | None:
        return self._engine

    @engine.setter
    def engine(self, value: Engine | None) -> None:
        self._session_factory = None
        self._engine = value

    @property
    def session_factory(self) -> sessionmaker[Session]:
        if self._engine is None:
            raise StartupError(
                "SQLAlchemy adapter not initialised. Call airsync.adapters.sqlalchemy."
                "unit_of_work.startup() before requesting a unit of work."
            )
        if self._session_factory is None:
            self._session_factory = sessionmaker(bind=self._engine, expire_on_commit=False)
        return self._session_factory


_STATE = _AdapterState()


def startup(
    *,
    engine: Engine | None = None,
    database_uri: str | None = None,
    force: bool = False,
) -> None:
    """Initialise the engine, create the mirror tables and the session factory."""

    if _STATE.engine is not None and not force:
        raise StartupError(
            "SQLAlchemy adapter already initialised. Pass force=True to reconfigure."
        )

    if engine is None:
        database = get_database_config()
        engine = create_engine(database_uri or database.uri, echo=database.echo, future=True)
    create_all_tables(engine)
    _STATE.engine = engine


def is_started() -> bool:
    return _STATE.engine is not None


def shutdown() -> None:
    """Dispose the managed engine and reset state (primarily for tests)."""

    if _STATE.engine is not None:
        _STATE.engine.dispose()
    _STATE.engine = None


class BaseSqlAlchemyUnitOfWork[TStores](ABC):
    """Session lifecycle shared by the mirror units of work."""

    def __init__(self) -> None:
        self.session_factory: sessionmaker[Session] = _STATE.session_factory
        self._session: Session | None = None

    @abstractmethod
    def _build_stores(self, session: Session) -> TStores: ...

    def __enter__(self) -> BaseSqlAlchemyUnitOfWork[TStores]:
        self.session = self.session_factory()
        self._stores = self._build_stores(self.session)
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> Literal[False]:
        if exc_type is not None:
            self.rollback()
        self.session.close()
        self.session = None
        return False

    def commit(self) -> None:
        self.session.commit()

    def rollback(self) -> None:
        self.session.rollback()

    @property
    def stores(self) -> TStores:
        if self._session is None:
            raise StartupError("Unit of work session not initialised")
        return self._stores

    @property
    def session(self) -> Session:
        if self._session is None:
            raise StartupError("Unit of work session not initialised")
        return self._session

    @session.setter
    def session(self, session: Session | None) -> None:
        if self._session is not None and session is not None:
            raise StartupError("Unit of work session already initialised")
        self._session = session


class SqlAlchemyMirrorUnitOfWork(BaseSqlAlchemyUnitOfWork[MirrorStores]):
    def _build_stores(self, session: Session) -> MirrorStores:
        return MirrorStores(
            inbound_shipments=SqlAlchemyLocalStore(
                session, INBOUND_SHIPMENT, inbound_shipment_table
            ),
            swag_inventory_items=SqlAlchemyLocalStore(
                session, SWAG_INVENTORY_ITEM, swag_inventory_item_table
            ),
            auth_logins=SqlAlchemyLocalStore(session, AUTH_LOGIN, auth_login_table),
        )


if TYPE_CHECKING:
    from airsync.domain.ports.local_store import MirrorUnitOfWork

    _uow_check: MirrorUnitOfWork = SqlAlchemyMirrorUnitOfWork()
