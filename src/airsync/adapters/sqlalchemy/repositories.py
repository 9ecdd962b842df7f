"""Local mirror stores backed by SQLAlchemy sessions."""

from __future__ import annotations

from typing import TYPE_CHECKING, cast

from sqlalchemy import and_, insert, select, update

from airsync.domain.schema import SchemaMismatchError

if TYPE_CHECKING:
    from collections.abc import Mapping

    from sqlalchemy import ColumnElement, Table
    from sqlalchemy.orm import Session

    from airsync.domain.records import FieldValue, NaturalKey, Record
    from airsync.domain.schema import EntitySchema


class SqlAlchemyLocalStore:
    """Upserts records of one entity into its mirror table, keyed by natural key."""

    def __init__(self, session: Session, schema: EntitySchema, table: Table) -> None:
        self.session = session
        self._schema = schema
        self.table = table

    @property
    def schema(self) -> EntitySchema:
        return self._schema

    def upsert(
        self,
        natural_key: NaturalKey,
        fields: Record,
        *,
        remote_id: str | None = None,
    ) -> Record:
        values = self._schema.complete(fields)
        if self._schema.key_of(values) != natural_key:
            raise SchemaMismatchError(
                f"{self._schema.name}: record key {self._schema.key_of(values)} "
                f"does not match {natural_key}"
            )

        existing = self.session.execute(
            select(self.table.c.id, self.table.c.remote_id).where(self._key_clause(natural_key))
        ).one_or_none()
        if existing is None:
            self.session.execute(insert(self.table).values({**values, "remote_id": remote_id}))
        else:
            row_values: dict[str, object] = dict(values)
            # the first remote id recorded for a row sticks
            if existing.remote_id is None and remote_id is not None:
                row_values["remote_id"] = remote_id
            self.session.execute(
                update(self.table).where(self.table.c.id == existing.id).values(row_values)
            )

        stored = self.get(natural_key)
        if stored is None:  # pragma: no cover
            raise RuntimeError(f"{self._schema.name}: upserted row {natural_key} not found")
        return stored

    def get(self, natural_key: NaturalKey) -> Record | None:
        row = (
            self.session.execute(select(self.table).where(self._key_clause(natural_key)))
            .mappings()
            .one_or_none()
        )
        return self._to_record(row) if row is not None else None

    def remote_id_of(self, natural_key: NaturalKey) -> str | None:
        return self.session.execute(
            select(self.table.c.remote_id).where(self._key_clause(natural_key))
        ).scalar_one_or_none()

    def list_all(self) -> list[Record]:
        rows = self.session.execute(select(self.table).order_by(self.table.c.id)).mappings()
        return [self._to_record(row) for row in rows]

    def _key_clause(self, natural_key: NaturalKey) -> ColumnElement[bool]:
        return and_(
            *(
                self.table.c[name] == value
                for name, value in zip(self._schema.key_fields, natural_key, strict=True)
            )
        )

    def _to_record(self, row: Mapping[str, object]) -> Record:
        values = {name: row[name] for name in self._schema.fields if row[name] is not None}
        return self._schema.complete(cast("Mapping[str, FieldValue]", values))
