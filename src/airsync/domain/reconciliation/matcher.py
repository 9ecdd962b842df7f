"""Find the remote record that corresponds to a freshly derived record.

Matching is exact equality on every natural-key field declared by the entity
schema. The remote identifier never takes part: a derived record does not
carry one until after its first creation.

Duplicate natural keys in the remote listing are not expected but are not
guarded against server-side either. The first record in listing order wins;
later duplicates are reported and otherwise ignored.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from airsync.domain.records import FieldValue, NaturalKey, RemoteRecord
    from airsync.domain.schema import EntitySchema

log = getLogger(__name__)


def find_match(
    derived: Mapping[str, FieldValue],
    remote_listing: Iterable[RemoteRecord],
    *,
    schema: EntitySchema,
) -> RemoteRecord | None:
    """Return the first remote record whose natural key equals ``derived``'s."""

    key = schema.key_of(derived)
    for record in remote_listing:
        if schema.key_of(record.fields) == key:
            return record
    return None


@dataclass(slots=True)
class RemoteIndex:
    """Natural-key lookup over one listing snapshot, built once per batch."""

    schema: EntitySchema
    _by_key: dict[NaturalKey, RemoteRecord] = field(
        default_factory=dict["NaturalKey", "RemoteRecord"]
    )
    duplicates: list[RemoteRecord] = field(default_factory=list["RemoteRecord"])

    @classmethod
    def build(cls, listing: Iterable[RemoteRecord], *, schema: EntitySchema) -> RemoteIndex:
        index = cls(schema=schema)
        for record in listing:
            key = schema.key_of(record.fields)
            kept = index._by_key.get(key)
            if kept is not None:
                log.warning(
                    "Duplicate %s key %s: record %s shadowed by %s",
                    schema.name,
                    key,
                    record.id,
                    kept.id,
                )
                index.duplicates.append(record)
                continue
            index._by_key[key] = record
        return index

    def __len__(self) -> int:
        return len(self._by_key)

    def lookup(self, key: NaturalKey) -> RemoteRecord | None:
        return self._by_key.get(key)

    def find(self, derived: Mapping[str, FieldValue]) -> RemoteRecord | None:
        return self.lookup(self.schema.key_of(derived))
