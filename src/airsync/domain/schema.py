"""Declarative per-entity field classification.

An :class:`EntitySchema` is static configuration: which fields an entity has,
which of them form the natural key, and how the reconciler treats each field
when merging a freshly derived record into an existing remote one.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING

from .records import FieldType, is_zero, zero_value

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from .records import FieldValue, NaturalKey, Record


class FieldPolicy(StrEnum):
    """How the reconciler resolves one field."""

    FILL_IF_BLANK = "fill_if_blank"
    REMOTE_OWNED = "remote_owned"
    ALWAYS_OVERWRITE = "always_overwrite"


class SchemaMismatchError(ValueError):
    """Raised when a record does not satisfy its entity schema."""


@dataclass(frozen=True, slots=True)
class FieldSpec:
    name: str
    type: FieldType = FieldType.STRING
    policy: FieldPolicy = FieldPolicy.ALWAYS_OVERWRITE
    read_only: bool = False  # computed by the remote store, never written


@dataclass(frozen=True, slots=True)
class EntitySchema:
    """Field declarations and natural key for one entity type."""

    name: str
    key_fields: tuple[str, ...]
    fields: Mapping[str, FieldSpec] = field(default_factory=dict["str", "FieldSpec"])

    def __post_init__(self) -> None:
        if not 1 <= len(self.key_fields) <= 2:
            raise ValueError(f"{self.name}: natural key must have one or two fields")
        unknown = [name for name in self.key_fields if name not in self.fields]
        if unknown:
            raise ValueError(f"{self.name}: key fields not declared: {', '.join(unknown)}")
        if any(self.fields[name].type is FieldType.STRING_LIST for name in self.key_fields):
            raise ValueError(f"{self.name}: list fields cannot be part of the natural key")
        for name, spec in self.fields.items():
            if name != spec.name:
                raise ValueError(f"{self.name}: field {name!r} declared as {spec.name!r}")

    @classmethod
    def declare(
        cls,
        name: str,
        *,
        key: tuple[str, ...],
        fields: Iterable[FieldSpec],
    ) -> EntitySchema:
        return cls(name=name, key_fields=key, fields={spec.name: spec for spec in fields})

    def blank(self) -> Record:
        return {name: zero_value(spec.type) for name, spec in self.fields.items()}

    def complete(self, record: Mapping[str, FieldValue]) -> Record:
        """Return a copy of ``record`` with every declared field present."""

        unknown = sorted(set(record) - set(self.fields))
        if unknown:
            raise SchemaMismatchError(f"{self.name}: unknown fields {', '.join(unknown)}")
        completed = self.blank()
        completed.update(record)
        return completed

    def key_of(self, record: Mapping[str, FieldValue]) -> NaturalKey:
        return tuple(
            record.get(name, zero_value(self.fields[name].type)) for name in self.key_fields
        )

    def require_key(self, record: Mapping[str, FieldValue]) -> NaturalKey:
        """Return the natural key, raising if any key field is missing or blank."""

        missing = [
            name
            for name in self.key_fields
            if name not in record or is_zero(self.fields[name].type, record[name])
        ]
        if missing:
            raise SchemaMismatchError(
                f"{self.name}: derived record is missing key fields {', '.join(missing)}"
            )
        return self.key_of(record)

    def names_with_policy(self, policy: FieldPolicy) -> tuple[str, ...]:
        return tuple(name for name, spec in self.fields.items() if spec.policy is policy)

    @property
    def writable_fields(self) -> tuple[str, ...]:
        return tuple(name for name, spec in self.fields.items() if not spec.read_only)
