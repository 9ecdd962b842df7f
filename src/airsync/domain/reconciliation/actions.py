"""Write decisions produced by the reconciler."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from airsync.domain.records import Record


class ActionKind(StrEnum):
    CREATE = "create"
    NOOP = "noop"
    UPDATE = "update"


@dataclass(frozen=True, slots=True, kw_only=True)
class Create:
    """No remote record matched; create one from the derived record as-is."""

    fields: Record
    kind: Literal[ActionKind.CREATE] = ActionKind.CREATE


@dataclass(frozen=True, slots=True, kw_only=True)
class NoOp:
    """The merged record equals the remote one; nothing to write."""

    record_id: str
    kind: Literal[ActionKind.NOOP] = ActionKind.NOOP


@dataclass(frozen=True, slots=True, kw_only=True)
class Update:
    """Overwrite the remote record ``record_id`` with the merged fields."""

    record_id: str
    fields: Record
    kind: Literal[ActionKind.UPDATE] = ActionKind.UPDATE


type SyncAction = Create | NoOp | Update
