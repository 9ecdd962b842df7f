"""Reconciliation core: match derived records to remote ones and merge fields.

Flow for one batch:
1) list the remote table once and index it by natural key
2) match each derived record against the index
3) merge fields per the entity's declared policy
4) issue at most one create or update per record
"""

from __future__ import annotations

from .actions import ActionKind, Create, NoOp, SyncAction, Update
from .matcher import RemoteIndex, find_match
from .reconciler import merge, reconcile
from .sync import RecordFailure, SyncResult, sync_records

__all__ = [
    "ActionKind",
    "Create",
    "NoOp",
    "RecordFailure",
    "RemoteIndex",
    "SyncAction",
    "SyncResult",
    "Update",
    "find_match",
    "merge",
    "reconcile",
    "sync_records",
]
