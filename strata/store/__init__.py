"""
Store — a key-value store written against an effect context.

    from strata import store as KV, monads as M

    m = M.result_t(M.state())
    kv = KV.StrictStateStore(m)
    M.run_state(M.run_result_t(KV.verify(m, kv)), {})
    # ({"key": "value"}, Ok(True))
"""

from __future__ import annotations

from strata.store._types import (
    StoreState,
    Store,
    StoreErrorKind,
    StoreError,
)
from strata.store._dict import DictStore
from strata.store._state import StateStore, StrictStateStore
from strata.store._logic import verify, put_many, snapshot, copy_key, rename

__all__ = (
    "StoreState",
    "Store",
    "StoreErrorKind",
    "StoreError",
    "DictStore",
    "StateStore",
    "StrictStateStore",
    "verify",
    "put_many",
    "snapshot",
    "copy_key",
    "rename",
)
