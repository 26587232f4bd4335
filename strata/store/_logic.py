"""
Generic store logic — written once, run in any representation.

Each function declares the capabilities it needs with @requires and only
talks to the store through its three operations.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from strata._types import Eff, Unit, Option, Some
from strata.capability import (
    Sequencing,
    ErrorSignal,
    requires,
    fmap,
    then,
    traverse,
)
from strata.store._types import Store
from strata.store._state import StrictStateStore

# ═══════════════════════════════════════════════════════════════════════════════
# Helpers
# ═══════════════════════════════════════════════════════════════════════════════


def _same_context(m: Sequencing, store: Store) -> None:
    if store.m != m:
        raise TypeError(
            f"store runs in {store.m.name}, logic was given {m.name}: "
            "one computation cannot mix effect contexts"
        )


def _holds(found: Option[str], expected: str) -> bool:
    match found:
        case Some(value):
            return value == expected
        case _:
            return False


# ═══════════════════════════════════════════════════════════════════════════════
# verify() — put then get
# ═══════════════════════════════════════════════════════════════════════════════


@requires(Sequencing)
def verify(m: Sequencing, store: Store) -> Eff[bool]:
    """
    Store "value" under "key", read it back, compare.

    True in every representation when run against an empty store.

    Example:
        s = S.stack(M.state()).build()
        s.run(verify(s.m, StateStore(s.m)), {})  # ({"key": "value"}, True)
    """
    _same_context(m, store)
    return m.chain(
        store.put("key", "value"),
        lambda _: fmap(m, store.get("key"), lambda found: _holds(found, "value")),
    )


# ═══════════════════════════════════════════════════════════════════════════════
# Bulk and copy helpers
# ═══════════════════════════════════════════════════════════════════════════════


@requires(Sequencing)
def put_many(m: Sequencing, store: Store, items: Mapping[str, str]) -> Eff[Unit]:
    """Put every pair, in mapping order."""
    _same_context(m, store)
    written = traverse(m, items.items(), lambda kv: store.put(*kv))
    return fmap(m, written, lambda _: None)


@requires(Sequencing)
def snapshot(m: Sequencing, store: Store, keys: Iterable[str]) -> Eff[dict[str, str]]:
    """Present keys and their values. Absent keys are left out."""
    _same_context(m, store)
    keys = list(keys)

    def collect(found: list[Option[str]]) -> dict[str, str]:
        out: dict[str, str] = {}
        for key, value in zip(keys, found):
            match value:
                case Some(v):
                    out[key] = v
        return out

    return fmap(m, traverse(m, keys, store.get), collect)


@requires(Sequencing)
def copy_key(m: Sequencing, store: Store, src: str, dst: str) -> Eff[bool]:
    """Copy src to dst. False (and nothing written) if src is absent."""
    _same_context(m, store)

    def write(found: Option[str]) -> Eff[bool]:
        match found:
            case Some(value):
                return fmap(m, store.put(dst, value), lambda _: True)
            case _:
                return m.pure(False)

    return m.chain(store.get(src), write)


@requires(Sequencing, ErrorSignal)
def rename(m: Sequencing, store: StrictStateStore, src: str, dst: str) -> Eff[Unit]:
    """Move src to dst. MISSING_KEY if src is absent, KEY_EXISTS if dst is taken."""
    _same_context(m, store)
    return m.chain(
        store.get_or_raise(src),
        lambda value: then(m, store.insert(dst, value), store.delete(src)),
    )


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = ("verify", "put_many", "snapshot", "copy_key", "rename")
