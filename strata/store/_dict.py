"""
Dict store — a mutable dict behind any representation.
"""

from __future__ import annotations

from collections.abc import Mapping

from strata._types import Eff, Unit, Option, Some, Nothing
from strata.capability import Sequencing, require

# ═══════════════════════════════════════════════════════════════════════════════
# DictStore
# ═══════════════════════════════════════════════════════════════════════════════


class DictStore:
    """
    Key-value store over a shared mutable dict. Needs only Sequencing.

    The dict is touched inside a chain step, so lazy representations mutate
    it when run, not when the computation is built. Unlike StateStore, every
    run of every computation sees the same dict.

    Example:
        store = DictStore(identity())
        store.put("key", "value")
        store.get("key")  # Some("value")
    """

    __slots__ = ("_m", "_data")

    def __init__(self, m: Sequencing, data: Mapping[str, str] | None = None) -> None:
        require(m, Sequencing)
        self._m = m
        self._data: dict[str, str] = dict(data or {})

    @property
    def m(self) -> Sequencing:
        return self._m

    @property
    def data(self) -> dict[str, str]:
        """Copy of the current contents."""
        return dict(self._data)

    def put(self, key: str, value: str) -> Eff[Unit]:
        def write(_: Unit) -> Eff[Unit]:
            self._data[key] = value
            return self._m.pure(None)

        return self._m.chain(self._m.pure(None), write)

    def get(self, key: str) -> Eff[Option[str]]:
        def read(_: Unit) -> Eff[Option[str]]:
            if key in self._data:
                return self._m.pure(Some(self._data[key]))
            return self._m.pure(Nothing())

        return self._m.chain(self._m.pure(None), read)

    def delete(self, key: str) -> Eff[Unit]:
        def remove(_: Unit) -> Eff[Unit]:
            self._data.pop(key, None)
            return self._m.pure(None)

        return self._m.chain(self._m.pure(None), remove)


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = ("DictStore",)
