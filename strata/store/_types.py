"""
Store types.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Protocol

from strata._types import Eff, Unit, Option
from strata.capability import Sequencing

# ═══════════════════════════════════════════════════════════════════════════════
# Store Protocol — written against an effect context
# ═══════════════════════════════════════════════════════════════════════════════

type StoreState = dict[str, str]
"""Key-value mapping owned by whichever representation carries state."""


class Store(Protocol):
    """
    Key-value store whose every operation is a computation in `m`.

    Implement this for custom backends. All three operations must use the
    same representation: the one exposed as `m`.

    Example:
        class PrefixedStore:
            def __init__(self, inner: Store, prefix: str) -> None:
                self.inner = inner
                self.prefix = prefix

            @property
            def m(self) -> Sequencing:
                return self.inner.m

            def put(self, key: str, value: str):
                return self.inner.put(self.prefix + key, value)

            def get(self, key: str):
                return self.inner.get(self.prefix + key)

            def delete(self, key: str):
                return self.inner.delete(self.prefix + key)
    """

    @property
    def m(self) -> Sequencing:
        """Representation every operation returns into."""
        ...

    def put(self, key: str, value: str) -> Eff[Unit]:
        ...

    def get(self, key: str) -> Eff[Option[str]]:
        ...

    def delete(self, key: str) -> Eff[Unit]:
        ...


# ═══════════════════════════════════════════════════════════════════════════════
# Store Error — domain error carried through ErrorSignal
# ═══════════════════════════════════════════════════════════════════════════════


class StoreErrorKind(Enum):
    """Store error kinds."""

    MISSING_KEY = auto()
    KEY_EXISTS = auto()


@dataclass(frozen=True, slots=True)
class StoreError:
    """Store operation error. Always a value, never raised."""

    kind: StoreErrorKind
    key: str
    message: str

    @classmethod
    def missing(cls, key: str) -> StoreError:
        return cls(StoreErrorKind.MISSING_KEY, key, f"key not found: {key!r}")

    @classmethod
    def exists(cls, key: str) -> StoreError:
        return cls(StoreErrorKind.KEY_EXISTS, key, f"key already present: {key!r}")


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = (
    "StoreState",
    "Store",
    "StoreErrorKind",
    "StoreError",
)
