"""
State stores — the mapping lives in the representation's threaded state.
"""

from __future__ import annotations

from strata._types import Eff, Unit, Option, Some, Nothing
from strata.capability import (
    Sequencing,
    StateAccess,
    ErrorSignal,
    require,
    inspect,
)
from strata.store._types import StoreState, StoreError

# ═══════════════════════════════════════════════════════════════════════════════
# Helpers
# ═══════════════════════════════════════════════════════════════════════════════


def _lookup(state: StoreState, key: str) -> Option[str]:
    if key in state:
        return Some(state[key])
    return Nothing()


def _without(state: StoreState, key: str) -> StoreState:
    return {k: v for k, v in state.items() if k != key}


# ═══════════════════════════════════════════════════════════════════════════════
# StateStore — Sequencing + StateAccess
# ═══════════════════════════════════════════════════════════════════════════════


class StateStore:
    """
    Store over StateAccess[dict[str, str]].

    Updates build a new dict; the mapping from an earlier step is never
    mutated. Deleting an absent key is a no-op.

    Example:
        m = state()
        run_state(StateStore(m).put("k", "v"), {})  # ({"k": "v"}, None)
    """

    __slots__ = ("_m",)

    capabilities: tuple[type, ...] = (Sequencing, StateAccess)

    def __init__(self, m: Sequencing) -> None:
        require(m, *self.capabilities)
        self._m = m

    @property
    def m(self) -> Sequencing:
        return self._m

    @property
    def _state(self) -> StateAccess[StoreState]:
        return self._m  # type: ignore[return-value]

    def put(self, key: str, value: str) -> Eff[Unit]:
        return self._state.modify(lambda s: {**s, key: value})

    def get(self, key: str) -> Eff[Option[str]]:
        return inspect(self._m, lambda s: _lookup(s, key))

    def delete(self, key: str) -> Eff[Unit]:
        return self._state.modify(lambda s: _without(s, key))


# ═══════════════════════════════════════════════════════════════════════════════
# StrictStateStore — + ErrorSignal[StoreError]
# ═══════════════════════════════════════════════════════════════════════════════


class StrictStateStore(StateStore):
    """
    StateStore that reports misuse as StoreError values.

    delete of an absent key raises MISSING_KEY and short-circuits
    everything chained after it.
    """

    __slots__ = ()

    capabilities = (Sequencing, StateAccess, ErrorSignal)

    @property
    def _errors(self) -> ErrorSignal[StoreError]:
        return self._m  # type: ignore[return-value]

    def delete(self, key: str) -> Eff[Unit]:
        def checked(state: StoreState) -> Eff[Unit]:
            if key not in state:
                return self._errors.raise_error(StoreError.missing(key))
            return self._state.set_state(_without(state, key))

        return self._m.chain(self._state.get_state(), checked)

    def get_or_raise(self, key: str) -> Eff[str]:
        """Value under key, or MISSING_KEY."""

        def found(state: StoreState) -> Eff[str]:
            if key not in state:
                return self._errors.raise_error(StoreError.missing(key))
            return self._m.pure(state[key])

        return self._m.chain(self._state.get_state(), found)

    def insert(self, key: str, value: str) -> Eff[Unit]:
        """put that refuses to overwrite: KEY_EXISTS if key is present."""

        def fresh(state: StoreState) -> Eff[Unit]:
            if key in state:
                return self._errors.raise_error(StoreError.exists(key))
            return self._state.set_state({**state, key: value})

        return self._m.chain(self._state.get_state(), fresh)


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = ("StateStore", "StrictStateStore")
