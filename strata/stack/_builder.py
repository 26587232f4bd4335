"""
Stack builder — fluent API.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from loguru import logger

from strata._types import Eff
from strata.capability import Sequencing, StateAccess, provides, require
from strata.monads import (
    result_t,
    state_t,
    option_t,
    run_state_t,
)
from strata.stack._types import LayerKind, Peel, Stack

logger = logger.bind(component="strata.stack")

# ═══════════════════════════════════════════════════════════════════════════════
# Peels
# ═══════════════════════════════════════════════════════════════════════════════


def _peel_state(m: Eff[Any], initial_state: Any) -> Any:
    return run_state_t(m, initial_state)


def _peel_nothing(m: Eff[Any], _initial_state: Any) -> Any:
    return m


_WRAP = {
    LayerKind.ERRORS: result_t,
    LayerKind.STATE: state_t,
    LayerKind.OPTION: option_t,
}

# ═══════════════════════════════════════════════════════════════════════════════
# StackBuilder
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class StackBuilder:
    """
    Fluent stack builder. Each call adds a layer on the outside.

    Example:
        s = stack(M.result()).with_state().build()   # StateT[Result]
        s.run(program(s.m), {})                      # Result[(S, A), E]
    """

    _base: Sequencing
    _layers: tuple[LayerKind, ...]

    def layer(self, kind: LayerKind) -> StackBuilder:
        return StackBuilder(_base=self._base, _layers=(*self._layers, kind))

    def with_errors(self) -> StackBuilder:
        """Add a Result layer."""
        return self.layer(LayerKind.ERRORS)

    def with_state(self) -> StackBuilder:
        """Add a state-threading layer."""
        return self.layer(LayerKind.STATE)

    def with_option(self) -> StackBuilder:
        """Add an Option layer."""
        return self.layer(LayerKind.OPTION)

    def build(self) -> Stack:
        """
        Build the stack.

        Raises:
            ValueError: more than one state layer. A single initial state
                cannot seed two independent threads.
        """
        # layers other than StateT peel to themselves, so a base that can
        # reach state holds a Threaded value at its outside
        base_stateful = provides(self._base, StateAccess)
        state_layers = self._layers.count(LayerKind.STATE) + int(base_stateful)
        if state_layers > 1:
            raise ValueError("a stack threads at most one state layer")

        m = self._base
        peels: list[Peel] = [_peel_state if base_stateful else _peel_nothing]
        for kind in self._layers:
            m = _WRAP[kind](m)
            peels.insert(0, _peel_state if kind is LayerKind.STATE else _peel_nothing)

        logger.debug("built stack {}", m.name)
        return Stack(m=m, peels=tuple(peels), stateful=state_layers == 1)


# ═══════════════════════════════════════════════════════════════════════════════
# stack() — Entry Point
# ═══════════════════════════════════════════════════════════════════════════════


def stack(base: Sequencing) -> StackBuilder:
    """
    Start a stack from a base representation.

    Example:
        from strata import stack as S, monads as M

        s = S.stack(M.state()).with_errors().build()   # ResultT[State]
        final_state, outcome = s.run(verify(s.m, StrictStateStore(s.m)), {})
    """
    require(base, Sequencing)
    return StackBuilder(_base=base, _layers=())


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = ("StackBuilder", "stack")
