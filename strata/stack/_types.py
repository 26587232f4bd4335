"""
Stack types.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any

from loguru import logger

from strata._types import Eff
from strata.capability import Sequencing, StateAccess, ErrorSignal, provides

logger = logger.bind(component="strata.stack")

# ═══════════════════════════════════════════════════════════════════════════════
# Layer Kinds
# ═══════════════════════════════════════════════════════════════════════════════


class LayerKind(Enum):
    """Layers a stack can add over its base."""

    ERRORS = auto()
    STATE = auto()
    OPTION = auto()


type Peel = Callable[[Eff[Any], Any], Any]
"""Peels one layer: (computation, initial state) -> inner computation."""


class _Unset:
    __slots__ = ()

    def __repr__(self) -> str:
        return "UNSET"


UNSET: Any = _Unset()

# ═══════════════════════════════════════════════════════════════════════════════
# Stack — built capability instance + composed peel
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class Stack:
    """
    A composed representation ready to run programs.

    Peels run outermost layer first. Only state layers consume
    initial_state; every run threads its own copy.
    """

    m: Sequencing
    peels: tuple[Peel, ...]
    stateful: bool

    @property
    def name(self) -> str:
        return self.m.name

    @property
    def capabilities(self) -> tuple[str, ...]:
        return tuple(
            cap.__name__
            for cap in (Sequencing, StateAccess, ErrorSignal)
            if provides(self.m, cap)
        )

    def run(self, computation: Eff[Any], initial_state: Any = UNSET) -> Any:
        """
        Peel every layer and return the final outcome.

        Raises:
            ValueError: initial_state missing for a stateful stack, or
                given to a stateless one.
        """
        if self.stateful and initial_state is UNSET:
            raise ValueError(f"{self.name} threads state: initial_state is required")
        if not self.stateful and initial_state is not UNSET:
            raise ValueError(f"{self.name} has no state layer to receive initial_state")

        logger.debug("peeling {} ({} layers)", self.name, len(self.peels))
        outcome = computation
        for peel in self.peels:
            outcome = peel(outcome, initial_state)
        return outcome


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = ("LayerKind", "Peel", "UNSET", "Stack")
