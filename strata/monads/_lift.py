"""
Lifting rules — capabilities that pass through an outer layer.

A layer provides `inner` and `lift(inner_step)`. Given that, each rule below
is the whole implementation of a capability for every layer shape: the
operation is performed by the inner representation and lifted once.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol

from strata._types import Eff, Unit

# ═══════════════════════════════════════════════════════════════════════════════
# Layer — what a lifting rule needs from its host
# ═══════════════════════════════════════════════════════════════════════════════


class Layer(Protocol):
    """An outer shape wrapped around an inner representation."""

    @property
    def inner(self) -> object:
        ...

    def lift[A](self, m: Eff[A]) -> Eff[A]:
        """Embed one inner computation as a step of this layer."""
        ...


# ═══════════════════════════════════════════════════════════════════════════════
# StateAccess through a layer
# ═══════════════════════════════════════════════════════════════════════════════


class LiftedStateAccess:
    """StateAccess of the inner representation, seen through this layer."""

    __slots__ = ()

    def get_state[S](self: Layer) -> Eff[S]:
        return self.lift(self.inner.get_state())  # type: ignore[attr-defined]

    def set_state[S](self: Layer, state: S) -> Eff[Unit]:
        return self.lift(self.inner.set_state(state))  # type: ignore[attr-defined]

    def modify[S](self: Layer, f: Callable[[S], S]) -> Eff[Unit]:
        return self.lift(self.inner.modify(f))  # type: ignore[attr-defined]


# ═══════════════════════════════════════════════════════════════════════════════
# ErrorSignal through a layer
# ═══════════════════════════════════════════════════════════════════════════════


class LiftedErrorSignal:
    """
    raise_error of the inner representation, seen through this layer.

    handle_error cannot be lifted blindly: the handler has to restart the
    outer shape, so each host layer defines it.
    """

    __slots__ = ()

    def raise_error[A, E](self: Layer, error: E) -> Eff[A]:
        return self.lift(self.inner.raise_error(error))  # type: ignore[attr-defined]


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = ("Layer", "LiftedStateAccess", "LiftedErrorSignal")
