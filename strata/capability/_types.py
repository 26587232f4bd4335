"""
Capability protocols.

A capability is the smallest contract logic may ask of an effect context.
Representations satisfy them structurally; nothing registers anywhere.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol, runtime_checkable

from strata._types import Eff, Unit

# ═══════════════════════════════════════════════════════════════════════════════
# Sequencing — pure + chain
# ═══════════════════════════════════════════════════════════════════════════════


@runtime_checkable
class Sequencing(Protocol):
    """
    Ordered composition of computations.

    Laws (checked by strata.laws, not by the type system):
        chain(pure(x), f)          == f(x)
        chain(m, pure)             == m
        chain(chain(m, f), g)      == chain(m, lambda x: chain(f(x), g))
    """

    @property
    def name(self) -> str:
        """Representation name for diagnostics."""
        ...

    def pure[A](self, value: A) -> Eff[A]:
        """Lift a plain value."""
        ...

    def chain[A, B](self, m: Eff[A], f: Callable[[A], Eff[B]]) -> Eff[B]:
        """Run m, feed its value to f, run the result."""
        ...


# ═══════════════════════════════════════════════════════════════════════════════
# StateAccess — threaded state
# ═══════════════════════════════════════════════════════════════════════════════


@runtime_checkable
class StateAccess[S](Protocol):
    """
    Read and replace the state threaded through one run.

    A modify is visible only to later steps of the same computation.
    """

    def get_state(self) -> Eff[S]:
        ...

    def set_state(self, state: S) -> Eff[Unit]:
        ...

    def modify(self, f: Callable[[S], S]) -> Eff[Unit]:
        ...


# ═══════════════════════════════════════════════════════════════════════════════
# ErrorSignal — short-circuiting failure
# ═══════════════════════════════════════════════════════════════════════════════


@runtime_checkable
class ErrorSignal[E](Protocol):
    """
    Raise a domain error as a value.

    Once raised, later chain steps are never invoked.
    """

    def pure[A](self, value: A) -> Eff[A]:
        ...

    def raise_error[A](self, error: E) -> Eff[A]:
        ...

    def handle_error[A](
        self,
        m: Eff[A],
        handler: Callable[[E], Eff[A]],
    ) -> Eff[A]:
        """Replace a raised error with handler(error). Success passes through."""
        ...


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = (
    "Sequencing",
    "StateAccess",
    "ErrorSignal",
)
