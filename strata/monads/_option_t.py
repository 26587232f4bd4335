"""
Option layer — F<A> = inner F<Option[A]>.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from strata._types import Eff, Option, Some, Nothing
from strata.capability import Sequencing, StateAccess, provides, require
from strata.monads._lift import LiftedStateAccess

# ═══════════════════════════════════════════════════════════════════════════════
# OptionT — Sequencing + ErrorSignal[None] over any inner representation
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class OptionT:
    """
    Absence inside the inner representation.

    Absence is the only error this layer knows: raise_error drops its
    payload and handlers receive None.
    """

    inner: Sequencing

    @property
    def name(self) -> str:
        return f"OptionT[{self.inner.name}]"

    def pure[A](self, value: A) -> Eff[Option[A]]:
        return self.inner.pure(Some(value))

    def chain[A, B](
        self,
        m: Eff[Option[A]],
        f: Callable[[A], Eff[Option[B]]],
    ) -> Eff[Option[B]]:
        inner = self.inner

        def step(found: Option[A]) -> Eff[Option[B]]:
            match found:
                case Some(value):
                    return f(value)
                case _:
                    return inner.pure(Nothing())

        return inner.chain(m, step)

    def lift[A](self, m: Eff[A]) -> Eff[Option[A]]:
        inner = self.inner
        return inner.chain(m, lambda a: inner.pure(Some(a)))

    def raise_error[A](self, error: object = None) -> Eff[Option[A]]:
        return self.inner.pure(Nothing())

    def handle_error[A](
        self,
        m: Eff[Option[A]],
        handler: Callable[[None], Eff[Option[A]]],
    ) -> Eff[Option[A]]:
        inner = self.inner

        def step(found: Option[A]) -> Eff[Option[A]]:
            match found:
                case Some(_):
                    return inner.pure(found)
                case _:
                    return handler(None)

        return inner.chain(m, step)


@dataclass(frozen=True, slots=True)
class OptionTWithState(LiftedStateAccess, OptionT):
    """OptionT over a representation that threads state."""


def option_t(inner: Sequencing) -> OptionT:
    """Add an Option layer over inner. StateAccess passes through."""
    require(inner, Sequencing)
    if provides(inner, StateAccess):
        return OptionTWithState(inner)
    return OptionT(inner)


def run_option_t[A](m: Eff[Option[A]]) -> Eff[Option[A]]:
    return m


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = ("OptionT", "OptionTWithState", "option_t", "run_option_t")
