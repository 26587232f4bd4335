"""
Result layer — F<A> = inner F<Result[A, E]>.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from strata._types import Eff, Result, Ok, Error
from strata.capability import Sequencing, StateAccess, provides, require
from strata.monads._lift import LiftedStateAccess

# ═══════════════════════════════════════════════════════════════════════════════
# ResultT — Sequencing + ErrorSignal over any inner representation
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class ResultT[E]:
    """
    Errors as values inside the inner representation.

    The layer models failure itself, so raise_error never touches inner.
    """

    inner: Sequencing

    @property
    def name(self) -> str:
        return f"ResultT[{self.inner.name}]"

    def pure[A](self, value: A) -> Eff[Result[A, E]]:
        return self.inner.pure(Ok(value))

    def chain[A, B](
        self,
        m: Eff[Result[A, E]],
        f: Callable[[A], Eff[Result[B, E]]],
    ) -> Eff[Result[B, E]]:
        inner = self.inner

        def step(outcome: Result[A, E]) -> Eff[Result[B, E]]:
            match outcome:
                case Ok(value):
                    return f(value)
                case Error(error):
                    return inner.pure(Error(error))

        return inner.chain(m, step)

    def lift[A](self, m: Eff[A]) -> Eff[Result[A, E]]:
        inner = self.inner
        return inner.chain(m, lambda a: inner.pure(Ok(a)))

    def raise_error[A](self, error: E) -> Eff[Result[A, E]]:
        return self.inner.pure(Error(error))

    def handle_error[A](
        self,
        m: Eff[Result[A, E]],
        handler: Callable[[E], Eff[Result[A, E]]],
    ) -> Eff[Result[A, E]]:
        inner = self.inner

        def step(outcome: Result[A, E]) -> Eff[Result[A, E]]:
            match outcome:
                case Ok(_):
                    return inner.pure(outcome)
                case Error(error):
                    return handler(error)

        return inner.chain(m, step)


@dataclass(frozen=True, slots=True)
class ResultTWithState[E](LiftedStateAccess, ResultT[E]):
    """ResultT over a representation that threads state."""


# ═══════════════════════════════════════════════════════════════════════════════
# Constructor + peeling
# ═══════════════════════════════════════════════════════════════════════════════


def result_t[E](inner: Sequencing) -> ResultT[E]:
    """
    Add a Result layer over inner.

    StateAccess is available exactly when inner provides it.

    Example:
        m = result_t(state())      # peels to (S, Result[A, E])
    """
    require(inner, Sequencing)
    if provides(inner, StateAccess):
        return ResultTWithState(inner)
    return ResultT(inner)


def run_result_t[A, E](m: Eff[Result[A, E]]) -> Eff[Result[A, E]]:
    """Peel the Result layer. The value already is the inner computation."""
    return m


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = ("ResultT", "ResultTWithState", "result_t", "run_result_t")
