"""
Result — F<A> = kungfu Result[A, E].
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from strata._types import Result, Ok, Error

# ═══════════════════════════════════════════════════════════════════════════════
# ResultMonad
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class ResultMonad[E]:
    """
    Sequencing + ErrorSignal over plain Result values.

    Chain short-circuits: an Error is returned as-is and f never runs.
    """

    @property
    def name(self) -> str:
        return "Result"

    def pure[A](self, value: A) -> Result[A, E]:
        return Ok(value)

    def chain[A, B](
        self,
        m: Result[A, E],
        f: Callable[[A], Result[B, E]],
    ) -> Result[B, E]:
        match m:
            case Ok(value):
                return f(value)
            case Error(_):
                return m

    def raise_error[A](self, error: E) -> Result[A, E]:
        return Error(error)

    def handle_error[A](
        self,
        m: Result[A, E],
        handler: Callable[[E], Result[A, E]],
    ) -> Result[A, E]:
        match m:
            case Ok(_):
                return m
            case Error(error):
                return handler(error)


def result[E]() -> ResultMonad[E]:
    return ResultMonad()


def run_result[A, E](m: Result[A, E]) -> Result[A, E]:
    """Peel a Result computation. It already is the outcome."""
    return m


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = ("ResultMonad", "result", "run_result")
