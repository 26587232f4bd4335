"""
Async result — F<A> = kungfu LazyCoroResult[A, E].

Suspension lives entirely inside the representation: generic logic calls
pure/chain exactly as it does for Identity and never sees an await.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from strata._types import Result, Ok, Error, LazyCoroResult

# ═══════════════════════════════════════════════════════════════════════════════
# AsyncResultMonad
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class AsyncResultMonad[E]:
    """
    Sequencing + ErrorSignal over lazy coroutine results.

    Nothing runs until the computation is awaited, and every await runs it
    again from the start. Steps always execute left to right.
    """

    @property
    def name(self) -> str:
        return "AsyncResult"

    def pure[A](self, value: A) -> LazyCoroResult[A, E]:
        async def _pure() -> Result[A, E]:
            return Ok(value)

        return LazyCoroResult(_pure)

    def chain[A, B](
        self,
        m: LazyCoroResult[A, E],
        f: Callable[[A], LazyCoroResult[B, E]],
    ) -> LazyCoroResult[B, E]:
        async def _chain() -> Result[B, E]:
            first = await m
            match first:
                case Ok(value):
                    return await f(value)
                case Error(error):
                    return Error(error)

        return LazyCoroResult(_chain)

    def raise_error[A](self, error: E) -> LazyCoroResult[A, E]:
        async def _raise() -> Result[A, E]:
            return Error(error)

        return LazyCoroResult(_raise)

    def handle_error[A](
        self,
        m: LazyCoroResult[A, E],
        handler: Callable[[E], LazyCoroResult[A, E]],
    ) -> LazyCoroResult[A, E]:
        async def _handle() -> Result[A, E]:
            outcome = await m
            match outcome:
                case Ok(value):
                    return Ok(value)
                case Error(error):
                    return await handler(error)

        return LazyCoroResult(_handle)


def async_result[E]() -> AsyncResultMonad[E]:
    return AsyncResultMonad()


async def run_async[A, E](m: LazyCoroResult[A, E]) -> Result[A, E]:
    """Peel an async computation by awaiting it."""
    return await m


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = ("AsyncResultMonad", "async_result", "run_async")
