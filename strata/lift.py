"""
Lift — bringing foreign values into a representation.

from_awaitable uses combinators.lift for the exception boundary and lifts
the async step through every layer stacked on the AsyncResult base.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable

from combinators import lift as L

from strata._types import Eff, Result, Ok, Error, Option, Some, LazyCoroResult
from strata.capability import Sequencing, ErrorSignal, requires
from strata.monads import AsyncResultMonad

# ═══════════════════════════════════════════════════════════════════════════════
# Values already computed
# ═══════════════════════════════════════════════════════════════════════════════


@requires(Sequencing, ErrorSignal)
def from_result[A, E](m: Sequencing, outcome: Result[A, E]) -> Eff[A]:
    """Ok becomes pure, Error is raised in m."""
    errors: ErrorSignal[E] = m  # type: ignore[assignment]
    match outcome:
        case Ok(value):
            return m.pure(value)
        case Error(error):
            return errors.raise_error(error)


@requires(Sequencing, ErrorSignal)
def from_option[A, E](m: Sequencing, found: Option[A], missing: E) -> Eff[A]:
    """Some becomes pure, absence raises `missing`."""
    errors: ErrorSignal[E] = m  # type: ignore[assignment]
    match found:
        case Some(value):
            return m.pure(value)
        case _:
            return errors.raise_error(missing)


# ═══════════════════════════════════════════════════════════════════════════════
# Async callables
# ═══════════════════════════════════════════════════════════════════════════════


def _embed[T, E](m: Sequencing, step: LazyCoroResult[T, E], top: str) -> Eff[T]:
    if isinstance(m, AsyncResultMonad):
        return step
    inner = getattr(m, "inner", None)
    if inner is None:
        raise TypeError(f"{top} cannot suspend: no AsyncResult at its base")
    return m.lift(_embed(inner, step, top))  # type: ignore[attr-defined]


@requires(Sequencing, ErrorSignal)
def from_awaitable[T, E](
    m: Sequencing,
    awaitable_fn: Callable[[], Awaitable[T]],
    on_error: Callable[[Exception], E],
) -> Eff[T]:
    """
    Run an async callable as one step of m.

    m must have AsyncResult at its base; every layer above it lifts the
    step. Exceptions become errors of the AsyncResult base via on_error,
    so they short-circuit the whole stack and nothing escapes a run.

    Example:
        m = state_t(async_result())
        fetched = from_awaitable(m, lambda: client.fetch(key), on_error=FetchError.of)
        m.chain(fetched, lambda raw: m.pure(raw.decode()))

    Raises:
        TypeError: no AsyncResult below m.
    """
    return _embed(m, L.catching_async(awaitable_fn, on_error=on_error), m.name)


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = ("from_result", "from_option", "from_awaitable")
