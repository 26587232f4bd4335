"""
Derived operations — written once over the capability protocols.

Representations never re-implement these; anything that satisfies the
protocols gets them for free.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

from strata._types import Eff, Unit, Result, Ok, Error
from strata.capability._types import Sequencing, StateAccess, ErrorSignal
from strata.capability._require import requires

# ═══════════════════════════════════════════════════════════════════════════════
# Sequencing
# ═══════════════════════════════════════════════════════════════════════════════


def fmap[A, B](m: Sequencing, ma: Eff[A], f: Callable[[A], B]) -> Eff[B]:
    """Apply a plain function to the value of a computation."""
    return m.chain(ma, lambda a: m.pure(f(a)))


def then[A, B](m: Sequencing, ma: Eff[A], mb: Eff[B]) -> Eff[B]:
    """Run ma for its effect, then mb."""
    return m.chain(ma, lambda _: mb)


def traverse[A, B](
    m: Sequencing,
    items: Iterable[A],
    f: Callable[[A], Eff[B]],
) -> Eff[list[B]]:
    """
    Run f over items left to right, collecting values.

    Example:
        traverse(m, ["a", "b"], store.get)  # F[list[Option[str]]]
    """
    pool = list(items)

    # balanced halves: running the result nests log2(n) chains deep, not n
    def span(lo: int, hi: int) -> Eff[tuple[B, ...]]:
        if hi - lo == 0:
            return m.pure(())
        if hi - lo == 1:
            return fmap(m, f(pool[lo]), lambda b: (b,))
        mid = (lo + hi) // 2
        return m.chain(
            span(lo, mid),
            lambda left: fmap(m, span(mid, hi), lambda right: left + right),
        )

    return fmap(m, span(0, len(pool)), list)


def sequence[A](m: Sequencing, steps: Iterable[Eff[A]]) -> Eff[list[A]]:
    """Run computations left to right, collecting values."""
    return traverse(m, steps, lambda step: step)


def when(m: Sequencing, condition: bool, step: Eff[Unit]) -> Eff[Unit]:
    """Run step only if condition holds."""
    return step if condition else m.pure(None)


# ═══════════════════════════════════════════════════════════════════════════════
# StateAccess
# ═══════════════════════════════════════════════════════════════════════════════


@requires(Sequencing, StateAccess)
def inspect[S, A](m: Sequencing, f: Callable[[S], A]) -> Eff[A]:
    """Read a projection of the current state."""
    state: StateAccess[S] = m  # type: ignore[assignment]
    return fmap(m, state.get_state(), f)


# ═══════════════════════════════════════════════════════════════════════════════
# ErrorSignal
# ═══════════════════════════════════════════════════════════════════════════════


@requires(Sequencing, ErrorSignal)
def attempt[A, E](m: Sequencing, ma: Eff[A]) -> Eff[Result[A, E]]:
    """Turn a raised error into a Result value, so later steps still run."""
    errors: ErrorSignal[E] = m  # type: ignore[assignment]
    return errors.handle_error(
        fmap(m, ma, Ok),
        lambda e: m.pure(Error(e)),
    )


@requires(Sequencing, ErrorSignal)
def ensure[A, E](
    m: Sequencing,
    ma: Eff[A],
    predicate: Callable[[A], bool],
    error: Callable[[A], E],
) -> Eff[A]:
    """Raise error(value) unless predicate(value) holds."""
    errors: ErrorSignal[E] = m  # type: ignore[assignment]
    return m.chain(
        ma,
        lambda a: m.pure(a) if predicate(a) else errors.raise_error(error(a)),
    )


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = (
    "fmap",
    "then",
    "traverse",
    "sequence",
    "when",
    "inspect",
    "attempt",
    "ensure",
)
