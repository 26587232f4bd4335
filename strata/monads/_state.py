"""
State threading — F<A> = S -> inner F<(S, A)>.

state() is the transformer over Identity, so the plain representation and
every stacked one share a single chain definition.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from strata._types import Eff, Unit, Pair
from strata.capability import Sequencing, ErrorSignal, provides, require
from strata.monads._identity import Identity, identity
from strata.monads._lift import LiftedErrorSignal

# ═══════════════════════════════════════════════════════════════════════════════
# Threaded — the computation value
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class Threaded[S, A]:
    """
    A state-threaded computation: waits for an initial state.

    Holds no state itself, so one value can be run any number of times
    without the runs seeing each other.
    """

    step: Callable[[S], Eff[Pair[S, A]]]


# ═══════════════════════════════════════════════════════════════════════════════
# StateT — Sequencing + StateAccess over any inner representation
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class StateT[S]:
    inner: Sequencing

    @property
    def name(self) -> str:
        if isinstance(self.inner, Identity):
            return "State"
        return f"StateT[{self.inner.name}]"

    def pure[A](self, value: A) -> Threaded[S, A]:
        inner = self.inner
        return Threaded(lambda s: inner.pure((s, value)))

    def chain[A, B](
        self,
        m: Threaded[S, A],
        f: Callable[[A], Threaded[S, B]],
    ) -> Threaded[S, B]:
        inner = self.inner
        return Threaded(
            lambda s: inner.chain(m.step(s), lambda pair: f(pair[1]).step(pair[0]))
        )

    def lift[A](self, m: Eff[A]) -> Threaded[S, A]:
        inner = self.inner
        return Threaded(lambda s: inner.chain(m, lambda a: inner.pure((s, a))))

    def get_state(self) -> Threaded[S, S]:
        inner = self.inner
        return Threaded(lambda s: inner.pure((s, s)))

    def set_state(self, state: S) -> Threaded[S, Unit]:
        inner = self.inner
        return Threaded(lambda _: inner.pure((state, None)))

    def modify(self, f: Callable[[S], S]) -> Threaded[S, Unit]:
        inner = self.inner
        return Threaded(lambda s: inner.pure((f(s), None)))


@dataclass(frozen=True, slots=True)
class StateTWithErrors[S](LiftedErrorSignal, StateT[S]):
    """StateT over a representation that can raise."""

    def handle_error[A, E](
        self,
        m: Threaded[S, A],
        handler: Callable[[E], Threaded[S, A]],
    ) -> Threaded[S, A]:
        errors: ErrorSignal[E] = self.inner  # type: ignore[assignment]
        # the handler restarts from the state m started with
        return Threaded(
            lambda s: errors.handle_error(m.step(s), lambda e: handler(e).step(s))
        )


# ═══════════════════════════════════════════════════════════════════════════════
# Constructors
# ═══════════════════════════════════════════════════════════════════════════════


def state_t[S](inner: Sequencing) -> StateT[S]:
    """
    Thread state over inner.

    ErrorSignal is available exactly when inner provides it.

    Example:
        m = state_t(result())      # peels to Result[(S, A), E]
    """
    require(inner, Sequencing)
    if provides(inner, ErrorSignal):
        return StateTWithErrors(inner)
    return StateT(inner)


def state[S]() -> StateT[S]:
    """Plain state threading: F<A> = S -> (S, A)."""
    return StateT(identity())


# ═══════════════════════════════════════════════════════════════════════════════
# Peeling
# ═══════════════════════════════════════════════════════════════════════════════


def run_state_t[S, A](m: Threaded[S, A], initial: S) -> Eff[Pair[S, A]]:
    """Peel the state layer, leaving an inner computation of (state, value)."""
    return m.step(initial)


def run_state[S, A](m: Threaded[S, A], initial: S) -> Pair[S, A]:
    """Run a plain state computation to (final state, value)."""
    return m.step(initial)


def eval_state[S, A](m: Threaded[S, A], initial: S) -> A:
    return run_state(m, initial)[1]


def exec_state[S, A](m: Threaded[S, A], initial: S) -> S:
    return run_state(m, initial)[0]


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = (
    "Threaded",
    "StateT",
    "StateTWithErrors",
    "state_t",
    "state",
    "run_state_t",
    "run_state",
    "eval_state",
    "exec_state",
)
