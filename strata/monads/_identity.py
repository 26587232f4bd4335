"""
Identity — the representation with no effect at all.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

# ═══════════════════════════════════════════════════════════════════════════════
# Identity — F<A> = A
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class Identity:
    """
    Sequencing only. Chain is plain application; computations run eagerly.

    Example:
        m = identity()
        m.chain(m.pure(2), lambda x: m.pure(x + 1))  # 3
    """

    @property
    def name(self) -> str:
        return "Identity"

    def pure[A](self, value: A) -> A:
        return value

    def chain[A, B](self, m: A, f: Callable[[A], B]) -> B:
        return f(m)


def identity() -> Identity:
    return Identity()


def run_identity[A](m: A) -> A:
    """Peel an Identity computation. Nothing to do."""
    return m


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = ("Identity", "identity", "run_identity")
