"""
Laws — algebraic checks for every representation.

The type system cannot see whether chain is associative, so representations
are checked by running both sides of each law and comparing what a caller
would observe after peeling.

    checks = L.sequencing_laws(m, observe, ma, x, f, g)
    L.assert_laws(checks)
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

from loguru import logger

from strata._types import Eff
from strata.capability import Sequencing, ErrorSignal, require

logger = logger.bind(component="strata.laws")

type Observe = Callable[[Eff[Any]], Any]
"""Peels a computation down to a comparable value."""

# ═══════════════════════════════════════════════════════════════════════════════
# LawCheck
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class LawCheck:
    """Both sides of one law instance, already observed."""

    law: str
    representation: str
    left: Any
    right: Any

    @property
    def holds(self) -> bool:
        return self.left == self.right


class LawViolation(AssertionError):
    """At least one law instance failed."""

    def __init__(self, failed: list[LawCheck]) -> None:
        self.failed = failed
        lines = [
            f"{c.representation}: {c.law}: {c.left!r} != {c.right!r}" for c in failed
        ]
        super().__init__("law violated:\n" + "\n".join(lines))


def assert_laws(checks: Iterable[LawCheck]) -> None:
    failed = [c for c in checks if not c.holds]
    if failed:
        logger.debug("{} law instance(s) failed", len(failed))
        raise LawViolation(failed)


# ═══════════════════════════════════════════════════════════════════════════════
# Sequencing laws
# ═══════════════════════════════════════════════════════════════════════════════


def sequencing_laws[A, B, C](
    m: Sequencing,
    observe: Observe,
    ma: Eff[A],
    x: A,
    f: Callable[[A], Eff[B]],
    g: Callable[[B], Eff[C]],
) -> list[LawCheck]:
    """Left identity, right identity and associativity for one sample."""
    require(m, Sequencing)
    return [
        LawCheck(
            "left identity",
            m.name,
            observe(m.chain(m.pure(x), f)),
            observe(f(x)),
        ),
        LawCheck(
            "right identity",
            m.name,
            observe(m.chain(ma, m.pure)),
            observe(ma),
        ),
        LawCheck(
            "associativity",
            m.name,
            observe(m.chain(m.chain(ma, f), g)),
            observe(m.chain(ma, lambda a: m.chain(f(a), g))),
        ),
    ]


# ═══════════════════════════════════════════════════════════════════════════════
# ErrorSignal laws
# ═══════════════════════════════════════════════════════════════════════════════


def error_laws[A, B, E](
    m: Sequencing,
    observe: Observe,
    error: E,
    x: A,
    f: Callable[[A], Eff[B]],
    handler: Callable[[E], Eff[A]],
) -> list[LawCheck]:
    """Short-circuit and recovery for one sample."""
    require(m, Sequencing, ErrorSignal)
    errors: ErrorSignal[E] = m  # type: ignore[assignment]
    return [
        LawCheck(
            "raise short-circuits chain",
            m.name,
            observe(m.chain(errors.raise_error(error), f)),
            observe(errors.raise_error(error)),
        ),
        LawCheck(
            "handle ignores success",
            m.name,
            observe(errors.handle_error(m.pure(x), handler)),
            observe(m.pure(x)),
        ),
        LawCheck(
            "handle recovers raise",
            m.name,
            observe(errors.handle_error(errors.raise_error(error), handler)),
            observe(handler(error)),
        ),
    ]


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = (
    "Observe",
    "LawCheck",
    "LawViolation",
    "assert_laws",
    "sequencing_laws",
    "error_laws",
)
