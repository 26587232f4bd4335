"""
Core types for strata.

Re-exports from kungfu + the vocabulary every other module speaks.
"""

from __future__ import annotations

from typing import Any

# Re-export from kungfu
from kungfu import Result, Ok, Error, Option, Some, Nothing, LazyCoroResult

# ═══════════════════════════════════════════════════════════════════════════════
# Effect Vocabulary
# ═══════════════════════════════════════════════════════════════════════════════

type Eff[A] = Any
"""
A computation producing A in some effect context F.

Python has no higher-kinded generics, so F<A> is opaque here: the capability
instance that built the value is the only thing allowed to look inside.
"""

type Unit = None
"""Value of computations that only exist for their effect."""

type Pair[S, A] = tuple[S, A]
"""Final state and value of a state-threaded computation."""

# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = (
    # Re-exports from kungfu
    "Result",
    "Ok",
    "Error",
    "Option",
    "Some",
    "Nothing",
    "LazyCoroResult",
    # Vocabulary
    "Eff",
    "Unit",
    "Pair",
)
