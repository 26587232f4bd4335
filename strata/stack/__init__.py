"""
Stack — compose representations and peel them in one place.

    from strata import stack as S, monads as M

    s = S.stack(M.identity()).with_state().with_errors().build()
    final_state, outcome = s.run(program(s.m), {})
"""

from __future__ import annotations

from strata.stack._types import LayerKind, Peel, UNSET, Stack
from strata.stack._builder import StackBuilder, stack

__all__ = (
    "LayerKind",
    "Peel",
    "UNSET",
    "Stack",
    "StackBuilder",
    "stack",
)
