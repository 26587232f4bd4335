"""
Shared fixtures: every stack the suite runs generic code against, and a
way to peel any of them down to plain, comparable Python values.
"""

from __future__ import annotations

import asyncio
import inspect
from collections.abc import Callable
from typing import Any

import pytest

from strata import monads as M
from strata import stack as S
from strata._types import Ok, Error, Some, Nothing


def settle(value: Any) -> Any:
    """Turn kungfu outcomes into tuples so results compare with ==."""
    match value:
        case Ok(inner):
            return ("ok", settle(inner))
        case Error(inner):
            return ("error", settle(inner))
        case Some(inner):
            return ("some", settle(inner))
        case Nothing():
            return ("nothing",)
        case tuple():
            return tuple(settle(v) for v in value)
        case _:
            return value


async def _wait(awaitable: Any) -> Any:
    return await awaitable


def peel(s: S.Stack, computation: Any, initial_state: Any = None) -> Any:
    """Run a computation through a stack and settle the outcome."""
    out = s.run(computation, initial_state) if s.stateful else s.run(computation)
    if inspect.isawaitable(out):
        out = asyncio.run(_wait(out))
    return settle(out)


STACKS: dict[str, Callable[[], S.Stack]] = {
    "Identity": lambda: S.stack(M.identity()).build(),
    "Result": lambda: S.stack(M.result()).build(),
    "AsyncResult": lambda: S.stack(M.async_result()).build(),
    "State": lambda: S.stack(M.state()).build(),
    "ResultT[State]": lambda: S.stack(M.state()).with_errors().build(),
    "StateT[Result]": lambda: S.stack(M.result()).with_state().build(),
    "OptionT[State]": lambda: S.stack(M.state()).with_option().build(),
    "StateT[AsyncResult]": lambda: S.stack(M.async_result()).with_state().build(),
    "ResultT[Identity]": lambda: S.stack(M.identity()).with_errors().build(),
}


@pytest.fixture(params=sorted(STACKS))
def any_stack(request: pytest.FixtureRequest) -> S.Stack:
    return STACKS[request.param]()
