"""Lifting foreign values into representations."""

from __future__ import annotations

from dataclasses import dataclass

import pytest

from strata import capability as Cap
from strata import lift
from strata import monads as M
from strata import store as KV
from strata._types import Ok, Error, Some, Nothing

from tests.conftest import settle


@dataclass(frozen=True, slots=True)
class FetchError:
    message: str


def test_from_result_in_result_layer():
    m = M.result_t(M.state())
    final, outcome = M.run_state(lift.from_result(m, Ok(3)), "s")
    assert (final, settle(outcome)) == ("s", ("ok", 3))

    final, outcome = M.run_state(lift.from_result(m, Error("bad")), "s")
    assert (final, settle(outcome)) == ("s", ("error", "bad"))


def test_from_option_raises_chosen_error():
    m = M.result()
    assert settle(lift.from_option(m, Some("v"), "missing")) == ("ok", "v")
    assert settle(lift.from_option(m, Nothing(), "missing")) == ("error", "missing")


def test_from_option_needs_error_signal():
    with pytest.raises(Cap.MissingCapabilityError):
        lift.from_option(M.identity(), Nothing(), "missing")


@pytest.mark.asyncio
async def test_from_awaitable_success_chains_in_async_result():
    m = M.async_result()

    async def fetch() -> str:
        return "raw"

    program = m.chain(
        lift.from_awaitable(m, fetch, on_error=lambda e: FetchError(str(e))),
        lambda raw: m.pure(raw.upper()),
    )
    assert settle(await program) == ("ok", "RAW")


@pytest.mark.asyncio
async def test_from_awaitable_exception_becomes_domain_error():
    m = M.async_result()
    reached = []

    async def fetch() -> str:
        raise ConnectionError("down")

    program = m.chain(
        lift.from_awaitable(m, fetch, on_error=lambda e: FetchError(str(e))),
        lambda raw: reached.append(raw) or m.pure(raw),
    )
    assert settle(await program) == ("error", FetchError("down"))
    assert reached == []


@pytest.mark.asyncio
async def test_async_stack_with_strict_store():
    m = M.state_t(M.async_result())
    kv = KV.StrictStateStore(m)
    program = Cap.then(m, kv.delete("missing"), kv.put("never", "x"))
    outcome = await M.run_state_t(program, {})
    assert settle(outcome) == ("error", KV.StoreError.missing("missing"))


@pytest.mark.asyncio
async def test_from_awaitable_lifts_through_state_layer():
    m = M.state_t(M.async_result())
    kv = KV.StrictStateStore(m)

    async def fetch() -> str:
        return "seeded"

    program = m.chain(
        lift.from_awaitable(m, fetch, on_error=lambda e: FetchError(str(e))),
        lambda v: Cap.then(m, kv.put("seed", v), kv.get_or_raise("seed")),
    )
    assert settle(await M.run_state_t(program, {})) == ("ok", ({"seed": "seeded"}, "seeded"))


@pytest.mark.asyncio
async def test_from_awaitable_failure_short_circuits_layered_stack():
    m = M.result_t(M.state_t(M.async_result()))
    kv = KV.StrictStateStore(m)

    async def fetch() -> str:
        raise TimeoutError("slow")

    program = m.chain(
        lift.from_awaitable(m, fetch, on_error=lambda e: FetchError(str(e))),
        lambda v: kv.put("never", v),
    )
    assert settle(await M.run_state_t(program, {})) == ("error", FetchError("slow"))


def test_from_awaitable_needs_async_base():
    async def fetch() -> str:
        return "x"

    with pytest.raises(TypeError, match="ResultT\\[State\\] cannot suspend"):
        lift.from_awaitable(M.result_t(M.state()), fetch, on_error=str)


def test_from_awaitable_needs_error_signal():
    async def fetch() -> str:
        return "x"

    with pytest.raises(Cap.MissingCapabilityError, match="ErrorSignal"):
        lift.from_awaitable(M.state_t(M.identity()), fetch, on_error=str)
