"""Stack builder, peeling, and layer order."""

from __future__ import annotations

import pytest

from strata import capability as Cap
from strata import monads as M
from strata import stack as S
from strata import store as KV

from tests.conftest import peel, settle


# ═══════════════════════════════════════════════════════════════════════════════
# Builder
# ═══════════════════════════════════════════════════════════════════════════════


def test_builder_adds_layers_outside_in():
    s = S.stack(M.identity()).with_state().with_errors().build()
    assert s.name == "ResultT[State]"
    assert s.stateful
    assert s.capabilities == ("Sequencing", "StateAccess", "ErrorSignal")
    assert len(s.peels) == 3


def test_builder_is_immutable():
    base = S.stack(M.result())
    stateful = base.with_state()
    assert base.build().name == "Result"
    assert stateful.build().name == "StateT[Result]"


def test_layer_by_kind():
    s = S.stack(M.state()).layer(S.LayerKind.OPTION).build()
    assert s.name == "OptionT[State]"


def test_stack_rejects_non_representation_base():
    with pytest.raises(Cap.MissingCapabilityError):
        S.stack("not a monad")


def test_one_state_layer_per_stack():
    with pytest.raises(ValueError, match="at most one state layer"):
        S.stack(M.state()).with_state().build()


def test_layered_stateful_base_threads_state():
    s = S.stack(M.result_t(M.state())).build()
    assert s.stateful
    assert s.name == "ResultT[State]"

    outcome = peel(s, KV.verify(s.m, KV.StateStore(s.m)), {})
    assert outcome == ({"key": "value"}, ("ok", True))

    with pytest.raises(ValueError, match="initial_state is required"):
        s.run(s.m.pure(1))


def test_option_over_state_base_counts_as_state_layer():
    s = S.stack(M.option_t(M.state())).with_errors().build()
    assert s.stateful
    assert peel(s, s.m.get_state(), "seed") == ("seed", ("some", ("ok", "seed")))

    with pytest.raises(ValueError, match="at most one state layer"):
        S.stack(M.option_t(M.state())).with_state().build()


def test_run_demands_initial_state_when_stateful():
    s = S.stack(M.state()).build()
    with pytest.raises(ValueError, match="initial_state is required"):
        s.run(s.m.pure(1))


def test_run_refuses_state_for_stateless_stack():
    s = S.stack(M.result()).with_errors().build()
    with pytest.raises(ValueError, match="no state layer"):
        s.run(s.m.pure(1), {})


def test_none_is_a_valid_initial_state():
    s = S.stack(M.state()).build()
    assert s.run(s.m.get_state(), None) == (None, None)


@pytest.mark.asyncio
async def test_async_stack_peels_to_awaitable():
    s = S.stack(M.async_result()).with_state().build()
    program = Cap.then(s.m, s.m.modify(lambda n: n + 1), s.m.get_state())
    outcome = await s.run(program, 1)
    assert settle(outcome) == ("ok", (2, 2))


# ═══════════════════════════════════════════════════════════════════════════════
# Layer order
#
#   Result-over-State  = StateT[Result]  -> Result[(S, A), E]
#   State-over-Result  = ResultT[State]  -> (S, Result[A, E])
# ═══════════════════════════════════════════════════════════════════════════════

result_over_state = S.stack(M.result()).with_state().build
state_over_result = S.stack(M.state()).with_errors().build


def _put_get(s: S.Stack):
    kv = KV.StrictStateStore(s.m)
    return Cap.then(s.m, kv.put("key", "value"), kv.get("key"))


def _put_then_fail(s: S.Stack):
    kv = KV.StrictStateStore(s.m)
    return Cap.then(
        s.m,
        kv.put("kept", "yes"),
        Cap.then(s.m, kv.delete("missing"), kv.put("never", "written")),
    )


def test_layer_order_agrees_without_errors():
    ros = peel(result_over_state(), _put_get(result_over_state()), {})
    sor = peel(state_over_result(), _put_get(state_over_result()), {})

    assert ros == ("ok", ({"key": "value"}, ("some", "value")))
    assert sor == ({"key": "value"}, ("ok", ("some", "value")))

    _, (_, ros_value) = ros
    _, (_, sor_value) = sor
    assert ros_value == sor_value == ("some", "value")


def test_result_over_state_loses_state_on_error():
    s = result_over_state()
    outcome = peel(s, _put_then_fail(s), {})
    missing = KV.StoreError.missing("missing")
    assert outcome == ("error", missing)


def test_state_over_result_keeps_state_reached_before_error():
    s = state_over_result()
    final_state, outcome = peel(s, _put_then_fail(s), {})
    assert final_state == {"kept": "yes"}
    assert outcome == ("error", KV.StoreError.missing("missing"))
