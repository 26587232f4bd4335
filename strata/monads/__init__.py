"""
Monads — concrete effect representations and the layers that stack them.

    from strata import monads as M

    m = M.result_t(M.state())          # Result layer over state threading
    outcome = M.run_state(M.run_result_t(program(m)), {})

Every layer keeps the capabilities of what it wraps:

    identity()                  Sequencing
    result()                    Sequencing, ErrorSignal
    async_result()              Sequencing, ErrorSignal
    state()                     Sequencing, StateAccess
    result_t(inner)             + ErrorSignal, + StateAccess if inner has it
    state_t(inner)              + StateAccess, + ErrorSignal if inner has it
    option_t(inner)             + ErrorSignal[None], + StateAccess if inner has it
"""

from __future__ import annotations

from strata.monads._identity import Identity, identity, run_identity
from strata.monads._result import ResultMonad, result, run_result
from strata.monads._async import AsyncResultMonad, async_result, run_async
from strata.monads._state import (
    Threaded,
    StateT,
    StateTWithErrors,
    state_t,
    state,
    run_state_t,
    run_state,
    eval_state,
    exec_state,
)
from strata.monads._result_t import (
    ResultT,
    ResultTWithState,
    result_t,
    run_result_t,
)
from strata.monads._option_t import (
    OptionT,
    OptionTWithState,
    option_t,
    run_option_t,
)
from strata.monads._lift import Layer, LiftedStateAccess, LiftedErrorSignal

__all__ = (
    # Base representations
    "Identity",
    "identity",
    "run_identity",
    "ResultMonad",
    "result",
    "run_result",
    "AsyncResultMonad",
    "async_result",
    "run_async",
    # State
    "Threaded",
    "StateT",
    "StateTWithErrors",
    "state_t",
    "state",
    "run_state_t",
    "run_state",
    "eval_state",
    "exec_state",
    # Layers
    "ResultT",
    "ResultTWithState",
    "result_t",
    "run_result_t",
    "OptionT",
    "OptionTWithState",
    "option_t",
    "run_option_t",
    # Lifting rules
    "Layer",
    "LiftedStateAccess",
    "LiftedErrorSignal",
)
