"""
Layer order — same program, two stacks, different view after an error.

    Result-over-State  StateT[Result]  → Result[(state, value)]
    State-over-Result  ResultT[State]  → (state, Result[value])
"""

from strata import capability as Cap
from strata import monads as M
from strata import stack as S
from strata import store as KV
from examples._infra import banner, show


def program(s: S.Stack):
    kv = KV.StrictStateStore(s.m)
    return Cap.then(
        s.m,
        kv.put("kept", "yes"),
        Cap.then(s.m, kv.delete("missing"), kv.put("never", "written")),
    )


def main() -> None:
    result_over_state = S.stack(M.result()).with_state().build()
    state_over_result = S.stack(M.state()).with_errors().build()

    banner("Result-over-State: state reached before the error is gone")
    print(f"  {show(result_over_state.run(program(result_over_state), {}))}")

    banner("State-over-Result: state reached before the error survives")
    print(f"  {show(state_over_result.run(program(state_over_result), {}))}")

    print("\nDone!")


if __name__ == "__main__":
    main()
