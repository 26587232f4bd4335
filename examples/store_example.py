"""
Store — one piece of logic, many effect stacks.

Key concepts:
- verify() is written once against Sequencing
- the store picks its own capabilities (state, errors) at construction
- swapping the stack never touches verify() or the store

Level 3: strata.store
Level 2: strata.stack
Level 1: strata.monads
"""

from strata import monads as M
from strata import stack as S
from strata import store as KV
from strata.capability import MissingCapabilityError
from examples._infra import banner, show


STACKS = [
    ("Identity + DictStore", S.stack(M.identity()).build(), KV.DictStore),
    ("Result + DictStore", S.stack(M.result()).build(), KV.DictStore),
    ("State + StateStore", S.stack(M.state()).build(), KV.StateStore),
    ("ResultT[State] + StrictStateStore", S.stack(M.state()).with_errors().build(), KV.StrictStateStore),
    ("StateT[Result] + StrictStateStore", S.stack(M.result()).with_state().build(), KV.StrictStateStore),
]


def main() -> None:
    banner("verify() across stacks")
    for label, s, store_cls in STACKS:
        program = KV.verify(s.m, store_cls(s.m))
        outcome = s.run(program, {}) if s.stateful else s.run(program)
        print(f"  {label:36} → {show(outcome)}")

    banner("Missing capability is rejected before running")
    try:
        KV.StrictStateStore(M.state())
    except MissingCapabilityError as e:
        print(f"  {e}")

    banner("Domain error: delete of a missing key")
    s = S.stack(M.state()).with_errors().build()
    kv = KV.StrictStateStore(s.m)
    final_state, outcome = s.run(kv.delete("missing"), {})
    print(f"  state={final_state} outcome={show(outcome)}")

    print("\nDone!")


if __name__ == "__main__":
    main()
