"""
Async — the same store over a lazy coroutine representation.

Suspension stays inside the representation: the store and verify() are the
exact objects the synchronous stacks use.
"""

import asyncio

from strata import lift
from strata import monads as M
from strata import stack as S
from strata import store as KV
from examples._infra import banner, show


async def load_seed() -> str:
    await asyncio.sleep(0.01)
    return "seeded"


async def main() -> None:
    s = S.stack(M.async_result()).with_state().build()
    kv = KV.StrictStateStore(s.m)

    banner("verify() over StateT[AsyncResult]")
    print(f"  {show(await s.run(KV.verify(s.m, kv), {}))}")

    banner("Lifting an async call into the stack")
    seed = lift.from_awaitable(s.m, load_seed, on_error=str)
    program = s.m.chain(seed, lambda v: kv.put("seed", v))
    print(f"  {show(await s.run(program, {}))}")

    print("\nDone!")


if __name__ == "__main__":
    asyncio.run(main())
