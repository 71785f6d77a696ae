from __future__ import annotations

from _infra import banner, run, slow_stream

from iunpack import aunpack, aunpack_w, pattern
from kungfu import Error, Ok


async def main() -> None:
    banner("03_async_trace: async sources and traced runs")

    spec = pattern("first", "*", "second_last", "last")

    result = await aunpack(spec, slow_stream(range(10), delay_seconds=0.001))
    match result:
        case Ok(bindings):
            print(bindings.as_kwargs())
        case Error(err):
            print(f"error: {err!r}")

    traced = await aunpack_w(spec, slow_stream("ab"))
    for event in traced.log:
        print(event)


if __name__ == "__main__":
    run(main)
