from __future__ import annotations

from _infra import banner

from iunpack import pattern, raising, unpack, unpack_with


def main() -> None:
    banner("01_quickstart: leading, middle, trailing")

    spec = pattern("a", "b", "*c", "d")

    print(unpack(spec, range(6), lambda a, b, c, d: (a, b, c, d), raising(lambda: ValueError("short"))))
    print(unpack(spec, range(3), lambda a, b, c, d: (a, b, c, d), lambda: "fallback"))
    print(unpack(spec, range(2), lambda a, b, c, d: (a, b, c, d), lambda: "fallback"))

    # The failure branch can look at the reason too
    print(unpack_with(spec, "xy", lambda **kw: kw, lambda err: f"error: {err}"))


if __name__ == "__main__":
    main()
