from __future__ import annotations

from _infra import banner

from iunpack import Rest, Slot, pattern, unpacking


def lines():
    yield "#report v2"
    for i in range(100_000):
        yield f"row,{i},{i * i}"
    yield "#end 100000"


# Header and footer are refutable slots; the middle is reduced to a row count
@unpacking(
    Slot("header", where=lambda s: s.startswith("#report")),
    Rest("rows", collect=lambda rows: sum(1 for _ in rows)),
    Slot("footer", where=lambda s: s.startswith("#end")),
    on_failure=lambda: None,
)
def summarize(header: str, rows: int, footer: str) -> str:
    return f"{header}: {rows} rows, footer says {footer.split()[1]}"


def main() -> None:
    banner("02_log_header_footer: refutable slots + collector")
    print(summarize(lines()))
    print(summarize(["#report v2"]))  # too short -> None

    first_two = pattern("x", "y")
    print(first_two.names, first_two.min_length)


if __name__ == "__main__":
    main()
