from __future__ import annotations

from _infra import banner, run

from lazyseq import lift as L
from lazyseq import or_else


def main() -> None:
    banner("01_quickstart: or_else + bulk operations")

    print(list(or_else([1, 2, 3], [4, 5])))  # [1, 2, 3]
    print(list(or_else([], [4, 5])))  # [4, 5]

    seq = or_else([], [4, 5])
    print(f"len before: {len(seq)}")
    print(f"second element: {seq.nth(1).unwrap()}")
    print(f"state: {seq.state.name}")

    total = L.up.empty().or_else([4, 5]).fold(0, lambda acc, x: acc + x)
    print(f"sum: {total}")


if __name__ == "__main__":
    run(main)
