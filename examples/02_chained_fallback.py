from __future__ import annotations

from _infra import FakeTable, Row, banner, run

from lazyseq import lift as L
from lazyseq import or_else_chain


def main() -> None:
    banner("02_chained_fallback: overrides → cache → defaults")

    overrides = FakeTable(name="overrides")
    cache = FakeTable(name="cache", rows={"theme": [Row("theme", "dark"), Row("theme", "mono")]})
    defaults = FakeTable(name="defaults", rows={"theme": [Row("theme", "light")]})

    rows = or_else_chain(
        overrides.scan("theme"),
        cache.scan("theme"),
        defaults.scan("theme"),
    )

    for row in L.down.to_list(rows):
        print(f"{row.key} = {row.value}")

    # defaults were never scanned
    for table in (overrides, cache, defaults):
        print(f"{table.name}: produced {table.produced}")


if __name__ == "__main__":
    run(main)
