"""Simple profiling of block construction, rendering and registry access."""

from __future__ import annotations

import timeit
import tracemalloc

from doxyblock import Brief, DocBlock, Param, Return, directive_class, with_directive_once, with_directives


def _build_block(params: int) -> DocBlock:
    return DocBlock.new(
        with_directive_once(Brief("Profiled function.")),
        with_directives(*(Param(f"arg{i}", f"argument number {i}", direction="in") for i in range(params))),
        with_directive_once(Return("nothing useful")),
    )


def main() -> None:
    duration: float = timeit.timeit(lambda: _build_block(10), number=1000)
    print(f"Block construction (10 params): {duration:.4f}s/1000")

    block: DocBlock = _build_block(50)
    render: float = timeit.timeit(block.to_text, number=1000)
    print(f"DocBlock.to_text() (50 params): {render:.4f}s/1000")

    def _lookup() -> None:
        directive_class("param")

    lookup: float = timeit.timeit(_lookup, number=10000)
    print(f"Registry lookup: {lookup:.4f}s/10000")

    tracemalloc.start()
    _build_block(500).to_text()
    current: int
    peak: int
    current, peak = tracemalloc.get_traced_memory()
    tracemalloc.stop()
    print(f"Large block memory: current={current} bytes peak={peak} bytes")


if __name__ == "__main__":
    main()
