from timeit import timeit

from prefn.evaluation.backend_impl import StreamBackend, TreeBackend
from prefn.evaluation.stack_machine import StackMachine
from prefn.reader.parser import parse
from prefn.types.function_store import FunctionStore


def time_backend(backend, code: str, rounds: int) -> float:
    """Time a backend end to end: every round reads the source again."""
    # Warmup
    backend.eval(code, FunctionStore())
    # Timed
    return timeit(lambda: backend.eval(code, FunctionStore()), number=rounds)


def time_machine(code: str, rounds: int) -> float:
    """Time the stack machine only: parse the top-level expression once, then
    repeatedly run the tree. Function bodies are still parsed per application.
    """
    tree = parse(code)
    run = lambda: StackMachine(FunctionStore()).run(tree, 0, code)
    run()
    return timeit(run, number=rounds)


# Flat arithmetic: no functions involved
WIDE_ARITH_CODE = "+ * 3 4 - 100 / 81 9 * + 1 2 + 3 4"

# Right-nested sum, 500 deep (close to the default recursion limit of the stream engine)
DEEP_ARITH_CODE = "+ 1 " * 500 + "0"

# Nested applications: each one re-reads the body
NESTED_APPLY_CODE = "fn[* . .] fn(fn(fn(fn(2))))"

# A longer body applied many times
LONG_BODY_CODE = "fn[+ * . . + * 2 . + 1 - . / . 2] " + "+ fn(1) " * 50 + "0"


def _print_row(name: str, code: str, rounds: int) -> None:
    tstream = time_backend(StreamBackend(), code, rounds)
    ttree = time_backend(TreeBackend(), code, rounds)
    tmachine = time_machine(code, rounds)
    print(f"Benchmark: {name}")
    print(f"  stream: {tstream:.6f}s  |  tree: {ttree:.6f}s  |  machine (no top-level parse): {tmachine:.6f}s"
          f"  [rounds={rounds}]")


if __name__ == "__main__":
    _print_row("wide arithmetic", WIDE_ARITH_CODE, rounds=20000)
    _print_row("deep arithmetic (500)", DEEP_ARITH_CODE, rounds=500)
    _print_row("nested applications", NESTED_APPLY_CODE, rounds=20000)
    _print_row("long body x50", LONG_BODY_CODE, rounds=500)
