import pytest

from prefn.evaluation.evaluator import evaluate
from prefn.evaluation.stack_machine import StackMachine, run_tree
from prefn.interpreter import Interpreter
from prefn.evaluation.backend_impl import TreeBackend
from prefn.reader.cursor import Cursor
from prefn.reader.parser import parse
from prefn.types.function_store import FunctionStore
from prefn.types.nodes import BinOp, FnApply, FnDef, Number, Placeholder


def test_evaluates_tree_directly():
    tree = BinOp("*", BinOp("+", Number(1), Number(2)), Number(4))
    assert run_tree(tree, FunctionStore()) == 12


def test_argument_is_threaded_to_placeholders():
    tree = BinOp("-", Placeholder(), Number(1))
    assert run_tree(tree, FunctionStore(), argument=10) == 9


def test_definitions_run_before_the_expression_after_them():
    store = FunctionStore()
    tree = FnDef("+ . .", FnApply(("21",)))
    assert run_tree(tree, store) == 42
    assert store.bodies == ["+ . ."]


def test_machine_stacks_are_empty_after_a_run():
    machine = StackMachine(FunctionStore())
    assert machine.run(parse("fn[* . .] + fn(2) fn(fn(2))")) == 20
    assert machine.work == []
    assert machine.values == []


@pytest.mark.parametrize(
    "source",
    [
        "+ 30 20",
        "- + 1 2 * 3 4",
        "fn[* . .] fn(fn(fn(2)))",
        "fn[+ . 1] * fn(1) fn(fn(1))",
        "+ fn[- . 1] 5 fn(9)",
    ]
)
def test_agrees_with_streaming_evaluator(source):
    streamed = evaluate(Cursor(source), 0, FunctionStore())
    assert run_tree(parse(source), FunctionStore(), source=source) == streamed


def test_deeply_nested_operators():
    depth = 5_000
    assert Interpreter(TreeBackend()).eval("+ 1 " * depth + "0") == depth


def test_deeply_nested_applications():
    depth = 2_000
    source = "fn[+ . 1] " + "fn(" * depth + "0" + ")" * depth
    assert Interpreter(TreeBackend()).eval(source) == depth


def test_streaming_evaluator_is_bounded_by_the_call_stack():
    with pytest.raises(RecursionError):
        Interpreter(engine="stream").eval("+ 1 " * 100_000 + "0")
