import pytest

# This test configuration runs every test twice:
# 1) with the fused streaming evaluator ["stream"]
# 2) with the parser + stack machine ["tree"]
# Most tests instantiate Interpreter() directly. An autouse fixture switches
# the default engine for the whole run without changing individual test files,
# and clears the PREFN_* environment so a developer's shell cannot leak in.


@pytest.fixture(params=["stream", "tree"])
def engine(request):
    return request.param


@pytest.fixture(autouse=True)
def _force_interpreter_engine(engine, monkeypatch):
    for var in ("PREFN_ENGINE", "PREFN_INT_WIDTH", "PREFN_TRACE"):
        monkeypatch.delenv(var, raising=False)

    from prefn.interpreter import Interpreter
    monkeypatch.setattr(Interpreter, "DefaultEngine", engine, raising=False)
