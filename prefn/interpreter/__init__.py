from __future__ import annotations
import logging
from typing import Literal

from prefn import Value
from prefn.config import get_default_engine, get_int_width
from prefn.errors import PrefnConfigError, PrefnEndOfInput
from prefn.evaluation.backend_impl import BACKENDS
from prefn.interpreter.backend import Backend
from prefn.types.function_store import FunctionStore

logger = logging.getLogger(__name__)

_AUTO = "auto"


class Interpreter:
    """
    Evaluates prefix expressions via a pluggable backend.
    Every call starts from an empty FunctionStore: nothing carries over between calls.
    """

    # Class-level default to avoid env-variable coupling in tests
    DefaultEngine: Literal['stream', 'tree'] | None = None

    def __init__(
        self,
        backend: Backend | None = None,
        *,
        engine: Literal['stream', 'tree'] | None = None,
        int_width: int | None | Literal['auto'] = _AUTO,
    ):
        if backend is None:
            name = engine or self.DefaultEngine or get_default_engine()
            if name not in BACKENDS:
                raise PrefnConfigError(f"unknown engine {name!r}")
            backend = BACKENDS[name]()
        self.backend = backend
        self.int_width = get_int_width() if int_width == _AUTO else int_width
        logger.debug("using %s backend, int width %s", type(backend).__name__, self.int_width)
        # Store of the most recent evaluation, kept for inspection only.
        self.last_store: FunctionStore | None = None

    def eval(self, code: str) -> Value:
        """Evaluate one expression. Every failure, end of input included, propagates."""
        self.last_store = FunctionStore()
        return self.backend.eval(code, self.last_store, self.int_width)

    def run(self, code: str) -> Value | None:
        """Like eval, but running out of input ends evaluation cleanly with None."""
        try:
            return self.eval(code)
        except PrefnEndOfInput:
            return None


def interpret(code: str, **kwargs) -> Value:
    return Interpreter(**kwargs).eval(code)
