"""Command-line entry point for prefn.

With an expression argument, evaluates it once and prints the result. With
no argument, starts an interactive shell where every line is evaluated on
its own, with a fresh function store.
"""

from __future__ import annotations

import argparse
import cmd
import logging
import sys

from termcolor import colored

from prefn.config import ENGINES, trace_enabled
from prefn.errors import PrefnEndOfInput, PrefnError
from prefn.interpreter import Interpreter
from prefn.reader.lexer import lex
from prefn.reader.parser import parse
from prefn.types.nodes import to_source

ERROR = "red"


def diagnose(error: PrefnError) -> str:
    """Returns the offending source line with the failing character highlighted."""
    source, start = error.source, error.position
    if not source or start is None:
        return ""
    start = min(start, len(source))
    end = start + 1

    diagnosis = "  " + source[:start]
    diagnosis += colored(source[start:end], ERROR, attrs=["bold"])
    diagnosis += source[end:] + "\n"
    diagnosis += "  " + " " * start + colored("^", ERROR, attrs=["bold"])
    return diagnosis


def format_error(error: PrefnError) -> str:
    msg = colored("error: ", ERROR, attrs=["bold"]) + error.message
    diagnosis = diagnose(error)
    return f"{msg}\n{diagnosis}" if diagnosis else msg


def report(interpreter: Interpreter, code: str) -> int:
    """Evaluate `code`, print the outcome, and return a process exit status."""
    try:
        result = interpreter.eval(code)
    except PrefnEndOfInput:
        return 0  # running out of input is how an evaluation normally finishes
    except PrefnError as e:
        print(format_error(e), file=sys.stderr)
        return 1
    except RecursionError:
        print(colored("error: ", ERROR, attrs=["bold"]) + "expression nested too deeply", file=sys.stderr)
        return 1
    print(result)
    return 0


class Shell(cmd.Cmd):
    """Prefix calculator shell."""
    intro = "prefn :: prefix arithmetic with one-argument functions\nType '?' or 'help' for more information."
    prompt = "> "

    def __init__(self, interpreter: Interpreter, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.interpreter = interpreter

    def default(self, line):
        """Evaluates one expression. Errors are reported without leaving the shell."""
        report(self.interpreter, line)
        return False

    def do_help(self, arg):
        """Short intro instead of per-command docs."""
        print("Expressions are written in prefix form: '+ 1 2' is 3, '* + 1 2 4' is 12.\n"
              "Define a function with 'fn[...]', using '.' for its argument, then apply it\n"
              "with 'fn(n)': 'fn[* . .] fn(5)' is 25. Each line is evaluated on its own.")

    def emptyline(self):
        """Do not repeat previous command on empty line."""
        return False

    def do_EOF(self, arg):
        """Exits the shell."""
        print()
        return self.do_exit(arg)

    def do_exit(self, arg):
        """Exits the shell."""
        return True


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="prefn",
        description="Evaluate a prefix expression (interactive shell if none is given).",
    )
    parser.add_argument("expr", nargs="?", help="expression to evaluate, e.g. 'fn[+ . .] fn(1)'")
    parser.add_argument("--engine", choices=ENGINES, help="evaluation engine (default: $PREFN_ENGINE or stream)")
    parser.add_argument("--int-width", type=int, metavar="BITS",
                        help="wrap results to BITS-bit signed integers (0 for unbounded)")
    parser.add_argument("--tokens", action="store_true", help="print the token stream instead of evaluating")
    parser.add_argument("--tree", action="store_true", help="print the parsed expression instead of evaluating")
    parser.add_argument("-d", "--debug", action="store_true", help="log definitions and applications")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    if args.debug or trace_enabled():
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        kwargs = {} if args.int_width is None else {"int_width": args.int_width or None}
        interpreter = Interpreter(engine=args.engine, **kwargs)

        if args.expr is not None and args.tokens:
            for kind, text in lex(args.expr):
                print(f"{kind:<10} {text}")
            return 0
        if args.expr is not None and args.tree:
            tree = parse(args.expr, interpreter.int_width)
            print(repr(tree))
            print(to_source(tree))
            return 0
    except PrefnError as e:
        print(format_error(e), file=sys.stderr)
        return 1

    if args.expr is None:
        Shell(interpreter).cmdloop()
        return 0
    return report(interpreter, args.expr)


if __name__ == "__main__":
    sys.exit(main())
