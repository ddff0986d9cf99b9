"""Command line entry point: evaluate a Jam program from a file, an -e
expression, or standard input, under one or all nine evaluation modes."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from termcolor import colored

from jam import __version__
from jam.errors import JamError, JamEvaluationError
from jam.interpreter import EVALUATION_MODES, Interpreter
from jam.types.values import to_jam_string

ERROR = "red"


def create_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jam",
        description="Evaluate Jam programs with a choice of binding and cons policies",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s program.jam                   # call-by-value, eager cons
  %(prog)s -b need -c need program.jam   # call-by-need, lazy (need) cons
  %(prog)s --all -e "2 * 3 + 12"         # all nine modes
        """,
    )
    parser.add_argument("file", nargs="?", help="Jam source file (default: standard input)")
    parser.add_argument("-e", "--expr", help="evaluate this program text instead of a file")
    parser.add_argument(
        "-b", "--binding", choices=("value", "name", "need"), default="value",
        help="binding policy for let and function parameters (default: value)",
    )
    parser.add_argument(
        "-c", "--cons", choices=("eager", "name", "need"), default="eager",
        help="evaluation policy for cons arguments (default: eager)",
    )
    parser.add_argument("--all", action="store_true", help="evaluate under all nine modes")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def report(error: JamError) -> None:
    print(colored("error: ", ERROR, attrs=["bold"]) + str(error), file=sys.stderr)


def main(argv: list[str] | None = None) -> int:
    args = create_arg_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.expr is not None:
        source = args.expr
    elif args.file is not None:
        source = Path(args.file).read_text()
    else:
        source = sys.stdin.read()

    try:
        interp = Interpreter(source)
    except JamError as e:
        report(e)
        return 1

    if not args.all:
        try:
            print(to_jam_string(interp.run(args.binding, args.cons)))
        except JamEvaluationError as e:
            report(e)
            return 1
        return 0

    status = 0
    for mode in EVALUATION_MODES:
        try:
            print(f"{mode}: {to_jam_string(getattr(interp, mode)())}")
        except JamEvaluationError as e:
            print(f"{mode}: " + colored(str(e), ERROR))
            status = 1
    return status
