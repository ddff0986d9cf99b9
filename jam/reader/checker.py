"""Context-sensitive checks run by the reader after parsing.

A checked program has no free variables and never binds the same name twice
in one map parameter list or one let.
"""

from __future__ import annotations

from typing import Iterable

from jam import Expression
from jam.errors import JamSyntaxError
from jam.reader.ast import App, BinOpApp, If, Let, Map, UnOpApp
from jam.types.variable import Variable


def _check_distinct(variables: Iterable[Variable], where: str) -> None:
    seen: set[Variable] = set()
    for var in variables:
        if var in seen:
            raise JamSyntaxError(f"{var} is bound more than once in {where}")
        seen.add(var)


def check(expr: Expression, bound: frozenset[Variable] = frozenset()) -> None:
    """Raise JamSyntaxError if expr is not a well-formed closed program."""
    match expr:
        case Variable():
            if expr not in bound:
                raise JamSyntaxError(f"variable {expr} is free in the program")
        case Map(params, body):
            _check_distinct(params, "a map parameter list")
            check(body, bound | frozenset(params))
        case Let(defs, body):
            names = [d.var for d in defs]
            _check_distinct(names, "a let")
            scope = bound | frozenset(names)
            for d in defs:
                check(d.exp, scope)
            check(body, scope)
        case App(rator, args):
            check(rator, bound)
            for arg in args:
                check(arg, bound)
        case UnOpApp(_, arg):
            check(arg, bound)
        case BinOpApp(_, left, right):
            check(left, bound)
            check(right, bound)
        case If(test, conseq, alt):
            check(test, bound)
            check(conseq, bound)
            check(alt, bound)
        case _:
            pass  # constants and primitives
