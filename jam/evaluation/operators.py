"""Unary and binary operators.

Unary operators receive an already evaluated operand. Binary operators receive
the operand expressions so that `&` and `|` can short-circuit; every other
operator evaluates its left operand first.
"""

from __future__ import annotations

import operator
from typing import TYPE_CHECKING, Callable

from jam import Expression, JamValue
from jam.errors import JamDivideByZero, JamTypeError
from jam.reader.ast import BinOp, UnOp
from jam.types.cons import jam_equal
from jam.types.values import is_bool, is_int, to_int64, to_jam_string

if TYPE_CHECKING:
    from jam.evaluation.evaluator import Evaluator


ARITHMETIC: dict[BinOp, Callable[[int, int], int]] = {
    BinOp.PLUS: operator.add,
    BinOp.MINUS: operator.sub,
    BinOp.TIMES: operator.mul,
}

RELATIONAL: dict[BinOp, Callable[[int, int], bool]] = {
    BinOp.LESS_THAN: operator.lt,
    BinOp.GREATER_THAN: operator.gt,
    BinOp.LESS_THAN_EQUALS: operator.le,
    BinOp.GREATER_THAN_EQUALS: operator.ge,
}


def apply_unary(op: UnOp, value: JamValue) -> JamValue:
    match op:
        case UnOp.PLUS:
            return _check_int(value, f"Unary operator `{op}'")
        case UnOp.MINUS:
            return to_int64(-_check_int(value, f"Unary operator `{op}'"))
        case UnOp.NOT:
            return not _check_bool(value, f"Unary operator `{op}'")
    raise ValueError(f"Unknown unary operator {op!r}")


def apply_binary(op: BinOp, left: Expression, right: Expression, evaluator: Evaluator) -> JamValue:
    what = f"Binary operator `{op}'"
    if op in ARITHMETIC:
        a = _check_int(evaluator.eval(left), what)
        b = _check_int(evaluator.eval(right), what)
        return to_int64(ARITHMETIC[op](a, b))
    if op in RELATIONAL:
        a = _check_int(evaluator.eval(left), what)
        b = _check_int(evaluator.eval(right), what)
        return RELATIONAL[op](a, b)
    match op:
        case BinOp.DIVIDE:
            a = _check_int(evaluator.eval(left), what)
            b = _check_int(evaluator.eval(right), what)
            if b == 0:
                raise JamDivideByZero("Attempt to divide by zero")
            return to_int64(truncating_div(a, b))
        case BinOp.EQUALS:
            return jam_equal(evaluator.eval(left), evaluator.eval(right))
        case BinOp.NOT_EQUALS:
            return not jam_equal(evaluator.eval(left), evaluator.eval(right))
        case BinOp.AND:
            if not _check_bool(evaluator.eval(left), what):
                return False
            return _check_bool(evaluator.eval(right), what)
        case BinOp.OR:
            if _check_bool(evaluator.eval(left), what):
                return True
            return _check_bool(evaluator.eval(right), what)
    raise ValueError(f"Unknown binary operator {op!r}")


def truncating_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def _check_int(value: JamValue, what: str) -> int:
    if is_int(value):
        return value
    raise JamTypeError(f"{what} applied to non-integer {to_jam_string(value)}")


def _check_bool(value: JamValue, what: str) -> bool:
    if is_bool(value):
        return value
    raise JamTypeError(f"{what} applied to non-boolean {to_jam_string(value)}")
