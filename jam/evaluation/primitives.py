"""Built-in primitive functions for the Jam runtime.

Primitives receive their argument *expressions*, not values: `cons` hands them
to the active cons policy unevaluated, the others evaluate them eagerly.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Sequence

from jam import Expression, JamValue
from jam.errors import JamArityError, JamTypeError
from jam.types.cons import Cons, is_list
from jam.types.empty import Empty
from jam.types.values import Closure, Primitive, is_function, is_int, to_jam_string

if TYPE_CHECKING:
    from jam.evaluation.evaluator import Evaluator

PrimitiveFn = Callable[[Sequence[Expression], "Evaluator"], JamValue]


def _check_arity(prim: Primitive, args: Sequence[Expression]) -> None:
    if len(args) != prim.arity:
        raise JamArityError(f"Primitive function `{prim}' applied to {len(args)} arguments")


def _eval_cons_arg(prim: Primitive, arg: Expression, evaluator: Evaluator) -> Cons:
    value = evaluator.eval(arg)
    if isinstance(value, Cons):
        return value
    raise JamTypeError(
        f"Primitive function `{prim}' applied to argument {to_jam_string(value)} that is not a cons"
    )


def _predicate(prim: Primitive, test: Callable[[JamValue], bool]) -> PrimitiveFn:
    """Build a one-argument type predicate."""
    def run(args: Sequence[Expression], evaluator: Evaluator) -> bool:
        _check_arity(prim, args)
        return test(evaluator.eval(args[0]))
    run.__name__ = prim.name.lower()
    return run


# -------------------------------
# Functions and lists
# -------------------------------
def arity(args: Sequence[Expression], evaluator: Evaluator) -> int:
    """Number of parameters of a closure or primitive."""
    _check_arity(Primitive.ARITY, args)
    fn = evaluator.eval(args[0])
    if isinstance(fn, Closure):
        return fn.arity
    if isinstance(fn, Primitive):
        return fn.arity
    raise JamTypeError(f"arity applied to argument {to_jam_string(fn)}")


def cons(args: Sequence[Expression], evaluator: Evaluator) -> JamValue:
    """Delegate to the cons policy; arguments are not evaluated here."""
    _check_arity(Primitive.CONS, args)
    return evaluator.cons_policy.eval_cons(args[0], args[1], evaluator)


def first(args: Sequence[Expression], evaluator: Evaluator) -> JamValue:
    _check_arity(Primitive.FIRST, args)
    return _eval_cons_arg(Primitive.FIRST, args[0], evaluator).first()


def rest(args: Sequence[Expression], evaluator: Evaluator) -> JamValue:
    _check_arity(Primitive.REST, args)
    return _eval_cons_arg(Primitive.REST, args[0], evaluator).rest()


# -------------------------------
# Registration
# -------------------------------
PRIMITIVES: dict[Primitive, PrimitiveFn] = {
    Primitive.FUNCTION_P: _predicate(Primitive.FUNCTION_P, is_function),
    Primitive.NUMBER_P: _predicate(Primitive.NUMBER_P, is_int),
    Primitive.LIST_P: _predicate(Primitive.LIST_P, is_list),
    Primitive.CONS_P: _predicate(Primitive.CONS_P, lambda v: isinstance(v, Cons)),
    Primitive.EMPTY_P: _predicate(Primitive.EMPTY_P, lambda v: v is Empty),
    Primitive.ARITY: arity,
    Primitive.CONS: cons,
    Primitive.FIRST: first,
    Primitive.REST: rest,
}


def apply_primitive(prim: Primitive, args: Sequence[Expression], evaluator: Evaluator) -> JamValue:
    return PRIMITIVES[prim](args, evaluator)
