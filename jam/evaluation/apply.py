"""Application engine for Jam.

Arguments reach a function unevaluated. A closure binds them through the active
binding policy in a new frame on top of the closure's own environment; a
primitive receives the expressions and decides itself (see primitives.py).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from jam import Expression, JamValue
from jam.errors import JamTypeError
from jam.evaluation.primitives import apply_primitive
from jam.types.bind import bind_arguments
from jam.types.values import Closure, Primitive, to_jam_string

if TYPE_CHECKING:
    from jam.evaluation.evaluator import Evaluator


def apply_closure(fn: Closure, args: Sequence[Expression], evaluator: Evaluator) -> JamValue:
    """Apply a closure to unevaluated arguments supplied by the caller's evaluator.

    Raises JamArityError if the number of arguments differs from the number of
    parameters.
    """
    new_env = bind_arguments(fn, args, evaluator)
    return evaluator.extend(new_env).eval(fn.body)


def apply(head: JamValue, args: Sequence[Expression], evaluator: Evaluator) -> JamValue:
    """Apply either a Closure or a Primitive; anything else is a type error."""
    if isinstance(head, Closure):
        return apply_closure(head, args, evaluator)
    if isinstance(head, Primitive):
        return apply_primitive(head, args, evaluator)
    raise JamTypeError(
        f"{to_jam_string(head)} appears at head of application but it is not a valid function"
    )
