from __future__ import annotations

from typing import TYPE_CHECKING

from jam import JamValue
from jam.errors import JamTypeError
from jam.reader.ast import If
from jam.types.values import is_bool, to_jam_string

if TYPE_CHECKING:
    from jam.evaluation.evaluator import Evaluator


def if_form(expr: If, evaluator: Evaluator) -> JamValue:
    test = evaluator.eval(expr.test)
    if not is_bool(test):
        raise JamTypeError(f"non Boolean {to_jam_string(test)} used as test in if")

    # Only the selected branch is evaluated
    if test:
        return evaluator.eval(expr.conseq)
    return evaluator.eval(expr.alt)
