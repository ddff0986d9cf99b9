from __future__ import annotations

from typing import TYPE_CHECKING

from jam import JamValue
from jam.reader.ast import Map
from jam.types.values import Closure

if TYPE_CHECKING:
    from jam.evaluation.evaluator import Evaluator


def map_form(expr: Map, evaluator: Evaluator) -> JamValue:
    # Parameters are bound at application time, in a frame on top of this env
    return Closure(expr, evaluator.env)
