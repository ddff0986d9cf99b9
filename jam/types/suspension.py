from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from jam import Expression, JamValue

if TYPE_CHECKING:
    from jam.evaluation.evaluator import Evaluator


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class Suspension:
    """An unevaluated expression together with the evaluator (environment and
    policies) needed to evaluate it later. Forcing re-runs the expression every
    time; caching is the owner's business."""

    expr: Expression
    evaluator: Evaluator

    def force(self) -> JamValue:
        return self.evaluator.eval(self.expr)

    def __repr__(self) -> str:
        return f"<{self.expr}>"
