from __future__ import annotations

from typing import TYPE_CHECKING

from jam import JamValue
from jam.reader.ast import Let
from jam.types.suspension import Suspension

if TYPE_CHECKING:
    from jam.evaluation.evaluator import Evaluator


def let_form(expr: Let, evaluator: Evaluator) -> JamValue:
    """Parallel, mutually recursive let.

    All names are bound at once to unfilled placeholders, then each placeholder
    is filled, in textual order, with a suspension over its right-hand side in
    the extended environment. Whether and when a right-hand side actually runs
    is up to the binding policy: call-by-value forces it during the fill, so a
    definition that reads a later sibling (or itself) is a forward reference.
    """
    policy = evaluator.binding_policy
    bindings = [policy.make_placeholder(d.var) for d in expr.defs]
    inner = evaluator.extend(evaluator.env.extend(bindings))

    for binding, definition in zip(bindings, expr.defs):
        binding.fill(Suspension(definition.exp, inner))

    return inner.eval(expr.body)
