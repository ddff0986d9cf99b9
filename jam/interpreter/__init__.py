from __future__ import annotations

import logging
import sys

from jam import Expression, JamValue
from jam.config import get_recursion_limit
from jam.evaluation.cons_policy import EAGER, LAZY_NAME, LAZY_NEED, ConsPolicy, get_cons_policy
from jam.evaluation.evaluator import Evaluator
from jam.reader.parser import read
from jam.types.bind import CALL_BY_NAME, CALL_BY_NEED, CALL_BY_VALUE, BindingPolicy, get_binding_policy

logger = logging.getLogger(__name__)

# facade method name -> (binding policy, cons policy)
EVALUATION_MODES: dict[str, tuple[BindingPolicy, ConsPolicy]] = {
    "value_value": (CALL_BY_VALUE, EAGER),
    "value_name": (CALL_BY_VALUE, LAZY_NAME),
    "value_need": (CALL_BY_VALUE, LAZY_NEED),
    "name_value": (CALL_BY_NAME, EAGER),
    "name_name": (CALL_BY_NAME, LAZY_NAME),
    "name_need": (CALL_BY_NAME, LAZY_NEED),
    "need_value": (CALL_BY_NEED, EAGER),
    "need_name": (CALL_BY_NEED, LAZY_NAME),
    "need_need": (CALL_BY_NEED, LAZY_NEED),
}


def _ensure_recursion_limit() -> None:
    limit = get_recursion_limit()
    if sys.getrecursionlimit() < limit:
        sys.setrecursionlimit(limit)


class Interpreter:
    """
    Evaluates one Jam program in any of nine ways, one per combination of
    binding policy (value, name, need) and cons policy (eager, lazy name,
    lazy need).

    The program is given as a syntax tree or as source text, which is read
    once. Every evaluation starts from an empty environment, so the methods
    can be called any number of times in any order.
    """

    def __init__(self, program: Expression | str):
        self.program: Expression = read(program) if isinstance(program, str) else program

    def run(
        self,
        binding: BindingPolicy | str = CALL_BY_VALUE,
        cons: ConsPolicy | str = EAGER,
    ) -> JamValue:
        """Evaluate the program with the given policies (objects or names)."""
        binding_policy = get_binding_policy(binding)
        cons_policy = get_cons_policy(cons)
        _ensure_recursion_limit()
        logger.debug(
            "evaluating with call-by-%s binding and %s cons", binding_policy.name, cons_policy.name
        )
        result = Evaluator(binding_policy, cons_policy).eval(self.program)
        logger.debug("evaluation produced a %s", type(result).__name__)
        return result

    def value_value(self) -> JamValue:
        return self.run(CALL_BY_VALUE, EAGER)

    def value_name(self) -> JamValue:
        return self.run(CALL_BY_VALUE, LAZY_NAME)

    def value_need(self) -> JamValue:
        return self.run(CALL_BY_VALUE, LAZY_NEED)

    def name_value(self) -> JamValue:
        return self.run(CALL_BY_NAME, EAGER)

    def name_name(self) -> JamValue:
        return self.run(CALL_BY_NAME, LAZY_NAME)

    def name_need(self) -> JamValue:
        return self.run(CALL_BY_NAME, LAZY_NEED)

    def need_value(self) -> JamValue:
        return self.run(CALL_BY_NEED, EAGER)

    def need_name(self) -> JamValue:
        return self.run(CALL_BY_NEED, LAZY_NAME)

    def need_need(self) -> JamValue:
        return self.run(CALL_BY_NEED, LAZY_NEED)

    # Binding policy alone; lists are eager
    call_by_value = value_value
    call_by_name = name_value
    call_by_need = need_value
