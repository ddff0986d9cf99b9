"""Cons evaluation policies.

The policy decides how `cons(a, b)` treats its two argument expressions,
independently of how variables are bound:

- eager:     evaluate both now and check that b is a list
- lazy name: suspend both; every first/rest re-evaluates
- lazy need: suspend both; first/rest evaluate at most once each
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from jam import Expression, JamValue
from jam.errors import JamTypeError
from jam.types.cons import Cons, LazyNameCons, LazyNeedCons, is_list
from jam.types.suspension import Suspension
from jam.types.values import to_jam_string

if TYPE_CHECKING:
    from jam.evaluation.evaluator import Evaluator


class ConsPolicy:
    name: str = ""

    def eval_cons(self, head: Expression, tail: Expression, evaluator: Evaluator) -> JamValue:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"<ConsPolicy {self.name}>"


class EagerCons(ConsPolicy):
    name = "eager"

    def eval_cons(self, head: Expression, tail: Expression, evaluator: Evaluator) -> JamValue:
        first = evaluator.eval(head)
        rest = evaluator.eval(tail)
        if not is_list(rest):
            raise JamTypeError(f"Second argument {to_jam_string(rest)} to `cons' is not a list")
        return Cons(first, rest)


class LazyNameConsPolicy(ConsPolicy):
    name = "name"

    def eval_cons(self, head: Expression, tail: Expression, evaluator: Evaluator) -> JamValue:
        return LazyNameCons(Suspension(head, evaluator), Suspension(tail, evaluator))


class LazyNeedConsPolicy(ConsPolicy):
    name = "need"

    def eval_cons(self, head: Expression, tail: Expression, evaluator: Evaluator) -> JamValue:
        return LazyNeedCons(Suspension(head, evaluator), Suspension(tail, evaluator))


EAGER = EagerCons()
LAZY_NAME = LazyNameConsPolicy()
LAZY_NEED = LazyNeedConsPolicy()

CONS_POLICIES: dict[str, ConsPolicy] = {
    "eager": EAGER,
    "value": EAGER,
    "name": LAZY_NAME,
    "need": LAZY_NEED,
}


def get_cons_policy(policy: ConsPolicy | str) -> ConsPolicy:
    if isinstance(policy, ConsPolicy):
        return policy
    try:
        return CONS_POLICIES[policy]
    except KeyError:
        raise ValueError(
            f"Unknown cons policy {policy!r}; expected one of {sorted(CONS_POLICIES)}"
        ) from None
