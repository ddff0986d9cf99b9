"""Core evaluator for Jam.

An Evaluator pairs an environment with a binding policy and a cons policy and
evaluates syntax trees by structural pattern matching. Descending into a let or
a closure body creates a new Evaluator over the extended environment; the
policies never change during one run.
"""

from __future__ import annotations

from jam import Expression, JamValue
from jam.evaluation.apply import apply
from jam.evaluation.cons_policy import ConsPolicy
from jam.evaluation.operators import apply_binary, apply_unary
from jam.evaluation.special_forms import SPECIAL_FORMS
from jam.reader.ast import App, BinOpApp, BoolConstant, EmptyConstant, IntConstant, PrimFun, UnOpApp
from jam.types.bind import BindingPolicy
from jam.types.empty import Empty
from jam.types.environment import Environment
from jam.types.variable import Variable


class Evaluator:
    __slots__ = ("env", "binding_policy", "cons_policy")

    def __init__(
        self,
        binding_policy: BindingPolicy,
        cons_policy: ConsPolicy,
        env: Environment | None = None,
    ):
        self.binding_policy: BindingPolicy = binding_policy
        self.cons_policy: ConsPolicy = cons_policy
        # Avoid a shared default Environment across instances
        self.env: Environment = env if env is not None else Environment()

    def extend(self, env: Environment) -> Evaluator:
        """An evaluator like this one over `env`."""
        return Evaluator(self.binding_policy, self.cons_policy, env)

    def eval(self, expr: Expression) -> JamValue:
        match expr:
            case IntConstant(value) | BoolConstant(value):
                return value
            case EmptyConstant():
                return Empty
            case PrimFun(prim):
                return prim
            case Variable():
                return self.env.lookup(expr).value()
            case UnOpApp(op, arg):
                return apply_unary(op, self.eval(arg))
            case BinOpApp(op, left, right):
                return apply_binary(op, left, right, self)
            case App(rator, args):
                return apply(self.eval(rator), args, self)

        form = SPECIAL_FORMS.get(type(expr))
        if form is None:
            raise TypeError(f"Not a Jam expression: {expr!r}")
        return form(expr, self)

    def __repr__(self) -> str:
        return (
            f"<Evaluator call-by-{self.binding_policy.name} "
            f"cons-{self.cons_policy.name} env={self.env}>"
        )
