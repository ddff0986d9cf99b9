"""Bindings and binding policies for Jam.

A Binding is one slot in an environment frame. Its state moves through

    UNFILLED -> SUSPENDED -> (FORCING -> SUSPENDED)* for call-by-name
    UNFILLED -> SUSPENDED -> FORCING -> EVALUATED   for call-by-need
    UNFILLED -> EVALUATED                           for call-by-value

Reading an UNFILLED slot is an illegal forward reference. Reading a slot that
is FORCING means its own suspension needs its value, which can never finish,
so that is reported as a forward reference too.

A BindingPolicy is the factory the evaluator uses to create bindings for
function parameters and let definitions.
"""

from __future__ import annotations

from enum import Enum, auto
from typing import TYPE_CHECKING, Sequence

from jam import Expression, JamValue
from jam.errors import JamArityError, JamForwardReference
from jam.types.environment import Environment
from jam.types.suspension import Suspension
from jam.types.variable import Variable

if TYPE_CHECKING:
    from jam.evaluation.evaluator import Evaluator
    from jam.types.values import Closure


class BindingState(Enum):
    UNFILLED = auto()
    SUSPENDED = auto()
    FORCING = auto()
    EVALUATED = auto()


class Binding:
    """Base class: a variable plus policy-specific storage."""

    __slots__ = ("variable", "state", "_value", "_suspension")

    def __init__(self, variable: Variable):
        self.variable: Variable = variable
        self.state: BindingState = BindingState.UNFILLED
        self._value: JamValue = None
        self._suspension: Suspension | None = None

    def value(self) -> JamValue:
        raise NotImplementedError

    def fill(self, suspension: Suspension) -> None:
        raise NotImplementedError

    def _check_unfilled(self) -> None:
        if self.state is not BindingState.UNFILLED:
            raise ValueError(f"Binding for {self.variable} is already filled")

    def _forward_reference(self) -> JamValue:
        raise JamForwardReference(
            f"Attempt to evaluate variable {self.variable} bound to null, "
            "indicating an illegal forward reference"
        )

    def __repr__(self) -> str:
        return f"[{self.variable}, {self.state.name.lower()}]"


class ValueBinding(Binding):
    """Call-by-value: the suspension is forced as soon as it is installed."""

    __slots__ = ()

    def value(self) -> JamValue:
        if self.state is not BindingState.EVALUATED:
            return self._forward_reference()
        return self._value

    def fill(self, suspension: Suspension) -> None:
        self._check_unfilled()
        self._value = suspension.force()
        self.state = BindingState.EVALUATED


class NameBinding(Binding):
    """Call-by-name: the suspension is forced on every read."""

    __slots__ = ()

    def value(self) -> JamValue:
        if self.state is not BindingState.SUSPENDED:
            return self._forward_reference()
        self.state = BindingState.FORCING
        try:
            return self._suspension.force()
        finally:
            self.state = BindingState.SUSPENDED

    def fill(self, suspension: Suspension) -> None:
        self._check_unfilled()
        self._suspension = suspension
        self.state = BindingState.SUSPENDED


class NeedBinding(NameBinding):
    """Call-by-need: the first read forces and caches, later reads hit the cache."""

    __slots__ = ()

    def value(self) -> JamValue:
        if self.state is BindingState.EVALUATED:
            return self._value
        if self.state is not BindingState.SUSPENDED:
            return self._forward_reference()
        self.state = BindingState.FORCING
        try:
            value = self._suspension.force()
        except BaseException:
            self.state = BindingState.SUSPENDED
            raise
        self._value = value
        self._suspension = None  # release for GC
        self.state = BindingState.EVALUATED
        return value


class BindingPolicy:
    """Factory for the bindings of one evaluation strategy."""

    __slots__ = ("name", "binding_class")

    def __init__(self, name: str, binding_class: type[Binding]):
        self.name = name
        self.binding_class = binding_class

    def make_binding(self, variable: Variable, expr: Expression, evaluator: Evaluator) -> Binding:
        """Bind variable to expr, evaluated (now or later) by evaluator."""
        binding = self.binding_class(variable)
        binding.fill(Suspension(expr, evaluator))
        return binding

    def make_placeholder(self, variable: Variable) -> Binding:
        """An unfilled binding, completed later with Binding.fill."""
        return self.binding_class(variable)

    def __repr__(self) -> str:
        return f"<BindingPolicy call-by-{self.name}>"


CALL_BY_VALUE = BindingPolicy("value", ValueBinding)
CALL_BY_NAME = BindingPolicy("name", NameBinding)
CALL_BY_NEED = BindingPolicy("need", NeedBinding)

BINDING_POLICIES: dict[str, BindingPolicy] = {
    p.name: p for p in (CALL_BY_VALUE, CALL_BY_NAME, CALL_BY_NEED)
}


def get_binding_policy(policy: BindingPolicy | str) -> BindingPolicy:
    if isinstance(policy, BindingPolicy):
        return policy
    try:
        return BINDING_POLICIES[policy]
    except KeyError:
        raise ValueError(
            f"Unknown binding policy {policy!r}; expected one of {sorted(BINDING_POLICIES)}"
        ) from None


def bind_arguments(
    closure: Closure,
    arg_exprs: Sequence[Expression],
    evaluator: Evaluator,
) -> Environment:
    """
    Bind a closure's formal parameters to unevaluated argument expressions.

    Each binding is created by the evaluator's binding policy, with the
    arguments evaluated (now or later) in the caller's context. Returns a new
    frame whose outer is the closure's captured environment.
    """
    params = closure.params
    if len(params) != len(arg_exprs):
        raise JamArityError(f"{closure} applied to {len(arg_exprs)} arguments")
    policy = evaluator.binding_policy
    bindings = [policy.make_binding(param, arg, evaluator) for param, arg in zip(params, arg_exprs)]
    return closure.env.extend(bindings)
