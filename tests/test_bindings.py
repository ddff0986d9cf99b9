import pytest

from jam.errors import JamDivideByZero, JamForwardReference, JamUnboundVariable
from jam.evaluation.cons_policy import EAGER
from jam.evaluation.evaluator import Evaluator
from jam.reader.ast import BinOp, BinOpApp, IntConstant
from jam.types.bind import (
    CALL_BY_NAME,
    CALL_BY_NEED,
    CALL_BY_VALUE,
    BindingState,
    NameBinding,
    NeedBinding,
    ValueBinding,
    get_binding_policy,
)
from jam.types.environment import Environment
from jam.types.suspension import Suspension
from jam.types.variable import Variable


class CountingSuspension:
    """Stands in for a Suspension and records how often it is forced."""

    def __init__(self, value=None, error=None, on_force=None):
        self.value = value
        self.error = error
        self.on_force = on_force
        self.forced = 0

    def force(self):
        self.forced += 1
        if self.on_force is not None:
            return self.on_force()
        if self.error is not None:
            raise self.error
        return self.value


def filled(binding_class, suspension, name="x"):
    binding = binding_class(Variable(name))
    binding.fill(suspension)
    return binding


def test_value_binding_forces_once_on_fill():
    susp = CountingSuspension(5)
    binding = filled(ValueBinding, susp)
    assert susp.forced == 1
    assert binding.state is BindingState.EVALUATED
    assert binding.value() == 5
    assert binding.value() == 5
    assert susp.forced == 1


def test_name_binding_forces_on_every_read():
    susp = CountingSuspension(5)
    binding = filled(NameBinding, susp)
    assert susp.forced == 0
    assert [binding.value() for _ in range(3)] == [5, 5, 5]
    assert susp.forced == 3
    assert binding.state is BindingState.SUSPENDED


def test_need_binding_forces_at_most_once():
    susp = CountingSuspension(5)
    binding = filled(NeedBinding, susp)
    assert susp.forced == 0
    assert binding.value() == 5
    assert binding.value() == 5
    assert susp.forced == 1
    assert binding.state is BindingState.EVALUATED


@pytest.mark.parametrize("binding_class", [ValueBinding, NameBinding, NeedBinding])
def test_unfilled_read_is_a_forward_reference(binding_class):
    binding = binding_class(Variable("x"))
    with pytest.raises(JamForwardReference, match="illegal forward reference"):
        binding.value()


@pytest.mark.parametrize("binding_class", [ValueBinding, NameBinding, NeedBinding])
def test_double_fill(binding_class):
    binding = filled(binding_class, CountingSuspension(1))
    with pytest.raises(ValueError):
        binding.fill(CountingSuspension(2))


@pytest.mark.parametrize("binding_class", [NameBinding, NeedBinding])
def test_reentrant_read_is_a_forward_reference(binding_class):
    binding = binding_class(Variable("x"))
    binding.fill(CountingSuspension(on_force=lambda: binding.value()))
    with pytest.raises(JamForwardReference):
        binding.value()
    assert binding.state is BindingState.SUSPENDED


def test_value_binding_reading_itself_during_fill():
    binding = ValueBinding(Variable("x"))
    with pytest.raises(JamForwardReference):
        binding.fill(CountingSuspension(on_force=lambda: binding.value()))


def test_need_binding_retries_after_an_error():
    susp = CountingSuspension(error=JamDivideByZero("Attempt to divide by zero"))
    binding = filled(NeedBinding, susp)
    for _ in range(2):
        with pytest.raises(JamDivideByZero):
            binding.value()
    assert susp.forced == 2
    assert binding.state is BindingState.SUSPENDED


def test_policies_build_their_binding_classes():
    x = Variable("x")
    assert type(CALL_BY_VALUE.make_placeholder(x)) is ValueBinding
    assert type(CALL_BY_NAME.make_placeholder(x)) is NameBinding
    assert type(CALL_BY_NEED.make_placeholder(x)) is NeedBinding
    assert CALL_BY_NEED.make_placeholder(x).state is BindingState.UNFILLED


def test_policy_lookup_by_name():
    assert get_binding_policy("need") is CALL_BY_NEED
    assert get_binding_policy(CALL_BY_NAME) is CALL_BY_NAME
    with pytest.raises(ValueError):
        get_binding_policy("reference")


# -----------------------------------------------------
# Environment
# -----------------------------------------------------

def test_inner_frame_shadows_outer():
    x = Variable("x")
    outer_binding, inner_binding = ValueBinding(x), ValueBinding(x)
    outer_binding.fill(CountingSuspension(1))
    inner_binding.fill(CountingSuspension(2))
    outer = Environment([outer_binding])
    inner = outer.extend([inner_binding])
    assert inner.lookup(x).value() == 2
    assert outer.lookup(x).value() == 1
    assert inner.find(x) is inner


def test_lookup_of_unbound_variable():
    with pytest.raises(JamUnboundVariable, match="variable y is unbound"):
        Environment().lookup(Variable("y"))


def test_variables_are_keyed_by_identity():
    a1, a2 = Variable("a"), Variable("a")
    binding = ValueBinding(a1)
    binding.fill(CountingSuspension(1))
    env = Environment([binding])
    assert env.lookup(a1) is binding
    with pytest.raises(JamUnboundVariable):
        env.lookup(a2)


def test_iteration_runs_innermost_first():
    a, b = ValueBinding(Variable("a")), ValueBinding(Variable("b"))
    env = Environment([a]).extend([b])
    assert list(env) == [b, a]


def test_extended_frames_share_outer_bindings():
    x = Variable("x")
    binding = NameBinding(x)
    base = Environment([binding])
    left, right = base.extend([]), base.extend([])
    binding.fill(CountingSuspension(7))
    assert left.lookup(x) is right.lookup(x) is binding
    assert left.lookup(x).value() == 7


def test_environment_rendering():
    binding = ValueBinding(Variable("x"))
    env = Environment().extend([binding])
    assert str(env) == "{[x, unfilled]} -> ..."
    assert repr(env) == "<Environment chain: {[x, unfilled]} -> {}>"


def test_suspension_reruns_in_its_evaluator():
    x = Variable("x")
    binding = NameBinding(x)
    binding.fill(CountingSuspension(20))
    evaluator = Evaluator(CALL_BY_NAME, EAGER, Environment([binding]))
    susp = Suspension(BinOpApp(BinOp.PLUS, x, IntConstant(1)), evaluator)
    assert susp.force() == 21
    assert susp.force() == 21
    assert binding._suspension.forced == 2
    assert repr(susp) == "<(x + 1)>"
