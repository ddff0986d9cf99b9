import logging
import sys

import pytest

from jam.errors import JamSyntaxError, JamTypeError
from jam.evaluation.cons_policy import EAGER, LAZY_NEED
from jam.interpreter import EVALUATION_MODES, Interpreter
from jam.reader.ast import BinOp, BinOpApp, IntConstant
from jam.types.bind import CALL_BY_NAME
from jam.types.values import to_jam_string


def test_accepts_a_syntax_tree():
    tree = BinOpApp(BinOp.PLUS, IntConstant(2), IntConstant(3))
    assert Interpreter(tree).need_need() == 5


def test_reads_source_once():
    with pytest.raises(JamSyntaxError):
        Interpreter("let x := ; in x")


@pytest.mark.parametrize(
    "binding,cons",
    [("value", "eager"), ("name", "name"), ("need", "need"), (CALL_BY_NAME, LAZY_NEED), ("need", "value")],
)
def test_run_by_policy_or_name(binding, cons):
    assert Interpreter("first(cons(2 * 21, empty))").run(binding, cons) == 42


def test_run_defaults_to_value_and_eager():
    interp = Interpreter("first(cons(1, 2))")
    with pytest.raises(JamTypeError):
        interp.run()
    assert interp.run("value", "name") == 1


@pytest.mark.parametrize("binding,cons", [("reference", "eager"), ("value", "lazy")])
def test_run_rejects_unknown_policies(binding, cons):
    with pytest.raises(ValueError):
        Interpreter("1").run(binding, cons)


def test_call_by_aliases_use_eager_lists():
    interp = Interpreter("let y := x; x := cons(1, empty); in y")
    assert Interpreter.call_by_value is Interpreter.value_value
    assert Interpreter.call_by_name is Interpreter.name_value
    assert Interpreter.call_by_need is Interpreter.need_value
    assert to_jam_string(interp.call_by_name()) == "(1)"
    assert to_jam_string(interp.call_by_need()) == "(1)"


def test_modes_match_their_policies():
    for mode, (binding, cons) in EVALUATION_MODES.items():
        b, c = mode.split("_")
        assert binding.name == b
        assert cons.name == ("eager" if c == "value" else c)
    assert EVALUATION_MODES["need_value"][1] is EAGER


def test_every_mode_can_run_twice():
    interp = Interpreter("let l := cons(1, cons(2, empty)); in cons(0, l)")
    for _ in range(2):
        for mode in EVALUATION_MODES:
            assert to_jam_string(getattr(interp, mode)()) == "(0 1 2)"


def test_raises_the_recursion_limit(monkeypatch):
    monkeypatch.setenv("JAM_RECURSION_LIMIT", str(sys.getrecursionlimit() + 100))
    expected = sys.getrecursionlimit() + 100
    try:
        Interpreter("1").value_value()
        assert sys.getrecursionlimit() == expected
    finally:
        sys.setrecursionlimit(expected - 100)


def test_logs_the_policies(caplog):
    with caplog.at_level(logging.DEBUG, logger="jam.interpreter"):
        Interpreter("1").name_need()
    assert "call-by-name binding and need cons" in caplog.text
