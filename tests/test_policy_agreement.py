from hypothesis import given, settings, strategies as st

from jam.interpreter import EVALUATION_MODES, Interpreter
from jam.types.values import to_jam_string

NAMES = ("a", "b", "c")


@st.composite
def int_programs(draw, scope=frozenset(), depth=3):
    """Closed, error-free integer programs.

    A let right-hand side never mentions the name it defines, so no program
    contains a forward reference and every mode must print the same result.
    """
    kinds = ["int"]
    if scope:
        kinds.append("var")
    if depth > 0:
        kinds += ["binop", "if", "let", "map", "first"]
    kind = draw(st.sampled_from(kinds))
    sub = lambda s=scope: int_programs(s, depth - 1)

    if kind == "int":
        return str(draw(st.integers(min_value=0, max_value=20)))
    if kind == "var":
        return draw(st.sampled_from(sorted(scope)))
    if kind == "binop":
        op = draw(st.sampled_from(["+", "-", "*"]))
        return f"({draw(sub())} {op} {draw(sub())})"
    if kind == "if":
        rel = draw(st.sampled_from(["<", "<=", "=", "!="]))
        return f"(if {draw(sub())} {rel} {draw(sub())} then {draw(sub())} else {draw(sub())})"
    if kind == "let":
        name = draw(st.sampled_from(NAMES))
        rhs = draw(sub(scope - {name}))
        body = draw(sub(scope | {name}))
        return f"(let {name} := {rhs}; in {body})"
    if kind == "map":
        name = draw(st.sampled_from(NAMES))
        return f"(map {name} to {draw(sub(scope | {name}))})({draw(sub())})"
    return f"first(cons({draw(sub())}, empty))"


@settings(max_examples=60, deadline=None)
@given(int_programs())
def test_all_modes_agree(source):
    interp = Interpreter(source)
    results = {mode: to_jam_string(getattr(interp, mode)()) for mode in EVALUATION_MODES}
    assert len(set(results.values())) == 1, results
