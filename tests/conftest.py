import pytest

from jam.interpreter import EVALUATION_MODES, Interpreter
from jam.types.values import to_jam_string

# Tests that ask for `mode` (directly or through `run`) run nine times, once per
# Interpreter facade method: value_value, value_name, ..., need_need.
# `run(source)` reads the program, evaluates it with the current mode and
# returns the printed result, so a single test body checks all combinations.

LAZY_CONS_MODES = [m for m, (_, cons) in EVALUATION_MODES.items() if cons.name != "eager"]


@pytest.fixture(params=list(EVALUATION_MODES))
def mode(request):
    return request.param


@pytest.fixture
def run(mode):
    def _run(source: str) -> str:
        return to_jam_string(getattr(Interpreter(source), mode)())
    return _run


@pytest.fixture(autouse=True)
def _default_config(monkeypatch):
    # Keep the developer's shell settings out of the printed results
    monkeypatch.delenv("JAM_PRINT_DEPTH", raising=False)
    monkeypatch.delenv("JAM_RECURSION_LIMIT", raising=False)
