"""Runtime values for Jam.

Integers and booleans are plain Python ``int`` and ``bool``; functions are
either a ``Closure`` or one of the ``Primitive`` members. The empty list and
cons cells, with list predicates and structural equality, live in
jam.types.empty and jam.types.cons.

Because ``bool`` is a subclass of ``int`` in Python, the predicates below
compare exact types so that ``true`` is never mistaken for a number.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from jam import JamValue

if TYPE_CHECKING:
    from jam.reader.ast import Map
    from jam.types.environment import Environment

_INT64_SPAN = 1 << 64
_INT64_MIN = -(1 << 63)


class Primitive(Enum):
    """The built-in primitive functions, which are also first-class values."""

    FUNCTION_P = "function?"
    NUMBER_P = "number?"
    LIST_P = "list?"
    CONS_P = "cons?"
    EMPTY_P = "empty?"
    ARITY = "arity"
    CONS = "cons"
    FIRST = "first"
    REST = "rest"

    @property
    def arity(self) -> int:
        return 2 if self is Primitive.CONS else 1

    def __repr__(self):
        return f"Primitive({self.value!r})"

    def __str__(self):
        return self.value


class Closure:
    """A map (lambda) paired with the environment it was defined in."""

    __slots__ = ("lam", "env")

    def __init__(self, lam: Map, env: Environment):
        self.lam: Map = lam
        # Shared with every other closure/suspension created in this scope
        self.env: Environment = env

    @property
    def params(self):
        return self.lam.params

    @property
    def body(self):
        return self.lam.body

    @property
    def arity(self) -> int:
        return len(self.lam.params)

    def __str__(self) -> str:
        return f"closure<{self.lam}>"

    def __repr__(self) -> str:
        return str(self)


def to_int64(n: int) -> int:
    """Wrap an integer to signed 64-bit two's complement."""
    return (n - _INT64_MIN) % _INT64_SPAN + _INT64_MIN


def is_int(value: JamValue) -> bool:
    return type(value) is int


def is_bool(value: JamValue) -> bool:
    return type(value) is bool


def is_function(value: JamValue) -> bool:
    return isinstance(value, (Closure, Primitive))


def to_jam_string(value: JamValue) -> str:
    """Render a value the way Jam prints it."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
