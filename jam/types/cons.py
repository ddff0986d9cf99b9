"""Cons cells for Jam lists.

``Cons`` holds materialized head and tail values. ``LazyNameCons`` holds two
suspensions and forces them on every access; ``LazyNeedCons`` forces each of
them at most once and then drops the suspension.
"""

from __future__ import annotations

from io import StringIO
from typing import TYPE_CHECKING, Iterator

from jam import JamValue
from jam.config import get_print_depth
from jam.errors import JamTypeError
from jam.types.empty import Empty, EmptyType
from jam.types.values import is_function, to_jam_string

if TYPE_CHECKING:
    from jam.types.suspension import Suspension


def check_list(value: JamValue) -> JamValue:
    """Return value if it is a Jam list, otherwise raise JamTypeError."""
    if is_list(value):
        return value
    raise JamTypeError(
        f"The second argument to lazy cons is `{to_jam_string(value)}' which is not a list"
    )


class Cons:
    """A non-empty Jam list."""

    __slots__ = ("_first", "_rest")

    def __init__(self, first: JamValue, rest: JamValue):
        self._first = first
        self._rest = rest

    def first(self) -> JamValue:
        return self._first

    def rest(self) -> JamValue:
        return self._rest

    def __iter__(self) -> Iterator[JamValue]:
        cell = self
        while isinstance(cell, Cons):
            yield cell.first()
            cell = cell.rest()

    def __eq__(self, other) -> bool:
        return jam_equal(self, other)

    __hash__ = None

    def __str__(self) -> str:
        """Depth-bounded rendering; elements past the print depth become `...`."""
        max_depth = get_print_depth()
        with StringIO() as buffer:
            buffer.write("(")
            buffer.write(to_jam_string(self.first()))
            printed = 1
            tail = self.rest()
            while isinstance(tail, Cons):
                if printed >= max_depth:
                    buffer.write(" ...")
                    break
                buffer.write(" ")
                buffer.write(to_jam_string(tail.first()))
                printed += 1
                tail = tail.rest()
            buffer.write(")")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return str(self)


class LazyNameCons(Cons):
    """A cons whose head and tail are re-evaluated on every access."""

    __slots__ = ("_first_susp", "_rest_susp")

    def __init__(self, first_susp: Suspension, rest_susp: Suspension):
        super().__init__(None, None)
        self._first_susp: Suspension | None = first_susp
        self._rest_susp: Suspension | None = rest_susp

    def first(self) -> JamValue:
        return self._first_susp.force()

    def rest(self) -> JamValue:
        return check_list(self._rest_susp.force())


class LazyNeedCons(LazyNameCons):
    """A cons whose head and tail are each evaluated at most once."""

    __slots__ = ()

    def first(self) -> JamValue:
        if self._first_susp is not None:
            self._first = self._first_susp.force()
            self._first_susp = None  # release for GC
        return self._first

    def rest(self) -> JamValue:
        if self._rest_susp is not None:
            self._rest = check_list(self._rest_susp.force())
            self._rest_susp = None
        return self._rest


def is_list(value: JamValue) -> bool:
    return value is Empty or isinstance(value, Cons)


def jam_equal(a: JamValue, b: JamValue) -> bool:
    """Structural equality for Jam values.

    Integers and booleans compare by value (never with each other), lists
    element-wise, and functions by identity. Comparing lazy lists forces
    their elements.
    """
    if a is b:
        return True
    if isinstance(a, Cons) and isinstance(b, Cons):
        return jam_equal(a.first(), b.first()) and jam_equal(a.rest(), b.rest())
    if is_function(a) or is_function(b):
        return False
    if isinstance(a, EmptyType) or isinstance(b, EmptyType):
        return isinstance(a, EmptyType) and isinstance(b, EmptyType)
    if type(a) != type(b):
        return False
    return a == b
