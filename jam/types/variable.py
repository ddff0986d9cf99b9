from __future__ import annotations


class Variable:
    """A Jam variable occurrence.

    The reader creates exactly one Variable per distinct name in a program, so
    variables compare (and hash) by identity.
    """
    __slots__ = ("name",)

    def __init__(self, name: str):
        self.name = name

    def __repr__(self):
        return f"Variable({self.name!r})"

    def __str__(self):
        return self.name
