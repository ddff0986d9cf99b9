"""Abstract syntax for Jam programs.

Nodes are immutable. Variables are shared: the reader creates one Variable per
distinct name, so every occurrence of `x` in a program is the same object.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from jam import Expression
from jam.types.values import Primitive
from jam.types.variable import Variable

__all__ = [
    "UnOp", "BinOp", "IntConstant", "BoolConstant", "EmptyConstant", "EMPTY",
    "Variable", "PrimFun", "UnOpApp", "BinOpApp", "App", "Map", "If", "Def", "Let",
]


class UnOp(Enum):
    PLUS = "+"
    MINUS = "-"
    NOT = "~"

    def __str__(self):
        return self.value


class BinOp(Enum):
    PLUS = "+"
    MINUS = "-"
    TIMES = "*"
    DIVIDE = "/"
    EQUALS = "="
    NOT_EQUALS = "!="
    LESS_THAN = "<"
    GREATER_THAN = ">"
    LESS_THAN_EQUALS = "<="
    GREATER_THAN_EQUALS = ">="
    AND = "&"
    OR = "|"

    def __str__(self):
        return self.value


@dataclass(frozen=True)
class IntConstant:
    value: int

    def __str__(self):
        return str(self.value)


@dataclass(frozen=True)
class BoolConstant:
    value: bool

    def __str__(self):
        return "true" if self.value else "false"


@dataclass(frozen=True)
class EmptyConstant:
    def __str__(self):
        return "empty"


EMPTY = EmptyConstant()


@dataclass(frozen=True)
class PrimFun:
    prim: Primitive

    def __str__(self):
        return str(self.prim)


@dataclass(frozen=True)
class UnOpApp:
    op: UnOp
    arg: Expression

    def __str__(self):
        return f"{self.op} {self.arg}"


@dataclass(frozen=True)
class BinOpApp:
    op: BinOp
    left: Expression
    right: Expression

    def __str__(self):
        return f"({self.left} {self.op} {self.right})"


@dataclass(frozen=True)
class App:
    rator: Expression
    args: tuple[Expression, ...]

    def __str__(self):
        return f"{self.rator}({', '.join(str(a) for a in self.args)})"


@dataclass(frozen=True)
class Map:
    params: tuple[Variable, ...]
    body: Expression

    def __str__(self):
        return f"map {', '.join(str(p) for p in self.params)} to {self.body}"


@dataclass(frozen=True)
class If:
    test: Expression
    conseq: Expression
    alt: Expression

    def __str__(self):
        return f"if {self.test} then {self.conseq} else {self.alt}"


@dataclass(frozen=True)
class Def:
    var: Variable
    exp: Expression

    def __str__(self):
        return f"{self.var} := {self.exp};"


@dataclass(frozen=True)
class Let:
    defs: tuple[Def, ...]
    body: Expression

    def __str__(self):
        return f"let {' '.join(str(d) for d in self.defs)} in {self.body}"
