# Core type aliases for Jam's data model.
# Runtime values are plain Python objects where Python has a natural one
# (int for integers, bool for booleans) and small classes otherwise
# (Empty, Cons, Closure, Primitive). Syntax trees are the frozen dataclasses
# of jam.reader.ast.
#
# Naming guidance:
# - Expression: a syntax tree node, as produced by the reader.
# - JamValue:   an evaluated runtime value.

from typing import Any

__version__ = "0.3.0"

# Runtime value alias
JamValue = Any
# Syntax tree alias
Expression = Any
