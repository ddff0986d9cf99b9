"""Runtime environment for Jam.

An Environment is one frame of Bindings (introduced together by a single let or
function application) plus a link to the enclosing frame. Frames are never
modified after construction; extending an environment builds a new frame that
shares the old chain, so every closure and suspension created in a scope sees
the very same Binding objects.
"""

from __future__ import annotations

from io import StringIO
from typing import TYPE_CHECKING, Iterable, Iterator, Optional

from jam.errors import JamUnboundVariable
from jam.types.variable import Variable

if TYPE_CHECKING:
    from jam.types.bind import Binding


class Environment:
    """Chain of frames mapping Variables (by identity) to Bindings."""

    __slots__ = ("vars", "outer")

    def __init__(self, bindings: Iterable[Binding] = (), outer: Optional[Environment] = None):
        self.vars: dict[Variable, Binding] = {b.variable: b for b in bindings}
        self.outer: Environment | None = outer

    def extend(self, bindings: Iterable[Binding]) -> Environment:
        """Return a new innermost frame holding `bindings`."""
        return Environment(bindings, outer=self)

    def find(self, variable: Variable) -> Optional[Environment]:
        """Find the nearest frame in the chain that binds `variable`."""
        env: Optional[Environment] = self
        while env is not None:
            if variable in env.vars:
                return env
            env = env.outer
        return None

    def lookup(self, variable: Variable) -> Binding:
        """Return the innermost binding of `variable`.

        Raises JamUnboundVariable if no frame binds it.
        """
        env = self.find(variable)
        if env is None:
            raise JamUnboundVariable(f"variable {variable} is unbound")
        return env.vars[variable]

    def __iter__(self) -> Iterator[Binding]:
        """Bindings from the innermost frame outwards."""
        env: Optional[Environment] = self
        while env is not None:
            yield from env.vars.values()
            env = env.outer

    def _write_vars(self, buffer: StringIO) -> None:
        buffer.write("{")
        buffer.write(", ".join(repr(b) for b in self.vars.values()))
        buffer.write("}")

    def __str__(self) -> str:
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")  # indicate parent exists
            return buffer.getvalue()

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            env = self
            chain = []
            while env is not None:
                env_buf = StringIO()
                env._write_vars(env_buf)
                chain.append(env_buf.getvalue())
                env = env.outer
            buffer.write(" -> ".join(chain))
            buffer.write(">")
            return buffer.getvalue()
