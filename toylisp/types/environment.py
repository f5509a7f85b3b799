"""Runtime environment for toylisp.

The Environment stores bindings of symbol names to evaluated Lisp values and
supports nested scopes via an `outer` link. The chain is acyclic by
construction: `outer` is fixed when an environment is created and parents
never point back at their children.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterator, Optional

from toylisp import LispValue
from toylisp.errors import ToyLispUnboundSymbol


class Environment:
    """Hierarchical mapping from symbol names to Lisp values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[str, LispValue] = {}
        self.outer: Environment | None = outer

    def child(self) -> Environment:
        """Create an empty environment whose parent is this one."""
        return Environment(outer=self)

    def define(self, name: str, value: LispValue) -> None:
        """Bind `name` to `value` in this frame, overwriting any previous binding.

        Ancestor frames are never touched, so a binding here shadows one with
        the same name further out.
        """
        self.vars[str(name)] = value

    def find(self, name: str) -> Optional[Environment]:
        """Find the nearest environment in the chain that binds `name`."""
        env: Optional[Environment] = self
        while env is not None:
            if name in env.vars:
                return env
            env = env.outer
        return None

    def lookup(self, name: str) -> LispValue:
        """Look up the value bound to `name`, innermost frame first.

        Raises ToyLispUnboundSymbol if no frame in the chain binds it.
        """
        env = self.find(name)
        if env is None:
            raise ToyLispUnboundSymbol(name)
        return env.vars[name]

    def __contains__(self, name: str) -> bool:
        return self.find(name) is not None

    def chain(self) -> Iterator[Environment]:
        env: Optional[Environment] = self
        while env is not None:
            yield env
            env = env.outer

    def root(self) -> Environment:
        env = self
        while env.outer is not None:
            env = env.outer
        return env

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            frames = []
            for env in self.chain():
                frame_buf = StringIO()
                env._write_vars(frame_buf)
                frames.append(frame_buf.getvalue())
            buffer.write(" -> ".join(frames))
            buffer.write(">")
            return buffer.getvalue()
