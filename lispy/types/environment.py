"""Runtime environment for Lispy.

The Environment stores bindings of names to values and supports nested scopes
via a `parent` link. The parent is a plain, non-owning reference: a child never
copies or mutates its parent's frame, and copying an environment keeps the same
parent. The root environment additionally holds the builtins, whose names are
protected from redefinition through the `protected` set shared by all copies.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterator, Optional

from loguru import logger

from lispy import LispValue, BuiltinFn
from lispy.types.symbol import Symbol
from lispy.types.values import Builtin, ErrorKind, LispError, copy_value


class Environment:
    """Hierarchical mapping from names to Lispy values."""

    __slots__ = ("vars", "parent", "protected")

    def __init__(
        self,
        parent: Optional[Environment] = None,
        protected: frozenset[str] = frozenset(),
    ):
        self.vars: dict[str, LispValue] = {}
        self.parent: Environment | None = parent
        # Children of a root share its protected-name set
        self.protected: frozenset[str] = (
            parent.protected if parent is not None and not protected else protected
        )

    def root(self) -> Environment:
        env = self
        while env.parent is not None:
            env = env.parent
        return env

    def child(self) -> Environment:
        return Environment(parent=self)

    def lookup(self, name: Symbol | str) -> LispValue:
        """Return a copy of the value bound to `name` in this frame or an outer one.

        An unbound name yields an Error value rather than raising.
        """
        key = str(name)
        env: Optional[Environment] = self
        while env is not None:
            if key in env.vars:
                return copy_value(env.vars[key])
            env = env.parent
        return LispError(ErrorKind.UNBOUND_SYMBOL, f"Unbound symbol '{key}'")

    def define_local(self, name: Symbol | str, value: LispValue) -> None:
        """Bind `name` to a copy of `value` in this frame, replacing any binding."""
        self.vars[str(name)] = copy_value(value)

    def define_global(self, name: Symbol | str, value: LispValue) -> None:
        """Bind `name` to a copy of `value` in the root frame."""
        self.root().define_local(name, value)

    def register_builtin(self, name: str, fn: BuiltinFn) -> None:
        """Install `fn` as a builtin in the root frame and protect its name."""
        root = self.root()
        root.define_local(name, Builtin(name, fn))
        root.protected = root.protected | {name}
        logger.debug("builtin registered: {}", name)

    def is_protected(self, name: Symbol | str) -> bool:
        return str(name) in self.protected

    def copy(self) -> Environment:
        """Deep-copy the bindings; keep the parent and share the protected set."""
        env = Environment(parent=self.parent, protected=self.protected)
        env.vars = {k: copy_value(v) for k, v in self.vars.items()}
        return env

    def names(self) -> Iterator[str]:
        """Names bound in this frame, in definition order."""
        return iter(self.vars)

    def __contains__(self, name: Symbol | str) -> bool:
        return str(name) in self.vars

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        first = True
        for k, v in self.vars.items():
            if not first:
                buffer.write(", ")
            buffer.write(f"{k}: {v}")
            first = False
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.parent is not None:
                buffer.write(" -> ...")  # indicate parent exists
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Detailed chain representation for debugging purposes."""
        chain = []
        env: Optional[Environment] = self
        while env is not None:
            with StringIO() as env_buf:
                env._write_vars(env_buf)
                chain.append(env_buf.getvalue())
            env = env.parent
        return f"<Environment chain: {' -> '.join(chain)}>"
