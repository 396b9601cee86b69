"""Closure representation for Lispy."""

from __future__ import annotations

from io import StringIO

from lispy.types.environment import Environment
from lispy.types.values import ExprList, Function, copy_value


class Closure(Function):
    """A first-class user function with formal parameters, body, and closure env.

    `env` collects the bindings supplied so far; a partially applied closure is
    just a Closure whose formals list has been shortened and whose env holds the
    bound arguments.
    """

    __slots__ = ("formals", "body", "env")

    def __init__(
        self, formals: ExprList, body: ExprList, env: Environment | None = None
    ):
        self.formals: ExprList = formals
        self.body: ExprList = body
        # Avoid shared default Environment across instances
        self.env: Environment = env if env is not None else Environment()

    def copy(self) -> Closure:
        return Closure(copy_value(self.formals), copy_value(self.body), self.env.copy())

    def __eq__(self, other) -> bool:
        return (
            isinstance(other, Closure)
            and self.formals == other.formals
            and self.body == other.body
        )

    __hash__ = None

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("(\\ ")
            buffer.write(str(self.formals))
            buffer.write(" ")
            buffer.write(str(self.body))
            buffer.write(")")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Return the Lispy-style representation of the closure."""
        return str(self)
