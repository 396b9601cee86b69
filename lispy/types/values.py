"""Value model for Lispy.

Numbers are plain Python ints kept within the signed 64-bit range. The other
variants are small classes: LispError, ExprList, Builtin (and Closure, in
lispy.types.lambda_fn) and the Exit sentinel. Symbols live in
lispy.types.symbol.

Values are never aliased once stored: every binding and every list element owns
its value, so storing goes through copy_value().
"""

from __future__ import annotations

from enum import Enum
from io import StringIO
from typing import Iterable

from lispy import LispValue, BuiltinFn
from lispy.types.symbol import Symbol

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


def to_int64(n: int) -> int:
    """Wrap `n` to a signed 64-bit integer (two's complement)."""
    return ((n - INT64_MIN) % 2**64) + INT64_MIN


class ErrorKind(Enum):
    UNBOUND_SYMBOL = "unbound-symbol"
    NOT_A_FUNCTION = "not-a-function"
    WRONG_ARG_COUNT = "wrong-arg-count"
    WRONG_TYPE = "wrong-type"
    TOO_MANY_ARGUMENTS = "too-many-arguments"
    INVALID_VARIADIC_FORMALS = "invalid-variadic-formals"
    DIVISION_BY_ZERO = "division-by-zero"
    REDEFINE_BUILTIN = "redefine-builtin"
    BAD_NUMBER = "bad-number"
    EMPTY_LIST_OPERAND = "empty-list-operand"


class LispError:
    """A first-class error value. Errors propagate by being returned, not raised."""

    __slots__ = ("message", "kind")

    def __init__(self, kind: ErrorKind, message: str):
        self.kind = kind
        self.message = message

    def __eq__(self, other) -> bool:
        return isinstance(other, LispError) and self.message == other.message

    __hash__ = None

    def __repr__(self):
        return f"LispError({self.kind.name}, {self.message!r})"

    def __str__(self):
        return f"Error: {self.message}"


class ExprList(list):
    """An expression list: active (evaluated as a call) or quoted (inert data)."""

    __slots__ = ("quoted",)

    def __init__(self, elements: Iterable[LispValue] = (), quoted: bool = False):
        super().__init__(elements)
        self.quoted = quoted

    def __eq__(self, other) -> bool:
        if not isinstance(other, ExprList) or self.quoted != other.quoted:
            return False
        return len(self) == len(other) and all(
            is_equal(x, y) for x, y in zip(self, other)
        )

    def __ne__(self, other) -> bool:
        return not self.__eq__(other)

    __hash__ = None

    def __repr__(self):
        kind = "Q" if self.quoted else "S"
        return f"{kind}{list.__repr__(self)}"

    def __str__(self) -> str:
        open_, close = ("{", "}") if self.quoted else ("(", ")")
        with StringIO() as buffer:
            buffer.write(open_)
            buffer.write(" ".join(str(x) for x in self))
            buffer.write(close)
            return buffer.getvalue()


def qexpr(elements: Iterable[LispValue] = ()) -> ExprList:
    return ExprList(elements, quoted=True)


def sexpr(elements: Iterable[LispValue] = ()) -> ExprList:
    return ExprList(elements, quoted=False)


class Function:
    """Common base of Builtin and Closure."""

    __slots__ = ()

    def copy(self) -> Function:
        raise NotImplementedError


class Builtin(Function):
    """A host-implemented function. Compared by identity of its implementation."""

    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: BuiltinFn):
        self.name = name
        self.fn = fn

    def copy(self) -> Builtin:
        return self

    def __eq__(self, other) -> bool:
        return isinstance(other, Builtin) and self.fn is other.fn

    __hash__ = None

    def __repr__(self):
        return f"Builtin({self.name!r})"

    def __str__(self):
        return f"<function: {self.name}>"


class ExitType:
    """Terminal signal returned by the exit builtin."""

    __slots__ = ()

    def __repr__(self): return "Exit"
    def __str__(self): return "<exit>"

    def __eq__(self, other):
        return isinstance(other, ExitType)

    __hash__ = None


Exit = ExitType()


def copy_value(v: LispValue) -> LispValue:
    """Deep structural copy. Immutable variants are returned as is."""
    if isinstance(v, ExprList):
        return ExprList((copy_value(x) for x in v), quoted=v.quoted)
    if isinstance(v, Function):
        return v.copy()
    return v


def is_number(v: LispValue) -> bool:
    return isinstance(v, int) and not isinstance(v, bool)


def type_name(v: LispValue) -> str:
    match v:
        case LispError():
            return "Error"
        case Symbol():
            return "Symbol"
        case Function():
            return "Function"
        case ExprList(quoted=True):
            return "Q-Expression"
        case ExprList():
            return "S-Expression"
        case ExitType():
            return "Exit"
        case _ if is_number(v):
            return "Number"
    return "Unknown"


def is_equal(a: LispValue, b: LispValue) -> bool:
    """Structural equality across all value variants.

    Values of different variants are never equal. Closures compare their formals
    and body only; their captured environment is ignored.
    """
    if type_name(a) != type_name(b):
        return False
    return a == b
