"""Runtime value classes for Lispy."""

from lispy.types.symbol import Symbol
from lispy.types.values import (
    Builtin,
    ErrorKind,
    Exit,
    ExprList,
    Function,
    LispError,
    copy_value,
    is_equal,
    type_name,
)
from lispy.types.environment import Environment
from lispy.types.lambda_fn import Closure

__all__ = [
    "Builtin",
    "Closure",
    "Environment",
    "ErrorKind",
    "Exit",
    "ExprList",
    "Function",
    "LispError",
    "Symbol",
    "copy_value",
    "is_equal",
    "type_name",
]
