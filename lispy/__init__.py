# Core type aliases for Lispy's data model.
# Runtime values are instances of the classes in lispy.types (Number, Symbol,
# LispError, ExprList, Builtin, Closure, Exit). Source code and data share the
# same representation: a program is an active ExprList, data is a quoted one.
#
# Naming guidance:
# - LispValue: any runtime value, as produced by the reader or the evaluator.
# - BuiltinFn: host implementation of a builtin, called as fn(env, args).

from typing import Any, Callable

from loguru import logger

# Runtime value alias
LispValue = Any

# Builtin implementation: receives the calling Environment and the evaluated
# argument list (which it owns), returns a LispValue (possibly a LispError).
BuiltinFn = Callable[..., LispValue]

__version__ = "0.1.0"

# Silent unless an application enables it (see lispy.logging_utils)
logger.disable("lispy")
