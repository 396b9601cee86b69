"""Application engine for Lispy.

This module centralizes function application semantics for the interpreter:
- Builtins are called with the calling environment and the argument list.
- Closures bind arguments to formals one at a time in their own environment.
  Running out of arguments before formals yields a partially applied copy
  (currying); running out of formals first is an error.
- The `&` formal collects all remaining arguments into a quoted list.
"""

from __future__ import annotations

from loguru import logger

from lispy import LispValue
from lispy.evaluation.evaluator import evaluate
from lispy.types.environment import Environment
from lispy.types.lambda_fn import Closure
from lispy.types.symbol import Symbol
from lispy.types.values import (
    Builtin,
    ErrorKind,
    ExprList,
    LispError,
    copy_value,
    qexpr,
    sexpr,
    type_name,
)

VARIADIC_MARKER = Symbol("&")


def _invalid_variadic() -> LispError:
    return LispError(
        ErrorKind.INVALID_VARIADIC_FORMALS,
        "Function format invalid. Symbol '&' not followed by a single symbol.",
    )


def apply_closure(env: Environment, fn: Closure, args: ExprList) -> LispValue:
    """Apply a Closure value.

    Parameters:
    - env: The calling environment. Once every formal is bound, it becomes the
      parent of the closure environment for the duration of the body, so names
      visible at the call site resolve as a fallback.
    - fn: The closure being applied. It is consumed: its formals are popped and
      its environment receives the bindings.
    - args: The already-evaluated argument values.
    """
    given = len(args)
    total = len(fn.formals)

    while args:
        if not fn.formals:
            return LispError(
                ErrorKind.TOO_MANY_ARGUMENTS,
                f"Function passed too many arguments. Got {given}, expected {total}.",
            )
        formal = fn.formals.pop(0)

        if formal == VARIADIC_MARKER:
            if len(fn.formals) != 1:
                return _invalid_variadic()
            rest = fn.formals.pop(0)
            fn.env.define_local(rest, qexpr(args))
            args = sexpr()
            break

        fn.env.define_local(formal, args.pop(0))

    # A declared rest parameter with no extra arguments is bound to {}
    if fn.formals and fn.formals[0] == VARIADIC_MARKER:
        if len(fn.formals) != 2:
            return _invalid_variadic()
        fn.formals.pop(0)
        fn.env.define_local(fn.formals.pop(0), qexpr())

    if fn.formals:
        logger.debug("partial application: {} formal(s) remaining", len(fn.formals))
        return fn.copy()

    fn.env.parent = env
    body = copy_value(fn.body)
    body.quoted = False
    return evaluate(fn.env, body)


def apply(env: Environment, head: LispValue, args: ExprList) -> LispValue:
    """Apply either a Builtin or a Closure.

    - For Builtin, invoke its implementation with the calling env and args.
    - For Closure, defer to apply_closure.
    - Otherwise, return a not-a-function error.
    """
    if isinstance(head, Builtin):
        return head.fn(env, args)
    elif isinstance(head, Closure):
        return apply_closure(env, head, args)
    else:
        return LispError(
            ErrorKind.NOT_A_FUNCTION,
            f"First element is not a function. Got {type_name(head)}.",
        )
