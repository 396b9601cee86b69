"""Core evaluator for the Lispy interpreter.

Evaluation is a plain recursive walk over values: symbols are looked up, active
expression lists are reduced to a call, everything else evaluates to itself.
Errors are ordinary values; the evaluator inspects for them explicitly instead
of relying on exceptions.
"""

from __future__ import annotations

from lispy import LispValue
from lispy.types.environment import Environment
from lispy.types.symbol import Symbol
from lispy.types.values import (
    Builtin,
    ErrorKind,
    ExprList,
    Function,
    LispError,
    type_name,
)

# Builtins that still run when they are the only element of a list.
ZERO_ARG_CALLS = ("exit", "deflist")


def evaluate(env: Environment, v: LispValue) -> LispValue:
    """Evaluate `v` in `env`."""
    match v:
        case Symbol():
            return env.lookup(v)
        case ExprList(quoted=False):
            return evaluate_expr_list(env, v)
    # --- Everything else is self-evaluating ---
    return v


def _is_zero_arg_call(env: Environment, head: LispValue) -> bool:
    if not isinstance(head, Builtin):
        return False
    return any(head == env.lookup(name) for name in ZERO_ARG_CALLS)


def evaluate_expr_list(env: Environment, lst: ExprList) -> LispValue:
    """Reduce an active expression list.

    Every element is evaluated before errors are checked, so side effects of
    later elements happen even when an earlier one failed.
    """
    from lispy.evaluation.apply import apply

    for i, element in enumerate(lst):
        lst[i] = evaluate(env, element)

    for element in lst:
        if isinstance(element, LispError):
            return element

    if not lst:
        return lst

    if len(lst) == 1 and not _is_zero_arg_call(env, lst[0]):
        return lst[0]

    head = lst.pop(0)
    if not isinstance(head, Function):
        return LispError(
            ErrorKind.NOT_A_FUNCTION,
            f"First element is not a function. Got {type_name(head)}.",
        )
    return apply(env, head, lst)
