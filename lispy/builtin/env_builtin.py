"""Built-in functions for the Lispy runtime environment.

This module defines list processing, arithmetic, comparison and logic builtins,
the exit/deflist commands, and the registration of all builtins (including the
special forms) into a root environment.

Every builtin is called as fn(env, args) where `args` is the list of evaluated
arguments, owned by the builtin. Failures are returned as LispError values.
"""
from __future__ import annotations

import operator
from typing import Callable

from loguru import logger

from lispy import LispValue
from lispy.builtin.assertions import (
    check_count,
    check_not_empty,
    check_type,
    check_types,
)
from lispy.evaluation.special_forms import SPECIAL_FORMS
from lispy.types.environment import Environment
from lispy.types.values import (
    ErrorKind,
    Exit,
    ExprList,
    LispError,
    is_equal,
    is_number,
    qexpr,
    sexpr,
    to_int64,
    type_name,
)


# -------------------------------
# List operations
# -------------------------------
def list_builtin(env: Environment, args: ExprList) -> LispValue:
    """Return the arguments as a quoted list."""
    args.quoted = True
    return args


def head(env: Environment, args: ExprList) -> LispValue:
    """First element of a quoted list."""
    if err := check_count(args, 1, "head"):
        return err
    if err := check_type(args, 0, "Q-Expression", "head"):
        return err
    if err := check_not_empty(args, "head"):
        return err
    return args[0].pop(0)


def tail(env: Environment, args: ExprList) -> LispValue:
    """Quoted list without its first element."""
    if err := check_count(args, 1, "tail"):
        return err
    if err := check_type(args, 0, "Q-Expression", "tail"):
        return err
    if err := check_not_empty(args, "tail"):
        return err
    return qexpr(args[0][1:])


def length(env: Environment, args: ExprList) -> LispValue:
    """Number of elements in a non-empty quoted list."""
    if err := check_count(args, 1, "len"):
        return err
    if err := check_type(args, 0, "Q-Expression", "len"):
        return err
    if err := check_not_empty(args, "len"):
        return err
    return len(args[0])


def init(env: Environment, args: ExprList) -> LispValue:
    """Quoted list without its last element."""
    if err := check_count(args, 1, "init"):
        return err
    if err := check_type(args, 0, "Q-Expression", "init"):
        return err
    if err := check_not_empty(args, "init"):
        return err
    return qexpr(args[0][:-1])


def join(env: Environment, args: ExprList) -> LispValue:
    """Concatenate quoted lists left to right."""
    if err := check_types(args, "Q-Expression", "join"):
        return err
    result = qexpr()
    for lst in args:
        result.extend(lst)
    return result


def cons(env: Environment, args: ExprList) -> LispValue:
    """Prepend a value to a quoted list."""
    if err := check_count(args, 2, "cons"):
        return err
    if err := check_type(args, 1, "Q-Expression", "cons"):
        return err
    value, lst = args
    lst.insert(0, value)
    return lst


# -------------------------------
# Arithmetic
# -------------------------------
def _truncating_div(x: int, y: int) -> int:
    q = abs(x) // abs(y)
    return q if (x < 0) == (y < 0) else -q


def _truncating_mod(x: int, y: int) -> int:
    return x - y * _truncating_div(x, y)


ARITHMETIC_OPS: dict[str, Callable[[int, int], int]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": _truncating_div,
    "%": _truncating_mod,
    "^": operator.xor,
}

# Result of an operator applied to no arguments, where one exists.
IDENTITIES = {"+": 0, "*": 1}


def arithmetic(env: Environment, args: ExprList, op: str) -> LispValue:
    """Fold `op` over Number arguments, left to right; unary `-` negates."""
    for i, arg in enumerate(args):
        if not is_number(arg):
            return LispError(
                ErrorKind.WRONG_TYPE,
                "Cannot perform operation. Expected Number argument at "
                f"position {i}, got {type_name(arg)}.",
            )
    if not args:
        if op in IDENTITIES:
            return IDENTITIES[op]
        return LispError(
            ErrorKind.WRONG_ARG_COUNT,
            f"Function '{op}' passed incorrect number of arguments. Got 0, expected 1.",
        )

    fn = ARITHMETIC_OPS[op]
    result = args[0]
    if op == "-" and len(args) == 1:
        return to_int64(-result)
    for y in args[1:]:
        if op in ("/", "%") and y == 0:
            return LispError(ErrorKind.DIVISION_BY_ZERO, "Division by zero.")
        result = to_int64(fn(result, y))
    return result


def add(env: Environment, args: ExprList) -> LispValue:
    return arithmetic(env, args, "+")


def sub(env: Environment, args: ExprList) -> LispValue:
    return arithmetic(env, args, "-")


def mul(env: Environment, args: ExprList) -> LispValue:
    return arithmetic(env, args, "*")


def div(env: Environment, args: ExprList) -> LispValue:
    return arithmetic(env, args, "/")


def mod(env: Environment, args: ExprList) -> LispValue:
    return arithmetic(env, args, "%")


def xor(env: Environment, args: ExprList) -> LispValue:
    return arithmetic(env, args, "^")


# -------------------------------
# Comparison
# -------------------------------
ORDERINGS: dict[str, Callable[[int, int], bool]] = {
    ">": operator.gt,
    "<": operator.lt,
    ">=": operator.ge,
    "<=": operator.le,
}


def ordering(env: Environment, args: ExprList, op: str) -> LispValue:
    """Compare two Numbers; returns 1 or 0."""
    if err := check_count(args, 2, op):
        return err
    if err := check_types(args, "Number", op):
        return err
    return int(ORDERINGS[op](args[0], args[1]))


def gt(env: Environment, args: ExprList) -> LispValue:
    return ordering(env, args, ">")


def lt(env: Environment, args: ExprList) -> LispValue:
    return ordering(env, args, "<")


def gte(env: Environment, args: ExprList) -> LispValue:
    return ordering(env, args, ">=")


def lte(env: Environment, args: ExprList) -> LispValue:
    return ordering(env, args, "<=")


def equals(env: Environment, args: ExprList) -> LispValue:
    """Structural equality of any two values; returns 1 or 0."""
    if err := check_count(args, 2, "=="):
        return err
    return int(is_equal(args[0], args[1]))


def not_equals(env: Environment, args: ExprList) -> LispValue:
    """Logical negation of equals."""
    if err := check_count(args, 2, "!="):
        return err
    return int(not is_equal(args[0], args[1]))


# -------------------------------
# Boolean logic
# -------------------------------
def logical_or(env: Environment, args: ExprList) -> LispValue:
    if err := check_count(args, 2, "||"):
        return err
    if err := check_types(args, "Number", "||"):
        return err
    return int(args[0] != 0 or args[1] != 0)


def logical_and(env: Environment, args: ExprList) -> LispValue:
    if err := check_count(args, 2, "&&"):
        return err
    if err := check_types(args, "Number", "&&"):
        return err
    return int(args[0] != 0 and args[1] != 0)


def logical_not(env: Environment, args: ExprList) -> LispValue:
    if err := check_count(args, 1, "!"):
        return err
    if err := check_type(args, 0, "Number", "!"):
        return err
    return int(args[0] == 0)


# -------------------------------
# Session commands
# -------------------------------
def exit_builtin(env: Environment, args: ExprList) -> LispValue:
    """Signal the REPL to stop."""
    return Exit


def deflist(env: Environment, args: ExprList) -> LispValue:
    """Print the names bound in the calling environment, tab separated."""
    print("".join(f"{name}\t" for name in env.names()))
    return sexpr()


# -------------------------------
# Registration
# -------------------------------
BUILTINS = {
    # List functions
    "list": list_builtin,
    "head": head,
    "tail": tail,
    "join": join,
    "cons": cons,
    "len": length,
    "init": init,
    # Mathematical functions
    "+": add,
    "-": sub,
    "*": mul,
    "/": div,
    "%": mod,
    "^": xor,
    # Comparison functions
    ">": gt,
    "<": lt,
    ">=": gte,
    "<=": lte,
    "==": equals,
    "!=": not_equals,
    "||": logical_or,
    "&&": logical_and,
    "!": logical_not,
    # Application functions
    "deflist": deflist,
    "exit": exit_builtin,
}


def register(env: Environment) -> None:
    """Install every builtin and special form into the root of `env`."""
    for name, fn in {**BUILTINS, **SPECIAL_FORMS}.items():
        env.register_builtin(name, fn)
    logger.debug("{} builtins registered", len(BUILTINS) + len(SPECIAL_FORMS))
