"""Argument checks shared by builtins.

Each check returns a LispError describing the first violation, or None when
the arguments are acceptable, so callers can write:

    if err := check_count(args, 1, "head"):
        return err
"""

from __future__ import annotations

from typing import Optional

from lispy.types.values import ErrorKind, ExprList, LispError, type_name


def check_count(args: ExprList, expected: int, func: str) -> Optional[LispError]:
    if len(args) != expected:
        return LispError(
            ErrorKind.WRONG_ARG_COUNT,
            f"Function '{func}' passed incorrect number of arguments. "
            f"Got {len(args)}, expected {expected}.",
        )
    return None


def check_type(args: ExprList, i: int, expected: str, func: str) -> Optional[LispError]:
    got = type_name(args[i])
    if got != expected:
        return LispError(
            ErrorKind.WRONG_TYPE,
            f"Function '{func}' passed incorrect type. Expected {expected}, got {got}.",
        )
    return None


def check_types(args: ExprList, expected: str, func: str) -> Optional[LispError]:
    for i in range(len(args)):
        if err := check_type(args, i, expected, func):
            return err
    return None


def check_not_empty(args: ExprList, func: str) -> Optional[LispError]:
    if not args[0]:
        return LispError(ErrorKind.EMPTY_LIST_OPERAND, f"Function '{func}' passed {{}}.")
    return None


def check_symbols(items: ExprList, func: str) -> Optional[LispError]:
    for item in items:
        if type_name(item) != "Symbol":
            return LispError(
                ErrorKind.WRONG_TYPE,
                f"Function '{func}' cannot define non-symbol. Got {type_name(item)}.",
            )
    return None
