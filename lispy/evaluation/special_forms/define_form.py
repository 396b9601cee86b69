from lispy import LispValue
from lispy.builtin.assertions import check_symbols, check_type
from lispy.types.environment import Environment
from lispy.types.values import ErrorKind, ExprList, LispError, sexpr


def _define(env: Environment, args: ExprList, func: str) -> LispValue:
    """
    (def {a b} 1 2) / (= {a b} 1 2)
    Binds each symbol of the leading quoted list to the matching value.
    """
    if not args:
        return LispError(
            ErrorKind.WRONG_ARG_COUNT,
            f"Function '{func}' passed incorrect number of arguments. Got 0, expected 1.",
        )
    if err := check_type(args, 0, "Q-Expression", func):
        return err

    names = args[0]
    if err := check_symbols(names, func):
        return err

    for name in names:
        if env.is_protected(name):
            return LispError(
                ErrorKind.REDEFINE_BUILTIN,
                f"Function '{func}' cannot redefine builtin '{name}'",
            )

    values = args[1:]
    if len(names) != len(values):
        return LispError(
            ErrorKind.WRONG_ARG_COUNT,
            f"Function '{func}' cannot define incorrect number of values to symbols. "
            f"Got {len(names)} symbols but {len(values)} values.",
        )

    for name, value in zip(names, values):
        if func == "def":
            env.define_global(name, value)
        else:
            env.define_local(name, value)
    return sexpr()


def def_form(env: Environment, args: ExprList) -> LispValue:
    return _define(env, args, "def")


def put_form(env: Environment, args: ExprList) -> LispValue:
    return _define(env, args, "=")
