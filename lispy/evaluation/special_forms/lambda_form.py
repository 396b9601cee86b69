from lispy import LispValue
from lispy.builtin.assertions import check_count, check_symbols, check_type
from lispy.types.environment import Environment
from lispy.types.lambda_fn import Closure
from lispy.types.values import ExprList


def lambda_form(env: Environment, args: ExprList) -> LispValue:
    """
    (\\ {formals} {body})
    The closure gets a fresh environment whose parent is the defining one.
    """
    if err := check_count(args, 2, "\\"):
        return err
    if err := check_type(args, 0, "Q-Expression", "\\"):
        return err
    if err := check_type(args, 1, "Q-Expression", "\\"):
        return err

    formals, body = args
    if err := check_symbols(formals, "\\"):
        return err

    return Closure(formals, body, env.child())
