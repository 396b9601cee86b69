from lispy import LispValue
from lispy.builtin.assertions import check_count, check_type
from lispy.evaluation.evaluator import evaluate
from lispy.types.environment import Environment
from lispy.types.values import ExprList


def if_form(env: Environment, args: ExprList) -> LispValue:
    """
    (if cond {then} {else})
    Only the selected branch is activated and evaluated.
    """
    if err := check_count(args, 3, "if"):
        return err
    if err := check_type(args, 0, "Number", "if"):
        return err
    if err := check_type(args, 1, "Q-Expression", "if"):
        return err
    if err := check_type(args, 2, "Q-Expression", "if"):
        return err

    cond, then_branch, else_branch = args
    branch = then_branch if cond != 0 else else_branch
    branch.quoted = False
    return evaluate(env, branch)
