from lispy import LispValue
from lispy.builtin.assertions import check_count, check_type
from lispy.evaluation.evaluator import evaluate
from lispy.types.environment import Environment
from lispy.types.values import ExprList


def eval_form(env: Environment, args: ExprList) -> LispValue:
    if err := check_count(args, 1, "eval"):
        return err
    if err := check_type(args, 0, "Q-Expression", "eval"):
        return err
    expr_to_eval = args.pop(0)
    expr_to_eval.quoted = False
    return evaluate(env, expr_to_eval)
