"""Registry of builtins that take deferred code as operands.

These are ordinary builtins resolved through symbol lookup. What sets them
apart is that their quoted-list operands are code: `if` and `eval` activate
and evaluate them, `\\` keeps them as a closure body, and `def`/`=` read
their leading list as names to bind.
"""

from lispy.evaluation.special_forms.define_form import def_form, put_form
from lispy.evaluation.special_forms.eval_form import eval_form
from lispy.evaluation.special_forms.if_form import if_form
from lispy.evaluation.special_forms.lambda_form import lambda_form

SPECIAL_FORMS = {
    "eval": eval_form,
    "if": if_form,
    "def": def_form,
    "=": put_form,
    "\\": lambda_form,
}
