import pytest

from lispy.types.lambda_fn import Closure
from lispy.types.values import ErrorKind, qexpr


@pytest.fixture
def adder(run):
    run("(def {add} (\\ {a b} {+ a b}))")
    return run


def test_full_application(adder):
    assert adder("(add 3 4)") == 7


def test_curried_application(adder):
    assert adder("((add 3) 4)") == 7


def test_partial_application_is_a_closure(adder):
    partial = adder("(add 3)")
    assert isinstance(partial, Closure)
    assert str(partial) == "(\\ {b} {+ a b})"
    assert adder("(== (add 3) (add 3 4))") == 0
    assert adder("(== ((add 3) 4) (add 3 4))") == 1


def test_partial_applications_are_independent(adder):
    adder("(def {add3} (add 3))", "(def {add5} (add 5))")
    assert adder("(add3 1)") == 4
    assert adder("(add5 1)") == 6
    assert adder("(add3 10)") == 13


def test_too_many_arguments(adder):
    result = adder("(add 1 2 3)")
    assert result.kind is ErrorKind.TOO_MANY_ARGUMENTS
    assert result.message == "Function passed too many arguments. Got 3, expected 2."


def test_anonymous_lambda_call(interp):
    assert interp.eval("((\\ {x y} {* x y}) 6 7)") == 42


def test_closure_alone_is_not_called(interp):
    assert isinstance(interp.eval("((\\ {x} {x}))"), Closure)


@pytest.mark.parametrize(
    "call,expected",
    [
        ("(f 1 2 3)", qexpr([2, 3])),
        ("(f 1)", qexpr()),
    ],
)
def test_variadic_formals(run, call, expected):
    assert run("(def {f} (\\ {x & xs} {xs}))", call) == expected


def test_variadic_only(run):
    assert run("(def {g} (\\ {& xs} {xs}))", "(g 1 2)") == qexpr([1, 2])


def test_variadic_curried(run):
    run("(def {f} (\\ {x y & rest} {join (list x y) rest}))")
    assert run("((f 1) 2 3 4)") == qexpr([1, 2, 3, 4])
    assert run("((f 1) 2)") == qexpr([1, 2])


def test_invalid_variadic_formals(run):
    run("(def {g} (\\ {x & a b} {x}))")
    result = run("(g 1 2)")
    assert result.kind is ErrorKind.INVALID_VARIADIC_FORMALS
    result = run("(g 1)")
    assert result.kind is ErrorKind.INVALID_VARIADIC_FORMALS


def test_lambda_rejects_non_symbol_formals(interp):
    result = interp.eval("(\\ {x 1} {x})")
    assert result.kind is ErrorKind.WRONG_TYPE
    assert result.message == "Function '\\' cannot define non-symbol. Got Number."


def test_recursive_function(run):
    run("(def {fact} (\\ {n} {if (<= n 1) {1} {* n (fact (- n 1))}}))")
    assert run("(fact 5)") == 120
    assert run("(fact 20)") == 2432902008176640000


def test_higher_order_function(run):
    run(
        "(def {map} (\\ {f l} {if (== l {}) {{}} {join (list (f (head l))) (map f (tail l))}}))"
    )
    assert run("(map (\\ {x} {* x x}) {1 2 3})") == qexpr([1, 4, 9])
    assert run("(map ((\\ {a b} {+ a b}) 10) {1 2})") == qexpr([11, 12])
