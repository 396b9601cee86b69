from lispy.types.environment import Environment
from lispy.types.lambda_fn import Closure
from lispy.types.symbol import Symbol
from lispy.types.values import Builtin, ErrorKind, qexpr


def test_lookup_returns_a_copy():
    env = Environment()
    env.define_local("l", qexpr([1, 2]))
    v = env.lookup("l")
    v.append(3)
    assert env.lookup("l") == qexpr([1, 2])


def test_define_local_stores_a_copy():
    env = Environment()
    value = qexpr([1, qexpr([2])])
    env.define_local(Symbol("l"), value)
    value[1].append(3)
    assert env.lookup("l") == qexpr([1, qexpr([2])])


def test_unbound_symbol_is_an_error_value():
    result = Environment().lookup("nope")
    assert result.kind is ErrorKind.UNBOUND_SYMBOL


def test_child_falls_back_to_parent():
    root = Environment()
    root.define_local("x", 1)
    child = root.child()
    assert child.lookup("x") == 1
    child.define_local("x", 2)
    assert child.lookup("x") == 2
    assert root.lookup("x") == 1


def test_define_global_writes_root():
    root = Environment()
    grandchild = root.child().child()
    grandchild.define_global("g", 7)
    assert "g" in root
    assert "g" not in grandchild
    assert grandchild.root() is root


def test_register_builtin_protects_name(env):
    assert isinstance(env.lookup("+"), Builtin)
    assert env.is_protected("+")
    assert env.is_protected(Symbol("def"))
    assert not env.is_protected("x")
    assert env.child().is_protected("+")


def test_copy_keeps_parent_and_protected(env):
    child = env.child()
    child.define_local("a", qexpr([1]))
    clone = child.copy()
    assert clone.parent is env
    assert clone.protected is child.protected
    clone.vars["a"].append(2)
    assert child.lookup("a") == qexpr([1])


def test_closure_copy_has_independent_bindings(env):
    fn = Closure(qexpr([Symbol("b")]), qexpr([Symbol("b")]), env.child())
    fn.env.define_local("a", 1)
    clone = fn.copy()
    clone.env.define_local("a", 2)
    clone.formals.pop()
    assert fn.env.lookup("a") == 1
    assert fn.formals == qexpr([Symbol("b")])
    assert clone.env.parent is env


def test_names_in_definition_order():
    env = Environment()
    for name in ("c", "a", "b"):
        env.define_local(name, 0)
    assert list(env.names()) == ["c", "a", "b"]
