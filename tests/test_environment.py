import pytest

from nlisp.errors import UnboundSymbol
from nlisp.types.environment import Environment
from nlisp.types.symbol import Symbol


def test_define_and_lookup():
    env = Environment()
    env.define("x", 1)
    assert env.lookup("x") == 1
    assert env.lookup(Symbol("x")) == 1


def test_lookup_missing_returns_none():
    assert Environment().lookup("missing") is None


def test_lookup_or_error_raises_unbound_symbol():
    with pytest.raises(UnboundSymbol) as exc:
        Environment().lookup_or_error(Symbol("missing"))
    assert exc.value == UnboundSymbol("missing")
    assert "missing" in str(exc.value)


def test_child_sees_parent_bindings():
    parent = Environment()
    parent.define("x", 1)
    child = parent.child()
    assert child.outer is parent
    assert child.lookup("x") == 1


def test_child_shadows_without_touching_parent():
    parent = Environment()
    parent.define("x", 1)
    child = parent.child()
    child.define("x", 2)
    assert child.lookup("x") == 2
    assert parent.lookup("x") == 1


def test_child_bindings_do_not_reach_parent():
    parent = Environment()
    child = parent.child()
    child.define("y", 5)
    assert parent.lookup("y") is None
    assert "y" not in parent
    assert "y" in child


def test_parent_updates_are_visible_through_shared_frame():
    parent = Environment()
    child = parent.child()
    parent.define("late", 3)
    assert child.lookup("late") == 3


def test_redefine_overwrites_in_same_frame():
    env = Environment()
    env.define("x", 1)
    env.define("x", 2)
    assert env.lookup("x") == 2


def test_find_returns_binding_frame():
    root = Environment()
    root.define("x", 1)
    inner = root.child().child()
    assert inner.find("x") is root
    assert inner.find("nope") is None


def test_root_and_frames():
    root = Environment()
    mid = root.child()
    leaf = mid.child()
    assert leaf.root() is root
    assert list(leaf.frames()) == [leaf, mid, root]


def test_update_bulk_defines():
    env = Environment()
    env.update({"a": 1, "b": 2})
    assert env.lookup("a") == 1
    assert env.lookup("b") == 2


def test_str_and_repr():
    root = Environment()
    root.define("a", 1)
    child = root.child()
    child.define("b", 2)
    assert str(child) == "{b: 2} -> ..."
    assert repr(child) == "<Environment chain: {b: 2} -> {a: 1}>"
