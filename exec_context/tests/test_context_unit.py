"""Unit tests for the Context value API and the underlying keyed store."""
from __future__ import annotations

from collections.abc import Mapping

from exec_context import Context, KeyedStore, background, compose, make_accessors, todo
from exec_context.base.keys import Key


def test_todo_and_background_return_fresh_empty_contexts():
    a, b = Context.todo(), Context.TODO()
    c, d = Context.background(), background()

    assert len({id(x) for x in (a, b, c, d, todo())}) == 5
    for ctx in (a, b, c, d):
        assert len(ctx.store) == 0


def test_compose_matches_sequential_setters():
    get_a, set_a = make_accessors("a")
    get_b, set_b = make_accessors("b")
    base = Context.todo()

    composed = compose(base, [(set_a, 1), (set_b, 2)])
    sequential = set_b(set_a(base, 1), 2)

    assert (get_a(composed), get_b(composed)) == (1, 2)
    assert (get_a(sequential), get_b(sequential)) == (1, 2)
    assert len(base.store) == 0


def test_compose_last_write_wins():
    get, set_ = make_accessors("dup")
    ctx = Context.compose(Context.todo(), [(set_, "first"), (set_, "second")])
    assert get(ctx) == "second"


def test_compose_with_no_pairs_returns_same_context():
    ctx = Context.todo()
    assert Context.compose(ctx, []) is ctx


def test_derivation_leaves_parent_unchanged():
    get, set_ = make_accessors("v")
    parent = set_(Context.todo(), "parent")
    child = set_(parent, "child")

    assert get(parent) == "parent"
    assert get(child) == "child"
    assert child is not parent


def test_repr_lists_key_names():
    _, set_ = make_accessors("request_id")
    ctx = set_(Context.todo(), "r")
    assert "request_id#" in repr(ctx)


def test_keyed_store_is_read_only_mapping():
    k1, k2 = Key("one"), Key("two")
    store = KeyedStore().derive(k1, 1)
    derived = store.derive_many([(k2, 2), (k1, 3)])

    assert isinstance(store, Mapping)
    assert dict(store) == {k1: 1}
    assert dict(derived) == {k1: 3, k2: 2}
    assert k2 not in store
    assert not hasattr(store, "__setitem__")
