"""Unit tests for the key factory and accessor pairs.

Covers the four factory call shapes, non-aliasing of same-named keys, lazy
uncached defaults, and setter behavior for the absent value.
"""
from __future__ import annotations

import pydantic
import pytest

from exec_context import Context, Key, KeyOptions, make, make_accessors


def test_setter_then_getter_returns_exact_value():
    get, set_ = make_accessors()
    original = Context.todo()
    value = object()

    ctx = set_(original, value)

    assert get(ctx) is value
    assert get(original) is None
    assert len(original.store) == 0


def test_named_accessors_with_default():
    get, set_ = make_accessors("key", lambda ctx: 42)
    ctx = set_(Context.todo())
    assert get(ctx) == 42
    assert get(set_(ctx, 7)) == 7


def test_default_only_call_shape():
    acc = make_accessors(lambda ctx: "fallback")
    assert acc.options.name is None
    assert acc.get(Context.todo()) == "fallback"


def test_two_default_producers_rejected():
    with pytest.raises(TypeError):
        make_accessors(lambda ctx: 1, lambda ctx: 2)


def test_same_name_does_not_alias():
    get_a, set_a = make_accessors("request_id")
    get_b, _set_b = make_accessors("request_id")

    ctx = set_a(Context.todo(), "r-1")

    assert get_a(ctx) == "r-1"
    assert get_b(ctx) is None


def test_default_is_lazy_and_not_cached():
    calls = []

    def produce(ctx):
        calls.append(ctx)
        return len(calls)

    get, _set = make_accessors("counter", produce)
    ctx = Context.todo()

    assert calls == []
    assert get(ctx) == 1
    assert get(ctx) == 2
    assert len(ctx.store) == 0
    assert calls == [ctx, ctx]


def test_getter_accepts_none_context():
    get, _ = make_accessors("x")
    get_d, _ = make_accessors("y", lambda ctx: ctx)
    assert get(None) is None
    assert get_d(None) is None


def test_setter_accepts_none_context():
    get, set_ = make_accessors("x")
    ctx = set_(None, 5)
    assert isinstance(ctx, Context)
    assert get(ctx) == 5


def test_explicit_none_without_default_is_stored_as_absent():
    get, set_ = make_accessors("maybe")
    ctx = set_(Context.todo(), None)
    assert get(ctx) is None
    assert len(ctx.store) == 1


def test_complex_values_round_trip():
    get, set_ = make_accessors("mapping")
    ctx = set_(Context.todo(), {"key": 42})
    assert get(ctx) == {"key": 42}


def test_make_with_options_mints_distinct_keys():
    options = KeyOptions(name="same")
    first = make(options)
    second = make(options)

    assert isinstance(first.key, Key)
    assert first.key != second.key
    assert first.key.name == second.key.name == "same"
    assert first.key.label != second.key.label


def test_key_options_rejects_non_callable_default():
    with pytest.raises(pydantic.ValidationError):
        KeyOptions(name="bad", default=42)


def test_key_options_is_frozen():
    options = KeyOptions(name="n")
    with pytest.raises(pydantic.ValidationError):
        options.name = "other"
