"""
Tests for anyof and allof.
"""

import pytest

from valid import (
    AllOf,
    AnyOf,
    Code,
    DefinitionError,
    Err,
    Ok,
    allof,
    anyof,
    literal,
    number,
    string,
)


class TestAnyOf:
    def test_first_success(self):
        v = anyof([number(), string()])
        assert v(1) == Ok(1)
        assert v("a") == Ok("a")

    def test_short_circuits(self):
        calls = []
        v = anyof(
            [
                literal("a"),
                literal("b", func=lambda x: calls.append(x) or True),
            ]
        )
        assert isinstance(v("a"), Ok)
        assert calls == []

    def test_original_value_returned(self):
        v = anyof([string(func=lambda s: (True, s.upper()))])
        assert v("abc") == Ok("abc")

    def test_aggregates_on_failure(self):
        v = anyof([number(), string(minlen=3)])
        result = v("ab")
        assert result.code == Code.ANY
        assert result.bad_value == "ab"
        assert result.path == ()
        assert result.errors == (Err(Code.NUMBER, "ab"), Err(Code.MINLEN, "ab"))

    def test_as_tuple_carries_branches(self):
        _, code, bad, branches = anyof(["a"])("b").as_tuple()
        assert code == "any"
        assert bad == "b"
        assert branches == (Err(Code.LITERAL, "b"),)


class TestAllOf:
    def test_success(self):
        v = allof([string(minlen=2), string(pattern=r"^\d+$")])
        assert v("123") == Ok("123")

    def test_aggregates_all_failures(self):
        v = allof([string(minlen=5), string(pattern=r"^\d+$")])
        result = v("abc")
        assert result.code == "all"
        assert [e.code for e in result.errors] == ["minlen", "pattern"]

    def test_runs_every_branch(self):
        calls = []
        v = allof(
            [
                number(max=0),
                number(func=lambda n: calls.append(n) or True),
            ]
        )
        result = v(5)
        assert [e.code for e in result.errors] == ["max"]
        assert calls == [5]


class TestDefinitions:
    def test_empty_list(self):
        with pytest.raises(DefinitionError):
            anyof([])
        with pytest.raises(DefinitionError):
            allof([])

    def test_not_a_list(self):
        with pytest.raises(DefinitionError):
            anyof("ab")

    def test_lifted_at_construction(self):
        v = anyof(["a", number()])
        assert isinstance(v, AnyOf)
        assert all(callable(b) for b in v.branches)
        assert isinstance(allof([number()]), AllOf)
