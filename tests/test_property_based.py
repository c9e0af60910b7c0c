"""Property-based tests for validator invariants."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from valid import (
    Err,
    Ok,
    allof,
    anyof,
    array,
    arrayof,
    boolean,
    func,
    literal,
    map,
    mapof,
    number,
    string,
    table,
)

scalars = st.one_of(
    st.none(),
    st.booleans(),
    st.integers(),
    st.floats(allow_nan=False),
    st.text(max_size=10),
)

keys = st.text(
    alphabet=st.characters(whitelist_categories=("Ll", "Lu")),
    min_size=1,
    max_size=8,
)


@given(st.lists(st.integers(), max_size=10))
def test_identity_on_success(values):
    """Without hooks, a passing validator returns its input unchanged."""
    result = arrayof(number())(values)
    assert isinstance(result, Ok)
    assert result.value is values


@given(st.dictionaries(keys, st.text(max_size=10), min_size=1))
def test_mapof_identity(data):
    result = mapof(string(), string())(data)
    assert result == Ok(data)


@given(scalars)
def test_never_raises(value):
    for v in (number(min=0), string(minlen=1), arrayof(number()), map()):
        result = v(value)
        assert isinstance(result, (Ok, Err))
        if isinstance(result, Err):
            assert result.code
            assert result.bad_value is not None or value is None


@given(st.lists(keys, min_size=1, max_size=4), st.integers(min_value=0, max_value=5))
def test_path_follows_nesting(path_keys, index):
    """The reported path reproduces the keys leading to the bad value."""
    validator = arrayof(number())
    for key in reversed(path_keys):
        validator = map({key: validator})

    items = [0] * index + ["bad"]
    data = items
    for key in reversed(path_keys):
        data = {key: data}

    result = validator(data)
    assert isinstance(result, Err)
    assert result.code == "number"
    assert result.bad_value == "bad"
    assert result.path == (*path_keys, index)


@given(st.lists(st.integers(), max_size=10))
def test_table_identity(values):
    result = table()(values)
    assert isinstance(result, Ok)
    assert result.value is values


@pytest.mark.parametrize(
    "validator, value",
    [
        (literal("abc"), "abc"),
        (number(min=0, max=10), 5),
        (string(minlen=1, pattern=r"\w"), "word"),
        (boolean(), True),
        (func(), len),
        (table({"a": number()}), {"a": 1}),
        (array({0: string()}), ["x"]),
        (map({"a": number()}, required=["a"]), {"a": 1}),
        (arrayof(number(), unique=True), [1, 2, 3]),
        (mapof(string(), number()), {"a": 1}),
        (anyof([number(), string()]), "s"),
        (allof([string(minlen=1), string(maxlen=5)]), "abc"),
    ],
)
def test_identity_for_every_kind(validator, value):
    """Without hooks, every validator hands back the very object it was given."""
    result = validator(value)
    assert isinstance(result, Ok)
    assert result.value is value


def test_hook_exception_logged_at_debug(caplog):
    def boom(_):
        raise RuntimeError("boom")

    with caplog.at_level("DEBUG", logger="valid.core"):
        result = number(func=boom)(1)

    assert isinstance(result, Err)
    assert result.code == "func"
    records = [r for r in caplog.records if r.name == "valid.core"]
    assert len(records) == 1
    assert records[0].levelname == "DEBUG"
    assert records[0].exc_info is not None
