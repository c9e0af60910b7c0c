"""
Tests for results, validate() and strict mode.
"""

import pytest

from valid import (
    Code,
    Err,
    FunctionValidator,
    Literal,
    Ok,
    ValidationError,
    is_strict,
    map,
    number,
    string,
    to_validator,
    validate,
    validation_context,
)


class TestResults:
    def test_truthiness(self):
        assert Ok(None)
        assert not Err(Code.FUNC, 1)

    def test_unwrap(self):
        assert Ok(3).unwrap() == 3
        with pytest.raises(ValidationError) as exc:
            Err(Code.MIN, -1, ("age",)).unwrap()
        assert exc.value.code == "min"
        assert exc.value.bad_value == -1
        assert exc.value.path == ("age",)

    def test_as_tuple(self):
        assert Ok("x").as_tuple() == (True, "x", None, None)
        assert Err(Code.STRING, 5).as_tuple() == (False, "string", 5, None)

    def test_prefixed_wraps_outward(self):
        err = Err(Code.STRING, 1, ("name",)).prefixed(0).prefixed("users")
        assert err.path == ("users", 0, "name")

    def test_str(self):
        err = Err(Code.PATTERN, "bad", ("contact", "email"))
        assert str(err) == "pattern at contact.email: 'bad'"
        assert str(Err(Code.NUMBER, "x", (1,))) == "number at [1]: 'x'"


class TestToValidator:
    def test_validator_passthrough(self):
        v = number()
        assert to_validator(v) is v

    def test_callable(self):
        assert isinstance(to_validator(lambda x: True), FunctionValidator)

    def test_class_is_literal(self):
        v = to_validator(int)
        assert isinstance(v, Literal)
        assert isinstance(v(int), Ok)
        assert isinstance(v(3), Err)

    def test_literal(self):
        assert isinstance(to_validator(42), Literal)


class TestValidate:
    @pytest.fixture
    def contact(self):
        return map(
            {
                "email": string(pattern=r".+@.+\..+"),
                "phone": string(pattern=r"\d{3}-\d{3}-\d{4}"),
            },
            required=["email"],
        )

    def test_returns_result(self, contact):
        assert isinstance(validate({"email": "a@b.co"}, contact), Ok)
        assert validate({"email": "bad-email"}, contact) == Err(
            Code.PATTERN, "bad-email", ("email",)
        )

    def test_bare_literal_definition(self):
        assert isinstance(validate("x", "x"), Ok)

    def test_strict_raises(self, contact):
        with validation_context(strict=True):
            assert is_strict()
            with pytest.raises(ValidationError) as exc:
                validate({"phone": "123-456-7890"}, contact)
        assert exc.value.error == Err(Code.REQUIRED, "email", ("email",))
        assert not is_strict()

    def test_strict_passes_ok(self, contact):
        with validation_context(strict=True):
            assert validate({"email": "a@b.co"}, contact) == Ok({"email": "a@b.co"})

    def test_validators_never_raise_in_strict(self, contact):
        with validation_context(strict=True):
            assert isinstance(contact({}), Err)
