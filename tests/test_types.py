"""
Tests for verdict.types and verdict.core.
"""

import pytest

from verdict import (
    Err,
    Failure,
    Ok,
    ValidationFailed,
    and_then,
    fail,
    hardcoded,
    map_error,
    map_result,
    succeed,
)


class TestResult:
    def test_ok(self):
        r = Ok(1)
        assert r.is_ok()
        assert not r.is_err()
        assert r.unwrap() == 1
        assert r.unwrap_or(2) == 1

    def test_err(self):
        r = Err(Failure("is empty"))
        assert r.is_err()
        assert not r.is_ok()
        assert r.unwrap_or(2) == 2

    def test_equality(self):
        assert Ok(1) == Ok(1)
        assert Ok(1) != Ok(2)
        assert Err(Failure("x")) == Err(Failure("x"))
        assert Ok("x") != Err("x")

    def test_map(self):
        assert Ok(1).map(lambda n: n + 1) == Ok(2)
        assert Err("bad").map(lambda n: n + 1) == Err("bad")

    def test_map_error(self):
        assert Err("bad").map_error(str.upper) == Err("BAD")
        assert Ok(1).map_error(str.upper) == Ok(1)

    def test_and_then(self):
        def half(n):
            return Ok(n // 2) if n % 2 == 0 else Err("odd")

        assert Ok(4).and_then(half) == Ok(2)
        assert Ok(3).and_then(half) == Err("odd")
        assert Err("bad").and_then(half) == Err("bad")

    def test_free_functions(self):
        assert map_result(lambda n: n * 2, Ok(2)) == Ok(4)
        assert map_error(len, Err("four")) == Err(4)
        assert and_then(lambda n: Ok(n + 1), Ok(1)) == Ok(2)

    def test_unwrap_failure_raises(self):
        with pytest.raises(ValidationFailed) as exc_info:
            Err(Failure("is not a number")).unwrap()
        assert exc_info.value.reason == "is not a number"
        assert str(exc_info.value) == "is not a number"

    def test_unwrap_other_error_raises_value_error(self):
        with pytest.raises(ValueError):
            Err("plain").unwrap()

    def test_repr(self):
        assert repr(Ok(1)) == "Ok(value=1)"
        assert repr(Err(Failure("is empty"))) == "Err(error=Failure(reason='is empty'))"

    def test_immutable(self):
        r = Ok(1)
        with pytest.raises(AttributeError):
            r.value = 2  # type: ignore[misc]


class TestFailure:
    def test_prefixed(self):
        f = Failure("is empty").prefixed("field 'name'")
        assert f == Failure("field 'name' is empty")

    def test_prefixed_returns_new_failure(self):
        original = Failure("is empty")
        original.prefixed("field 'name'")
        assert original.reason == "is empty"


class TestCore:
    def test_fail(self):
        assert fail("is not equal to 'Brendan'") == Err(
            Failure("is not equal to 'Brendan'")
        )

    def test_succeed(self):
        assert succeed("Brendan") == Ok("Brendan")

    def test_custom_validator(self):
        def is_brendan(s):
            if s != "Brendan":
                return fail("is not equal to 'Brendan'")
            return succeed(s)

        assert is_brendan("Brendan") == Ok("Brendan")
        assert is_brendan("Jacob") == Err(Failure("is not equal to 'Brendan'"))

    def test_hardcoded(self):
        v = hardcoded("free")
        assert v("anything") == Ok("free")
        assert v(None) == Ok("free")
