"""
Tests for the string and number validators.
"""

from verdict import (
    Err,
    Failure,
    Ok,
    int_,
    less_than,
    non_empty,
    num,
    str_,
    whole_number,
)


class TestStrings:
    def test_str(self):
        assert str_("foo") == Ok("foo")
        assert str_("") == Ok("")

    def test_non_empty(self):
        assert non_empty("foo") == Ok("foo")
        assert non_empty("") == Err(Failure("is empty"))

    def test_non_empty_whitespace_is_not_empty(self):
        assert non_empty(" ") == Ok(" ")


class TestNumbers:
    def test_num(self):
        assert num("1") == Ok(1)
        assert num("1.25") == Ok(1.25)
        assert num("-1.25") == Ok(-1.25)

    def test_num_failures(self):
        assert num("") == Err(Failure("is not a number"))
        assert num("f") == Err(Failure("is not a number"))

    def test_num_rejects_non_finite(self):
        assert num("inf") == Err(Failure("is not a number"))
        assert num("-Infinity") == Err(Failure("is not a number"))
        assert num("nan") == Err(Failure("is not a number"))

    def test_whole_number(self):
        assert whole_number(1) == Ok(1)
        assert whole_number(-1) == Ok(-1)
        assert whole_number(2.0) == Ok(2.0)
        assert whole_number(1.1) == Err(Failure("is not a whole number"))

    def test_int(self):
        assert int_("1") == Ok(1)
        assert int_("-1") == Ok(-1)
        assert isinstance(int_("28").unwrap(), int)

    def test_int_reports_first_failure(self):
        assert int_("f") == Err(Failure("is not a number"))
        assert int_("1.25") == Err(Failure("is not a whole number"))

    def test_less_than(self):
        assert less_than(2)(1) == Ok(1)
        assert less_than(2)(2) == Err(Failure("must be less than 2"))
        assert less_than(2)(3) == Err(Failure("must be less than 2"))

    def test_less_than_float_limit(self):
        assert less_than(0.5)(1) == Err(Failure("must be less than 0.5"))
