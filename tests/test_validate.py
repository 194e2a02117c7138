"""Unit tests for command line integer validation."""

import pytest

from pbkdf2_mod.errors import (
    AboveMaximumError,
    BelowMinimumError,
    NotANumberError,
    ValidationError,
)
from pbkdf2_mod.kdf import HashType
from pbkdf2_mod.params import LIMITS
from pbkdf2_mod.validate import parse_hash_type, parse_int, parse_int_salt, parse_iteration_count


def test_parse_int_in_range():
    assert parse_int("X", "42", 0, 100) == 42


def test_parse_int_accepts_sign():
    assert parse_int("X", "+7", 0, 10) == 7
    assert parse_int("X", "-3", -5, 10) == -3


def test_parse_int_bounds_are_inclusive():
    assert parse_int("X", "0", 0, 10) == 0
    assert parse_int("X", "10", 0, 10) == 10


@pytest.mark.parametrize("raw", ["", "abc", "1.5", "0x10", " 5", "5 ", "1_000", "٣"])
def test_parse_int_not_a_number(raw):
    with pytest.raises(NotANumberError) as exc:
        parse_int("IterationCount", raw, 1, 10)
    assert str(exc.value) == '"IterationCount" is not an integer'
    assert exc.value.name == "IterationCount"


def test_parse_int_below_minimum():
    with pytest.raises(BelowMinimumError) as exc:
        parse_int("HashType", "0", 1, 5)
    assert exc.value.minimum == 1
    assert str(exc.value) == '"HashType" is smaller than minimum value of 1'


def test_parse_int_above_maximum():
    with pytest.raises(AboveMaximumError) as exc:
        parse_int("HashType", "6", 1, 5)
    assert exc.value.maximum == 5
    assert str(exc.value) == '"HashType" is larger than maximum value of 5'


def test_validation_errors_are_value_errors():
    with pytest.raises(ValueError):
        parse_int("X", "nope", 0, 1)


@pytest.mark.parametrize("raw,expected", [
    ("1", HashType.SHA1),
    ("2", HashType.SHA256),
    ("3", HashType.SHA384),
    ("4", HashType.SHA512_LEGACY),
    ("5", HashType.SHA512),
])
def test_parse_hash_type(raw, expected):
    assert parse_hash_type(raw) is expected


@pytest.mark.parametrize("raw", ["0", "6", "-1", "99999999999", "sha1"])
def test_parse_hash_type_rejects_out_of_domain(raw):
    with pytest.raises(ValidationError):
        parse_hash_type(raw)


class TestIterationCount:

    def test_zero_is_below_minimum(self):
        with pytest.raises(BelowMinimumError):
            parse_iteration_count("0")

    def test_one_above_limit(self):
        with pytest.raises(AboveMaximumError):
            parse_iteration_count("5000001")

    def test_limit_is_accepted(self):
        assert parse_iteration_count("5000000") == LIMITS.max_iteration_count


class TestIntSalt:

    def test_max_signed_32_bit(self):
        assert parse_int_salt("2147483647") == 2**31 - 1

    def test_rejects_beyond_signed_32_bit(self):
        with pytest.raises(AboveMaximumError):
            parse_int_salt("2147483648")

    def test_rejects_negative(self):
        with pytest.raises(BelowMinimumError):
            parse_int_salt("-1")
