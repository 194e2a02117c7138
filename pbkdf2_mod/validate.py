from __future__ import annotations
import re

from .errors import AboveMaximumError, BelowMinimumError, NotANumberError
from .kdf import HashType
from .params import LIMITS


# Plain base-10 only: no blanks, no "_" separators, no non-ASCII digits.
_DECIMAL = re.compile(r"[+-]?[0-9]+")


def parse_int(name: str, raw: str, min_value: int, max_value: int) -> int:
    if _DECIMAL.fullmatch(raw) is None:
        raise NotANumberError(name)

    value = int(raw)

    if value < min_value:
        raise BelowMinimumError(name, min_value)
    if value > max_value:
        raise AboveMaximumError(name, max_value)

    return value


def parse_hash_type(raw: str) -> HashType:
    selector = parse_int("HashType", raw, LIMITS.min_hash_type, LIMITS.max_hash_type)
    return HashType(selector)


def parse_iteration_count(raw: str) -> int:
    return parse_int("IterationCount", raw, LIMITS.min_iteration_count, LIMITS.max_iteration_count)


def parse_int_salt(raw: str) -> int:
    return parse_int("Salt", raw, LIMITS.min_salt, LIMITS.max_salt)
