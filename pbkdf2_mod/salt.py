from __future__ import annotations
import logging
from dataclasses import dataclass

from .codec import bytes_to_hex, hex_to_bytes, int_to_bytes
from .validate import parse_int_salt

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolvedSalt:
    salt: bytes
    display: str  # what the report prints in the "Salt:" column


def resolve_salt(do_it_right: bool, raw: str) -> ResolvedSalt:
    """Turn the salt argument into the bytes PBKDF2 gets.

    Right mode reads the argument as hex and may produce any number of
    bytes. Wrong mode reads it as a decimal integer and always produces its
    4-byte big-endian form, so at most 2**31 salts are possible.
    """
    if do_it_right:
        salt = hex_to_bytes(raw, arg_name="Salt")
        display = bytes_to_hex(salt)
    else:
        value = parse_int_salt(raw)
        salt = int_to_bytes(value)
        display = str(value)

    log.debug("salt mode=%s bytes=[%s]", "right" if do_it_right else "wrong", bytes_to_hex(salt))
    return ResolvedSalt(salt=salt, display=display)
