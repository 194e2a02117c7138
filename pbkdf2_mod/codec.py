from __future__ import annotations
import string

from .errors import InvalidHexDigitError


_HEX_CHARS = frozenset(string.hexdigits)


def hex_to_bytes(text: str, arg_name: str = "Salt") -> bytes:
    # Odd length: pad with a leading zero nibble ("abc" -> "0abc").
    if len(text) & 1:
        text = "0" + text

    for pos, ch in enumerate(text):
        if ch not in _HEX_CHARS:
            raise InvalidHexDigitError(arg_name, pos, ch)

    return bytes.fromhex(text)


def bytes_to_hex(data: bytes) -> str:
    # "04 DF 0B 92": uppercase, one blank between bytes, none at the ends.
    return bytes(data).hex(" ").upper()


def int_to_bytes(value: int) -> bytes:
    """Big-endian 4-byte form, so 1 becomes b"\\x00\\x00\\x00\\x01"."""
    if not 0 <= value <= 0xFFFFFFFF:
        raise ValueError(f"Integer out of 32-bit range: {value}")
    return value.to_bytes(4, "big")
