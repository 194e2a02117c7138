from __future__ import annotations
from dataclasses import dataclass

from .codec import bytes_to_hex
from .kdf import HashType


@dataclass(frozen=True)
class Report:
    hash_type: HashType
    salt_display: str
    iterations: int
    password: str
    derived_key: bytes
    elapsed_ms: int


def printable_password(password: str) -> str:
    # Raw non-UTF-8 argument bytes are shown as \xNN escapes.
    return password.encode("utf-8", "surrogateescape").decode("utf-8", "backslashreplace")


def format_report(report: Report) -> str:
    return (
        f"HashType: {report.hash_type.label}, "
        f"Salt: {report.salt_display}, "
        f"IterationCount: {report.iterations}, "
        f"Password: '{printable_password(report.password)}', "
        f"PBKDF2: {bytes_to_hex(report.derived_key)}\n"
        f"Duration: {report.elapsed_ms} ms\n"
    )
