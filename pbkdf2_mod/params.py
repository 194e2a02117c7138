from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class Limits:
    # Hash type selector as typed on the command line (1-based).
    min_hash_type: int = 1
    max_hash_type: int = 5

    # Integer salt of the "wrong" mode: non-negative signed 32-bit.
    min_salt: int = 0
    max_salt: int = 2**31 - 1

    min_iteration_count: int = 1
    max_iteration_count: int = 5_000_000


LIMITS = Limits()
