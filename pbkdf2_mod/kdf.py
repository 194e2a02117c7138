from __future__ import annotations
import logging
import time
from enum import Enum

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC
from cryptography.hazmat.primitives import hashes

from .errors import DerivationError, UnsupportedAlgorithmError

log = logging.getLogger(__name__)


class HashType(Enum):
    """Hash type selector as given on the command line."""

    SHA1 = 1
    SHA256 = 2
    SHA384 = 3
    # Historically "slot 4" was meant to be SHA-384 sized but has always run
    # SHA-512 with a 512-bit key. Kept as is so old outputs still match.
    SHA512_LEGACY = 4
    SHA512 = 5

    @property
    def label(self) -> str:
        return _HASH_TABLE[self][0]

    @property
    def key_bits(self) -> int:
        return _HASH_TABLE[self][2]

    @property
    def key_len(self) -> int:
        return self.key_bits // 8

    def algorithm(self) -> hashes.HashAlgorithm:
        return _HASH_TABLE[self][1]()


# selector -> (label, hash factory, derived key length in bits)
_HASH_TABLE = {
    HashType.SHA1: ("SHA1", hashes.SHA1, 160),
    HashType.SHA256: ("SHA256", hashes.SHA256, 256),
    HashType.SHA384: ("SHA384", hashes.SHA384, 384),
    HashType.SHA512_LEGACY: ("SHA512", hashes.SHA512, 512),
    HashType.SHA512: ("SHA512", hashes.SHA512, 512),
}


def derive_pbkdf2(hash_type: HashType, salt: bytes, iterations: int, password: str) -> bytes:
    """PBKDF2-HMAC over the UTF-8 bytes of ``password``.

    The output is ``hash_type.key_len`` bytes long and depends only on the
    four arguments. Undecodable command line bytes (lone surrogates from
    ``surrogateescape``) are fed to PBKDF2 as the raw bytes they stand for.
    """
    try:
        pw_bytes = password.encode("utf-8", "surrogateescape")
    except UnicodeEncodeError as e:
        raise DerivationError(f'"Password" cannot be encoded as UTF-8: {e.reason} at position {e.start}') from e
    log.debug("password bytes=%s", pw_bytes.hex(" ").upper())

    try:
        kdf = PBKDF2HMAC(
            algorithm=hash_type.algorithm(),
            length=hash_type.key_len,
            salt=bytes(salt),
            iterations=iterations,
        )
        return kdf.derive(pw_bytes)
    except UnsupportedAlgorithm as e:
        raise UnsupportedAlgorithmError(hash_type.label) from e


def timed_derive(hash_type: HashType, salt: bytes, iterations: int, password: str) -> tuple[bytes, int]:
    # Only the derivation itself is timed.
    start = time.perf_counter()
    key = derive_pbkdf2(hash_type, salt, iterations, password)
    elapsed_ms = int((time.perf_counter() - start) * 1000)

    log.debug("%s x%d took %d ms", hash_type.label, iterations, elapsed_ms)
    return key, elapsed_ms
