"""PBKDF2-HMAC key derivation (RFC 8018, section 5.2)."""

from __future__ import annotations

from hashedpass.core.digests import DigestAlgorithm
from hashedpass.exceptions import DerivedKeyTooLong, InvalidInput

_MAX_BLOCKS = 2**32 - 1


def derive(
    password: bytes,
    salt: bytes,
    iterations: int,
    digest: DigestAlgorithm = DigestAlgorithm.sha256,
    key_length: int | None = None,
) -> bytes:
    """Stretch *password* with *salt* into ``key_length`` bytes.

    ``key_length`` defaults to the digest's native output size. The first
    HMAC application counts as iteration 1, so a block runs ``iterations - 1``
    further rounds after seeding.
    """
    if iterations <= 0:
        raise InvalidInput(f"iterations must be positive, got {iterations}")
    if not password:
        raise InvalidInput("password must not be empty")
    if not salt:
        raise InvalidInput("salt must not be empty")

    h_len = digest.digest_size
    dk_len = h_len if key_length is None else key_length
    if dk_len <= 0:
        raise InvalidInput(f"key length must be positive, got {dk_len}")
    limit = _MAX_BLOCKS * h_len
    if dk_len > limit:
        raise DerivedKeyTooLong(dk_len, limit)

    num_blocks = -(-dk_len // h_len)
    blocks = [
        _block(password, salt, index, iterations, digest)
        for index in range(1, num_blocks + 1)
    ]
    return b"".join(blocks)[:dk_len]


def _block(
    password: bytes,
    salt: bytes,
    index: int,
    iterations: int,
    digest: DigestAlgorithm,
) -> bytes:
    # block counter is appended, 1-based, big-endian uint32
    u = digest.hmac(password, salt + index.to_bytes(4, "big"))
    acc = int.from_bytes(u, "big")
    for _ in range(iterations - 1):
        u = digest.hmac(password, u)
        acc ^= int.from_bytes(u, "big")
    return acc.to_bytes(len(u), "big")
