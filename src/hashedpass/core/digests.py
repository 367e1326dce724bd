"""Digest algorithms backing every hash method."""

from __future__ import annotations

import hashlib
import hmac
from enum import Enum


class DigestAlgorithm(str, Enum):
    """Supported hash primitives, valued by their canonical name."""

    md5 = "md5"
    sha1 = "sha1"
    sha224 = "sha224"
    sha256 = "sha256"
    sha384 = "sha384"
    sha512 = "sha512"

    @classmethod
    def from_name(cls, name: str) -> DigestAlgorithm | None:
        """Exact lowercase lookup. Returns ``None`` for unknown names."""
        try:
            return cls(name)
        except ValueError:
            return None

    @property
    def digest_size(self) -> int:
        return _DIGEST_SIZES[self.value]

    def hash(self, message: bytes) -> bytes:
        return hashlib.new(self.value, message).digest()

    def hmac(self, key: bytes, message: bytes) -> bytes:
        return hmac.digest(key, message, self.value)


_DIGEST_SIZES = {
    "md5": 16,
    "sha1": 20,
    "sha224": 28,
    "sha256": 32,
    "sha384": 48,
    "sha512": 64,
}
