"""hashedpass core types and algorithms."""

from hashedpass.core.digests import DigestAlgorithm
from hashedpass.core.methods import (
    AnyHashMethod,
    DirectHash,
    HashMethod,
    Hmac,
    Pbkdf2,
    parse_method,
)
from hashedpass.core.pbkdf2 import derive
from hashedpass.core.salt import RandomSource, generate_salt
from hashedpass.core.types import HashedCredential

__all__ = [
    "AnyHashMethod",
    "DigestAlgorithm",
    "DirectHash",
    "HashMethod",
    "HashedCredential",
    "Hmac",
    "Pbkdf2",
    "RandomSource",
    "derive",
    "generate_salt",
    "parse_method",
]
