"""hashedpass: salted password hashes with PBKDF2, HMAC and plain digests."""

from hashedpass.client import Hasher
from hashedpass.config import HasherConfig
from hashedpass.core.digests import DigestAlgorithm
from hashedpass.core.methods import DirectHash, HashMethod, Hmac, Pbkdf2
from hashedpass.core.types import HashedCredential

__version__ = "0.1.0"
__all__ = [
    "DigestAlgorithm",
    "DirectHash",
    "HashMethod",
    "HashedCredential",
    "Hasher",
    "HasherConfig",
    "Hmac",
    "Pbkdf2",
]
