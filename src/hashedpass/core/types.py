"""The HashedCredential value type."""

from __future__ import annotations

import hmac
import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from hashedpass.core.methods import AnyHashMethod, DirectHash, Hmac, Pbkdf2, parse_method
from hashedpass.core.salt import DEFAULT_SALT_LENGTH, RandomSource, generate_salt
from hashedpass.exceptions import HashedPassError, InvalidString

log = logging.getLogger(__name__)

SEPARATOR = "$"


class HashedCredential(BaseModel):
    """A salted password hash, serialized as ``<hash>$<method>$<salt>``.

    >>> cred = HashedCredential.create("s3cret")
    >>> stored = cred.serialize()
    >>> HashedCredential.parse(stored).verify("s3cret")
    True
    """

    model_config = ConfigDict(frozen=True)

    hash: str
    method: AnyHashMethod
    salt: str

    @field_validator("hash", "salt")
    @classmethod
    def check_field(cls, value: str) -> str:
        if not value:
            raise ValueError("must not be empty")
        if SEPARATOR in value:
            raise ValueError(f"must not contain {SEPARATOR!r}")
        return value

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def create(
        cls,
        password: str,
        method: DirectHash | Hmac | Pbkdf2 | None = None,
        *,
        salt_length: int = DEFAULT_SALT_LENGTH,
        rng: RandomSource | None = None,
    ) -> HashedCredential:
        """Hash *password* under a freshly drawn salt.

        Defaults to PBKDF2-SHA256 with 4096 iterations. Raises
        ``InvalidInput`` or ``DerivedKeyTooLong`` if derivation fails.
        """
        if method is None:
            method = Pbkdf2()
        salt = generate_salt(salt_length, rng)
        return cls(hash=method.calculate(password, salt), method=method, salt=salt)

    @classmethod
    def parse(cls, text: str) -> HashedCredential:
        """Decode a stored string. No hashing is performed."""
        fields = text.split(SEPARATOR)
        if len(fields) != 3:
            raise InvalidString(text, f"expected 3 fields, got {len(fields)}")
        hash_, method_text, salt = fields
        if not hash_ or not method_text or not salt:
            raise InvalidString(text, "empty field")
        method = parse_method(method_text)
        try:
            return cls(hash=hash_, method=method, salt=salt)
        except ValidationError as exc:
            raise InvalidString(text, "invalid field") from exc

    # ------------------------------------------------------------------
    # Encoding / verification
    # ------------------------------------------------------------------

    def serialize(self) -> str:
        return SEPARATOR.join((self.hash, str(self.method), self.salt))

    def __str__(self) -> str:
        return self.serialize()

    def verify(self, candidate: str) -> bool:
        """Return ``True`` if *candidate* hashes to the stored value.

        Derivation failures count as a mismatch and are never raised.
        """
        try:
            computed = self.method.calculate(candidate, self.salt)
        except HashedPassError as exc:
            log.debug("Verification with %s failed: %s", self.method, type(exc).__name__)
            return False
        return hmac.compare_digest(computed.lower().encode(), self.hash.lower().encode())

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, HashedCredential):
            return NotImplemented
        # method equality is unconditional, see HashMethod
        return self.hash == other.hash and self.method == other.method and self.salt == other.salt

    def __hash__(self) -> int:
        return hash((self.hash, self.salt))
