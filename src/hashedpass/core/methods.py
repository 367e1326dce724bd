"""Hash methods: the tagged union selecting how a credential is computed."""

from __future__ import annotations

import re
from abc import abstractmethod
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from hashedpass.core.digests import DigestAlgorithm
from hashedpass.core.pbkdf2 import derive
from hashedpass.exceptions import InvalidInput, InvalidString

DEFAULT_ITERATIONS = 4096

# no leading zeros, so parse -> str round-trips exactly
_METHOD_RE = re.compile(
    r"^(?:(?P<kind>hash|hmac)_(?P<digest>[a-z0-9]+)"
    r"|pbkdf2_(?P<pbkdf2_digest>[a-z0-9]+)_(?P<iterations>[1-9][0-9]*))$"
)


def _encode(text: str) -> bytes:
    try:
        return text.encode()
    except UnicodeEncodeError as exc:
        raise InvalidInput("password and salt must be encodable as UTF-8") from exc


class HashMethod(BaseModel):
    """Abstract base of the method union.

    Any two methods compare equal regardless of variant or parameters.
    Stored credentials have historically been compared this way, so the
    behaviour is kept; use ``str(method)`` to tell methods apart.
    """

    model_config = ConfigDict(frozen=True)

    digest: DigestAlgorithm = DigestAlgorithm.sha256

    @abstractmethod
    def calculate(self, password: str, salt: str) -> str:
        """Return the lowercase hex hash of *password* under *salt*."""

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, HashMethod):
            return NotImplemented
        return True

    def __hash__(self) -> int:
        return hash(HashMethod)


class DirectHash(HashMethod):
    """``digest(salt ++ password)``."""

    kind: Literal["hash"] = "hash"

    def calculate(self, password: str, salt: str) -> str:
        return self.digest.hash(_encode(salt) + _encode(password)).hex()

    def __str__(self) -> str:
        return f"hash_{self.digest.value}"


class Hmac(HashMethod):
    """HMAC keyed by the salt over the password."""

    kind: Literal["hmac"] = "hmac"

    def calculate(self, password: str, salt: str) -> str:
        return self.digest.hmac(_encode(salt), _encode(password)).hex()

    def __str__(self) -> str:
        return f"hmac_{self.digest.value}"


class Pbkdf2(HashMethod):
    """PBKDF2-HMAC with the digest's native output length."""

    kind: Literal["pbkdf2"] = "pbkdf2"
    iterations: int = Field(default=DEFAULT_ITERATIONS, gt=0)

    def calculate(self, password: str, salt: str) -> str:
        return derive(
            _encode(password), _encode(salt), self.iterations, self.digest
        ).hex()

    def __str__(self) -> str:
        return f"pbkdf2_{self.digest.value}_{self.iterations}"


# tagged by `kind` so pydantic dumps and validates back to the same variant
AnyHashMethod = Annotated[DirectHash | Hmac | Pbkdf2, Field(discriminator="kind")]

def parse_method(text: str) -> DirectHash | Hmac | Pbkdf2:
    """Parse a method field such as ``hmac_sha256`` or ``pbkdf2_sha1_1024``."""
    match = _METHOD_RE.match(text)
    if match is None:
        raise InvalidString(text, f"unknown hash method {text!r}")

    name = match.group("digest") or match.group("pbkdf2_digest")
    digest = DigestAlgorithm.from_name(name)
    if digest is None:
        raise InvalidString(text, f"unknown digest {name!r}")

    kind = match.group("kind")
    if kind == "hash":
        return DirectHash(digest=digest)
    if kind == "hmac":
        return Hmac(digest=digest)
    return Pbkdf2(digest=digest, iterations=int(match.group("iterations")))
