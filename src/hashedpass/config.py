"""hashedpass configuration."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from hashedpass.core.methods import DirectHash, Hmac, Pbkdf2, parse_method
from hashedpass.core.salt import DEFAULT_SALT_LENGTH
from hashedpass.exceptions import InvalidString


class HasherConfig(BaseModel):
    """Settings for newly created credentials."""

    method: str = "pbkdf2_sha256_4096"
    salt_length: int = Field(default=DEFAULT_SALT_LENGTH, ge=1)

    @field_validator("method")
    @classmethod
    def check_method(cls, value: str) -> str:
        try:
            parse_method(value)
        except InvalidString as exc:
            raise ValueError(exc.reason) from exc
        return value

    @property
    def hash_method(self) -> DirectHash | Hmac | Pbkdf2:
        return parse_method(self.method)
