"""User-facing Hasher: create, verify and upgrade stored credentials."""

from __future__ import annotations

import logging

from hashedpass.config import HasherConfig
from hashedpass.core.salt import RandomSource
from hashedpass.core.types import HashedCredential
from hashedpass.exceptions import InvalidString

log = logging.getLogger(__name__)


class Hasher:
    """Password hashing with a configured default method.

    >>> hasher = Hasher()
    >>> stored = hasher.hash("hunter2")
    >>> hasher.verify("hunter2", stored)
    True
    """

    def __init__(
        self,
        config: HasherConfig | None = None,
        *,
        rng: RandomSource | None = None,
    ):
        self._config = config or HasherConfig()
        self._method = self._config.hash_method
        self._rng = rng

    @property
    def config(self) -> HasherConfig:
        return self._config

    def create(self, password: str) -> HashedCredential:
        return HashedCredential.create(
            password,
            self._method,
            salt_length=self._config.salt_length,
            rng=self._rng,
        )

    def hash(self, password: str) -> str:
        """Hash *password* and return the storable string."""
        return self.create(password).serialize()

    def verify(self, password: str, stored: str | HashedCredential) -> bool:
        """Check *password* against *stored*. Malformed strings never match."""
        if isinstance(stored, str):
            try:
                stored = HashedCredential.parse(stored)
            except InvalidString as exc:
                log.warning("Rejecting malformed stored hash: %s", exc.reason)
                return False
        return stored.verify(password)

    def needs_update(self, stored: str | HashedCredential) -> bool:
        """Whether *stored* was made with weaker or different settings.

        Compares the method's text form since method equality is
        unconditional. Raises ``InvalidString`` for malformed input.
        """
        if isinstance(stored, str):
            stored = HashedCredential.parse(stored)
        if str(stored.method) != str(self._method):
            return True
        return len(stored.salt) < self._config.salt_length
