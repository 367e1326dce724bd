"""Random salt generation."""

from __future__ import annotations

import secrets
import string
from collections.abc import Sequence
from typing import Protocol, TypeVar, runtime_checkable

from hashedpass.exceptions import InvalidInput

SALT_ALPHABET = string.ascii_uppercase + string.ascii_lowercase
DEFAULT_SALT_LENGTH = 30
LEGACY_SALT_LENGTH = 22

_T = TypeVar("_T")


@runtime_checkable
class RandomSource(Protocol):
    """Anything that can pick an element of a sequence."""

    def choice(self, seq: Sequence[_T]) -> _T:
        ...


_system_random = secrets.SystemRandom()


def generate_salt(length: int = DEFAULT_SALT_LENGTH, rng: RandomSource | None = None) -> str:
    """Return *length* letters drawn from :data:`SALT_ALPHABET`.

    Uses the OS CSPRNG unless *rng* is given.
    """
    if length <= 0:
        raise InvalidInput(f"salt length must be positive, got {length}")
    source = rng or _system_random
    return "".join(source.choice(SALT_ALPHABET) for _ in range(length))
