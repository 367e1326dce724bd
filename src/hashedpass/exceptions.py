"""hashedpass exceptions."""


class HashedPassError(Exception):
    """Base exception for all hashedpass errors."""


class InvalidString(HashedPassError):
    """Raised when a serialized credential or method field is malformed."""

    def __init__(self, text: str, reason: str = "malformed"):
        self.text = text
        self.reason = reason
        super().__init__(f"Invalid hashed password string: {reason}")


class InvalidInput(HashedPassError):
    """Raised on empty password/salt or non-positive counts and lengths."""


class DerivedKeyTooLong(HashedPassError):
    """Raised when a derived key longer than (2^32 - 1) * hLen is requested."""

    def __init__(self, key_length: int, limit: int):
        self.key_length = key_length
        self.limit = limit
        super().__init__(f"Derived key too long ({key_length} > {limit} bytes)")
