"""Exceptions raised by bags and thread-confined cells."""


class IBagError(Exception):
    """Base class for every error raised by this package."""


class InvalidThreadAccess(IBagError):
    """Raised when a thread-confined value is touched from a foreign thread."""

    def __init__(self, message: str = "fragile value accessed from foreign thread") -> None:
        super().__init__(message)


class FailTakeOwnership(IBagError):
    """Raised when a frozen cell refuses to change owner."""

    def __init__(self, message: str = "failed to take ownership of value") -> None:
        super().__init__(message)