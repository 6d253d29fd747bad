"""Errors raised by the key-value store."""


class StoreError(Exception):
    """Base class for persistence errors."""


class StoreCorrupt(StoreError):
    """Stored text does not parse as the expected collection shape."""

    def __init__(self, key: str, reason: str):
        self.key = key
        self.reason = reason
        super().__init__(f"Stored value for {key!r} is corrupt: {reason}")
