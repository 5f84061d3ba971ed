"""Custom exception hierarchy for account-store."""


class AccountStoreError(Exception):
    """Base exception for all account-store errors."""


class InvalidPositionError(AccountStoreError):
    """Raised when a slot position is outside the store."""

    def __init__(self, position: int, capacity: int) -> None:
        super().__init__(f"Invalid position {position} (must be 0-{capacity - 1})")
        self.position = position


class InvalidAccountNumberError(AccountStoreError):
    """Raised when an account number is outside the valid range."""


class AccountNotFoundError(AccountStoreError):
    """Raised when an account slot is empty."""


class AccountExistsError(AccountStoreError):
    """Raised when creating an account on an occupied slot."""


class InvalidNameError(AccountStoreError):
    """Raised when a name fails the character rule."""


class StorageIOError(AccountStoreError):
    """Raised when the backing file cannot be opened, read or written."""


class ShortReadError(StorageIOError):
    """Raised when fewer than a full record's bytes could be read.

    ``record`` holds the empty sentinel so callers that only list accounts
    can carry on, while audits can still tell the slot is damaged.
    """

    def __init__(self, message: str, position: int, record: object = None) -> None:
        super().__init__(message)
        self.position = position
        self.record = record


class ShortWriteError(StorageIOError):
    """Raised when fewer than a full record's bytes were written."""

    def __init__(self, message: str, position: int) -> None:
        super().__init__(message)
        self.position = position


class MisplacedRecordError(StorageIOError):
    """Raised when a slot holds a record for a different account number."""

    def __init__(self, position: int, expected: int, found: int) -> None:
        super().__init__(
            f"Slot {position} holds account #{found}, expected #{expected}; run an audit"
        )
        self.position = position
        self.expected = expected
        self.found = found


class NoAccountsError(AccountStoreError):
    """Raised when aggregates are requested on a store with no accounts."""


class ConfigurationError(AccountStoreError):
    """Raised when configuration is invalid or missing."""
