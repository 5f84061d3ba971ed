"""Account model and slot representation."""

from __future__ import annotations

from dataclasses import dataclass

from account_store.models.enums import AccountStatus

MAX_ACCOUNTS = 100
MIN_ACCOUNT_NUMBER = 1
MAX_ACCOUNT_NUMBER = MAX_ACCOUNTS

# Significant characters per name field; the on-disk field is one byte wider
LAST_NAME_LENGTH = 14
FIRST_NAME_LENGTH = 9


@dataclass
class Account:
    """Bank account record.

    ``account_number`` 0 is the empty sentinel used on disk and never names
    a real account.
    """

    account_number: int
    last_name: str
    first_name: str
    balance: float

    @classmethod
    def empty(cls) -> Account:
        """Return the empty sentinel record."""
        return cls(account_number=0, last_name="", first_name="", balance=0.0)

    @property
    def is_empty(self) -> bool:
        return self.account_number == 0

    @property
    def position(self) -> int:
        """Zero-based slot position of this account."""
        return self.account_number - 1

    @property
    def status(self) -> AccountStatus:
        return AccountStatus.for_balance(self.balance)


@dataclass(frozen=True)
class Slot:
    """One position of the store, tagged occupied or empty."""

    position: int
    account: Account | None = None

    @property
    def occupied(self) -> bool:
        return self.account is not None


@dataclass(frozen=True)
class BoundedText:
    """Text fitted into a fixed number of characters.

    ``fit`` keeps the first ``max_length`` characters; ``truncated`` tells
    whether anything was dropped.
    """

    value: str
    original: str
    max_length: int

    @classmethod
    def fit(cls, text: str, max_length: int) -> BoundedText:
        return cls(value=text[:max_length], original=text, max_length=max_length)

    @property
    def truncated(self) -> bool:
        return self.value != self.original

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class AccountSummary:
    """Aggregate figures over all occupied slots."""

    count: int
    total_balance: float
    overdrawn_count: int
    average_balance: float
