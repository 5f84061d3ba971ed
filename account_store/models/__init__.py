"""Domain models for the account store."""

from account_store.models.account import (
    FIRST_NAME_LENGTH,
    LAST_NAME_LENGTH,
    MAX_ACCOUNT_NUMBER,
    MAX_ACCOUNTS,
    MIN_ACCOUNT_NUMBER,
    Account,
    AccountSummary,
    BoundedText,
    Slot,
)
from account_store.models.enums import AccountStatus
from account_store.models.mutations import BalanceDelta, FullReplace, Mutation, NameChange

__all__ = [
    "FIRST_NAME_LENGTH",
    "LAST_NAME_LENGTH",
    "MAX_ACCOUNT_NUMBER",
    "MAX_ACCOUNTS",
    "MIN_ACCOUNT_NUMBER",
    "Account",
    "AccountStatus",
    "AccountSummary",
    "BalanceDelta",
    "BoundedText",
    "FullReplace",
    "Mutation",
    "NameChange",
    "Slot",
]
