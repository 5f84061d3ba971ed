"""Input rules applied before any storage access."""

import string

from account_store.exceptions import InvalidAccountNumberError, InvalidNameError
from account_store.models import MAX_ACCOUNT_NUMBER, MIN_ACCOUNT_NUMBER

NAME_CHARACTERS = frozenset(string.ascii_letters + " -'")


def is_valid_account_number(account_number: int) -> bool:
    """An ``int`` (not a ``bool``) within the account number range."""
    if not isinstance(account_number, int) or isinstance(account_number, bool):
        return False
    return MIN_ACCOUNT_NUMBER <= account_number <= MAX_ACCOUNT_NUMBER


def is_valid_name(name: str) -> bool:
    """Non-empty and made only of ASCII letters, spaces, hyphens or apostrophes."""
    return bool(name) and all(c in NAME_CHARACTERS for c in name)


def validate_account_number(account_number: int) -> None:
    if not is_valid_account_number(account_number):
        raise InvalidAccountNumberError(
            f"Account number must be between {MIN_ACCOUNT_NUMBER} and {MAX_ACCOUNT_NUMBER}, "
            f"got {account_number!r}"
        )


def validate_names(last_name: str, first_name: str) -> None:
    for label, name in (("last", last_name), ("first", first_name)):
        if not is_valid_name(name):
            raise InvalidNameError(
                f"Invalid {label} name {name!r}: use letters, spaces, hyphens or apostrophes"
            )
