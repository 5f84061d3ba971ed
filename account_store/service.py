"""Account operations on top of the positional record store.

Account ``n`` always lives in slot ``n - 1``. Every public method opens the
store, does its work and closes it again before returning, so no file handle
outlives a call. There is no locking: two processes updating the same
account can overwrite each other's change.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import replace
from pathlib import Path

from account_store.exceptions import (
    AccountExistsError,
    AccountNotFoundError,
    MisplacedRecordError,
    NoAccountsError,
)
from account_store.models import (
    FIRST_NAME_LENGTH,
    LAST_NAME_LENGTH,
    Account,
    AccountStatus,
    AccountSummary,
    BalanceDelta,
    BoundedText,
    FullReplace,
    Mutation,
    NameChange,
)
from account_store.store import IntegrityReport, PositionalRecordStore
from account_store.validation import (
    is_valid_account_number,
    validate_account_number,
    validate_names,
)

logger = logging.getLogger(__name__)


def position(account_number: int) -> int:
    """Slot position of an account number."""
    return account_number - 1


class AccountService:
    """CRUD and aggregate operations for accounts.

    Parameters
    ----------
    store : PositionalRecordStore
        Store owned by this service for its whole lifetime.
    """

    def __init__(self, store: PositionalRecordStore) -> None:
        self.store = store

    @classmethod
    def from_path(cls, path: str | Path, create_if_missing: bool = True) -> AccountService:
        """Build a service over ``path``, creating an empty data file if allowed."""
        store = PositionalRecordStore(path)
        if create_if_missing:
            store.initialize_if_needed()
        return cls(store)

    def initialize(self) -> None:
        """Wipe the data file back to empty slots."""
        self.store.initialize()

    def exists(self, account_number: int) -> bool:
        """Whether ``account_number`` is valid and occupied."""
        if not is_valid_account_number(account_number):
            return False
        with self.store.open("r") as store:
            return store.read_slot(position(account_number)).occupied

    def create(
        self,
        account_number: int,
        last_name: str,
        first_name: str,
        balance: float,
    ) -> Account:
        """Create an account in its slot and return the stored record.

        Names longer than their field are truncated; the returned account
        shows the stored values.

        Raises
        ------
        InvalidAccountNumberError
            If the number is outside 1-100.
        AccountExistsError
            If the slot is already occupied.
        InvalidNameError
            If either name has characters other than letters, spaces,
            hyphens or apostrophes.
        """
        validate_account_number(account_number)
        slot_position = position(account_number)

        with self.store.open("rw") as store:
            if store.read_slot(slot_position).occupied:
                raise AccountExistsError(f"Account #{account_number} already exists")
            validate_names(last_name, first_name)

            account = Account(
                account_number=account_number,
                last_name=self._fit(last_name, LAST_NAME_LENGTH, "last"),
                first_name=self._fit(first_name, FIRST_NAME_LENGTH, "first"),
                balance=float(balance),
            )
            store.write_at(slot_position, account)
            created = store.read_at(slot_position)

        logger.info(
            "Created account #%d", account_number, extra={"account_number": account_number}
        )
        return created

    def read(self, account_number: int) -> Account:
        """Return the account stored for ``account_number``.

        Raises
        ------
        AccountNotFoundError
            If the slot is empty.
        MisplacedRecordError
            If the slot holds a record for another account number.
        """
        validate_account_number(account_number)
        with self.store.open("r") as store:
            return self._load(store, account_number)

    def update(self, account_number: int, mutation: Mutation) -> Account:
        """Apply ``mutation`` to an existing account and write it back.

        The account number itself never changes. An invalid name leaves the
        stored record untouched.
        """
        validate_account_number(account_number)
        slot_position = position(account_number)

        with self.store.open("rw") as store:
            updated = self._apply(self._load(store, account_number), mutation)
            store.write_at(slot_position, updated)

        logger.info(
            "Updated account #%d (%s)",
            account_number,
            type(mutation).__name__,
            extra={"account_number": account_number},
        )
        return updated

    def delete(self, account_number: int) -> Account:
        """Return the slot to empty and give back the removed account."""
        validate_account_number(account_number)
        slot_position = position(account_number)

        with self.store.open("rw") as store:
            removed = self._load(store, account_number, "not found or already empty")
            store.write_at(slot_position, Account.empty())

        if removed.balance != 0:
            logger.warning(
                "Deleted account #%d with balance %.2f",
                account_number,
                removed.balance,
                extra={"account_number": account_number},
            )
        else:
            logger.info(
                "Deleted account #%d", account_number, extra={"account_number": account_number}
            )
        return removed

    def list_all(self) -> Iterator[Account]:
        """Iterate occupied accounts in ascending account number order.

        All slots are read in a single open/close cycle before the iterator
        is returned.
        """
        with self.store.open("r") as store:
            accounts = [slot.account for slot in store.scan() if slot.occupied]
        return iter(accounts)

    def aggregate(self) -> AccountSummary:
        """Count, total, overdrawn count and average over all accounts.

        Raises
        ------
        NoAccountsError
            If there are no accounts to average.
        """
        count = 0
        total = 0.0
        overdrawn = 0
        for account in self.list_all():
            count += 1
            total += account.balance
            if account.status is AccountStatus.OVERDRAWN:
                overdrawn += 1

        if count == 0:
            raise NoAccountsError("No accounts on file")

        return AccountSummary(
            count=count,
            total_balance=total,
            overdrawn_count=overdrawn,
            average_balance=total / count,
        )

    def audit(self) -> IntegrityReport:
        """Check the data file for truncation and misplaced records."""
        with self.store.open("r") as store:
            return store.audit()

    @staticmethod
    def status(account: Account) -> AccountStatus:
        return account.status

    def _apply(self, account: Account, mutation: Mutation) -> Account:
        if isinstance(mutation, BalanceDelta):
            return replace(account, balance=account.balance + mutation.amount)

        if isinstance(mutation, NameChange):
            validate_names(mutation.last_name, mutation.first_name)
            return replace(
                account,
                last_name=self._fit(mutation.last_name, LAST_NAME_LENGTH, "last"),
                first_name=self._fit(mutation.first_name, FIRST_NAME_LENGTH, "first"),
            )

        if isinstance(mutation, FullReplace):
            validate_names(mutation.last_name, mutation.first_name)
            return replace(
                account,
                last_name=self._fit(mutation.last_name, LAST_NAME_LENGTH, "last"),
                first_name=self._fit(mutation.first_name, FIRST_NAME_LENGTH, "first"),
                balance=float(mutation.balance),
            )

        raise TypeError(f"Unsupported mutation: {mutation!r}")

    @staticmethod
    def _load(
        store: PositionalRecordStore, account_number: int, missing: str = "not found"
    ) -> Account:
        slot_position = position(account_number)
        slot = store.read_slot(slot_position)
        if not slot.occupied:
            raise AccountNotFoundError(f"Account #{account_number} {missing}")
        if slot.account.account_number != account_number:
            raise MisplacedRecordError(
                slot_position, expected=account_number, found=slot.account.account_number
            )
        return slot.account

    @staticmethod
    def _fit(name: str, max_length: int, label: str) -> str:
        text = BoundedText.fit(name, max_length)
        if text.truncated:
            logger.warning(
                "Truncated %s name %r to %d characters: %r",
                label,
                text.original,
                max_length,
                text.value,
            )
        return text.value
