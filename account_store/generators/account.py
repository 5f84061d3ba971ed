"""Sample account generator."""

from __future__ import annotations

import random
from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING

from account_store.generators.base import BaseGenerator
from account_store.models import (
    FIRST_NAME_LENGTH,
    LAST_NAME_LENGTH,
    MAX_ACCOUNT_NUMBER,
    MIN_ACCOUNT_NUMBER,
    Account,
    BoundedText,
)
from account_store.validation import is_valid_name, validate_account_number

if TYPE_CHECKING:
    from account_store.service import AccountService


class AccountGenerator(BaseGenerator):
    """Generate synthetic accounts that pass the name rule.

    Roughly one account in ten is overdrawn.
    """

    BALANCE_RANGE = (0.0, 10000.0)
    OVERDRAFT_RANGE = (-1500.0, -0.01)
    OVERDRAFT_RATE = 0.10
    MAX_NAME_ATTEMPTS = 50

    def generate(self, account_number: int) -> Account:
        """Generate a single account.

        Parameters
        ----------
        account_number : int
            Account number, 1-100.

        Returns
        -------
        Account
            Generated account with names fitted to their fields.
        """
        validate_account_number(account_number)
        return Account(
            account_number=account_number,
            last_name=self._name(self.fake.last_name, LAST_NAME_LENGTH),
            first_name=self._name(self.fake.first_name, FIRST_NAME_LENGTH),
            balance=self._balance(),
        )

    def generate_batch(self, count: int, numbers: list[int] | None = None) -> Iterator[Account]:
        """Generate ``count`` accounts with distinct account numbers.

        Parameters
        ----------
        count : int
            Number of accounts to generate.
        numbers : list[int] | None
            Candidate account numbers (default: all of 1-100).

        Yields
        ------
        Account
            Generated accounts.
        """
        candidates = numbers if numbers is not None else list(
            range(MIN_ACCOUNT_NUMBER, MAX_ACCOUNT_NUMBER + 1)
        )
        for account_number in random.sample(candidates, min(count, len(candidates))):
            yield self.generate(account_number)

    def populate(self, service: AccountService, count: int) -> list[Account]:
        """Create up to ``count`` accounts on free slots of ``service``."""
        taken = {account.account_number for account in service.list_all()}
        free = [n for n in range(MIN_ACCOUNT_NUMBER, MAX_ACCOUNT_NUMBER + 1) if n not in taken]

        created = []
        for account in self.generate_batch(count, numbers=free):
            created.append(
                service.create(
                    account.account_number,
                    account.last_name,
                    account.first_name,
                    account.balance,
                )
            )
        return sorted(created, key=lambda a: a.account_number)

    def _name(self, source: Callable[[], str], max_length: int) -> str:
        for _ in range(self.MAX_NAME_ATTEMPTS):
            name = BoundedText.fit(source(), max_length).value.rstrip(" -'")
            if is_valid_name(name):
                return name
        raise ValueError("Could not generate a valid name")

    def _balance(self) -> float:
        if random.random() < self.OVERDRAFT_RATE:
            low, high = self.OVERDRAFT_RANGE
        else:
            low, high = self.BALANCE_RANGE
        return round(random.uniform(low, high), 2)
