"""Update modes accepted by ``AccountService.update``."""

from dataclasses import dataclass


@dataclass(frozen=True)
class BalanceDelta:
    """Add ``amount`` to the balance (negative for a debit)."""

    amount: float


@dataclass(frozen=True)
class NameChange:
    """Replace both names."""

    last_name: str
    first_name: str


@dataclass(frozen=True)
class FullReplace:
    """Replace both names and the balance."""

    last_name: str
    first_name: str
    balance: float


Mutation = BalanceDelta | NameChange | FullReplace
