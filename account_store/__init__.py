"""Fixed-capacity account records in a single positionally addressed file."""

from account_store.models import Account, AccountSummary, BalanceDelta, FullReplace, NameChange
from account_store.service import AccountService
from account_store.store import PositionalRecordStore

__version__ = "0.1.0"

__all__ = [
    "Account",
    "AccountService",
    "AccountSummary",
    "BalanceDelta",
    "FullReplace",
    "NameChange",
    "PositionalRecordStore",
]
