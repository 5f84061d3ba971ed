"""Plain-text account report."""

import logging
import sys
from pathlib import Path
from typing import Iterable, TextIO

from account_store.models import Account, AccountSummary

logger = logging.getLogger(__name__)

SEPARATOR = "=" * 55
HEADER = f"{'Acct#':<6} {'Last Name':<15} {'First Name':<10} {'Balance':>12} {'Status':>10}"


class TextReportSink:
    """Write a formatted account listing with totals.

    Parameters
    ----------
    path : str | Path | None
        Report file; ``None`` writes to stdout.
    title : str
        First line of the report.
    """

    def __init__(self, path: str | Path | None = None, title: str = "BANK ACCOUNT REPORT") -> None:
        self.path = Path(path) if path is not None else None
        self.title = title

    def write(self, accounts: Iterable[Account], summary: AccountSummary | None) -> None:
        """Write the report; ``summary`` is ``None`` for a store with no accounts."""
        if self.path is None:
            self._write_to(sys.stdout, accounts, summary)
            return

        with open(self.path, "w", encoding="utf-8") as f:
            self._write_to(f, accounts, summary)
        logger.info("Text report created: %s", self.path)

    def _write_to(
        self, out: TextIO, accounts: Iterable[Account], summary: AccountSummary | None
    ) -> None:
        out.write(f"{self.title}\n\n")
        out.write(HEADER + "\n")
        out.write(SEPARATOR + "\n")
        for account in accounts:
            out.write(format_row(account) + "\n")
        out.write(SEPARATOR + "\n")

        if summary is None:
            out.write("Total Accounts: 0\n")
            out.write("Total Balance:  $0.00\n")
            out.write("Overdrawn:      0 accounts\n")
            return

        out.write(f"Total Accounts: {summary.count}\n")
        out.write(f"Total Balance:  ${summary.total_balance:.2f}\n")
        out.write(f"Overdrawn:      {summary.overdrawn_count} accounts\n")
        out.write(f"Average Balance: ${summary.average_balance:.2f}\n")


def format_row(account: Account) -> str:
    """One report line for ``account``."""
    return (
        f"{account.account_number:<6} {account.last_name:<15} {account.first_name:<10} "
        f"{account.balance:>12.2f} {account.status.value:>10}"
    )
