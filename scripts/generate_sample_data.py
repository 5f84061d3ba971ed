#!/usr/bin/env python3
"""Generate a sample account data file for manual validation.

Creates ``local/accounts.dat`` filled with sample accounts, then writes a
text report and JSON export next to it.
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from account_store.generators import AccountGenerator
from account_store.logging import setup_logging
from account_store.service import AccountService
from account_store.sinks import JsonFileSink, TextReportSink


def main() -> None:
    """Generate the sample data file and reports."""
    output_dir = project_root / "local"
    output_dir.mkdir(exist_ok=True)

    seed = 42
    num_accounts = 25

    setup_logging("INFO")

    print("=" * 60)
    print("Generating Sample Account Data")
    print("=" * 60)

    service = AccountService.from_path(output_dir / "accounts.dat", create_if_missing=False)
    service.initialize()

    created = AccountGenerator(seed=seed).populate(service, num_accounts)
    summary = service.aggregate()

    TextReportSink(output_dir / "accounts.txt").write(service.list_all(), summary)

    sink = JsonFileSink(output_dir, pretty=True)
    sink.write_accounts(service.list_all())
    sink.write_summary(summary)
    sink.close()

    print("\n" + "=" * 60)
    print("Summary")
    print("=" * 60)
    print(f"{'Accounts:':18}{len(created)}")
    print(f"{'Overdrawn:':18}{summary.overdrawn_count}")
    print(f"{'Total balance:':18}{summary.total_balance:.2f}")
    print(f"\nAll files saved to: {output_dir}")
    print("=" * 60)


if __name__ == "__main__":
    main()
