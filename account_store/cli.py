"""Command-line front end for the account data file.

Examples
--------
    account-store init
    account-store create 10 Williams Bob 3200
    account-store deposit 10 -150.25
    account-store list
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from account_store.config import LOG_FORMATS, LOG_LEVELS, AccountStoreConfig
from account_store.exceptions import AccountStoreError, NoAccountsError
from account_store.generators import AccountGenerator
from account_store.logging import get_logger, setup_logging
from account_store.models import Account, AccountSummary, BalanceDelta, FullReplace, NameChange
from account_store.service import AccountService
from account_store.sinks import JsonFileSink, TextReportSink
from account_store.store import PositionalRecordStore

logger = get_logger(__name__)


def build_parser(config: AccountStoreConfig) -> argparse.ArgumentParser:
    """Build the argument parser with defaults taken from ``config``."""
    parser = argparse.ArgumentParser(
        prog="account-store",
        description="Manage a fixed-slot account data file",
    )
    parser.add_argument(
        "--data-file",
        type=Path,
        default=config.store.data_file,
        help=f"Account data file (default: {config.store.data_file})",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=config.log_level,
        help=f"Log level (default: {config.log_level})",
    )
    parser.add_argument(
        "--log-format",
        choices=LOG_FORMATS,
        default=config.log_format,
        help=f"Log format (default: {config.log_format})",
    )

    commands = parser.add_subparsers(dest="command", required=True)

    init = commands.add_parser("init", help="Create the data file with empty slots")
    init.add_argument("--force", action="store_true", help="Wipe an existing data file")

    create = commands.add_parser("create", help="Create an account")
    create.add_argument("account_number", type=int)
    create.add_argument("last_name")
    create.add_argument("first_name")
    create.add_argument("balance", type=float)

    show = commands.add_parser("show", help="Show one account")
    show.add_argument("account_number", type=int)

    deposit = commands.add_parser(
        "deposit", help="Add an amount to the balance (negative to debit)"
    )
    deposit.add_argument("account_number", type=int)
    deposit.add_argument("amount", type=float)

    rename = commands.add_parser("rename", help="Replace both names")
    rename.add_argument("account_number", type=int)
    rename.add_argument("last_name")
    rename.add_argument("first_name")

    replace = commands.add_parser("replace", help="Replace names and balance")
    replace.add_argument("account_number", type=int)
    replace.add_argument("last_name")
    replace.add_argument("first_name")
    replace.add_argument("balance", type=float)

    delete = commands.add_parser("delete", help="Delete an account")
    delete.add_argument("account_number", type=int)
    delete.add_argument(
        "--yes",
        action="store_true",
        help="Delete even when the balance is not zero",
    )

    commands.add_parser("list", help="List all accounts with totals")

    report = commands.add_parser("report", help="Write the text report to a file")
    report.add_argument(
        "--output",
        type=Path,
        default=config.report.text_report_path,
        help=f"Report path (default: {config.report.text_report_path})",
    )

    export = commands.add_parser("export", help="Export accounts and summary as JSON")
    export.add_argument(
        "--output-dir",
        type=Path,
        default=config.report.json_output_dir,
        help=f"Output directory (default: {config.report.json_output_dir})",
    )
    export.add_argument(
        "--pretty",
        action="store_true",
        default=config.report.pretty_json,
        help="Pretty-print JSON",
    )

    commands.add_parser("audit", help="Check the data file for damage")

    seed = commands.add_parser("seed", help="Fill free slots with sample accounts")
    seed.add_argument("--count", type=int, default=10, help="Accounts to create (default: 10)")
    seed.add_argument("--seed", type=int, default=config.seed, help="Random seed")

    return parser


def display_account(account: Account) -> None:
    """Print one account."""
    print(f"Account Number: {account.account_number}")
    print(f"Customer Name:  {account.last_name}, {account.first_name}")
    print(f"Account Balance: ${account.balance:.2f}")
    print(f"Status: {account.status.value}")


def summarize(service: AccountService) -> AccountSummary | None:
    """Aggregate figures, or ``None`` when the store has no accounts."""
    try:
        return service.aggregate()
    except NoAccountsError:
        return None


def run_command(args: argparse.Namespace, create_if_missing: bool = True) -> int:
    """Execute a parsed command and return its exit code."""
    if args.command == "init":
        store = PositionalRecordStore(args.data_file)
        if store.path.exists() and not args.force:
            print(
                f"Error: {store.path} already exists; use --force to wipe it",
                file=sys.stderr,
            )
            return 1
        store.initialize()
        print(f"Data file initialized with {store.capacity} empty slots: {store.path}")
        return 0

    service = AccountService.from_path(args.data_file, create_if_missing=create_if_missing)

    if args.command == "create":
        display_account(
            service.create(args.account_number, args.last_name, args.first_name, args.balance)
        )
    elif args.command == "show":
        display_account(service.read(args.account_number))
    elif args.command == "deposit":
        before = service.read(args.account_number)
        after = service.update(args.account_number, BalanceDelta(args.amount))
        print(f"Previous Balance: ${before.balance:.2f}")
        print(f"Transaction:      ${args.amount:.2f}")
        print(f"New Balance:      ${after.balance:.2f}")
    elif args.command == "rename":
        display_account(
            service.update(args.account_number, NameChange(args.last_name, args.first_name))
        )
    elif args.command == "replace":
        display_account(
            service.update(
                args.account_number,
                FullReplace(args.last_name, args.first_name, args.balance),
            )
        )
    elif args.command == "delete":
        account = service.read(args.account_number)
        if account.balance != 0 and not args.yes:
            print(
                f"Error: account #{account.account_number} has a balance of "
                f"${account.balance:.2f}; pass --yes to delete it anyway",
                file=sys.stderr,
            )
            return 1
        service.delete(args.account_number)
        print(f"Account #{args.account_number} deleted")
    elif args.command == "list":
        TextReportSink(None, title="ALL ACCOUNTS").write(service.list_all(), summarize(service))
    elif args.command == "report":
        TextReportSink(args.output).write(service.list_all(), summarize(service))
        print(f"Text report created: {args.output}")
    elif args.command == "export":
        sink = JsonFileSink(args.output_dir, pretty=args.pretty)
        sink.write_accounts(service.list_all())
        sink.write_summary(summarize(service))
        sink.close()
        print(f"JSON files written to: {args.output_dir}")
    elif args.command == "audit":
        report = service.audit()
        print(f"File size:  {report.file_size} bytes (expected {report.expected_size})")
        print(f"Occupied:   {len(report.occupied)}")
        print(f"Empty:      {len(report.empty)}")
        print(f"Damaged:    {report.damaged}")
        print(f"Misplaced:  {report.misplaced}")
        return 0 if report.ok else 1
    elif args.command == "seed":
        created = AccountGenerator(seed=args.seed).populate(service, args.count)
        print(f"Created {len(created)} sample accounts")

    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    try:
        config = AccountStoreConfig.from_env()
    except AccountStoreError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    args = build_parser(config).parse_args(argv)
    setup_logging(args.log_level, args.log_format, stream=sys.stderr)

    try:
        return run_command(args, create_if_missing=config.store.create_if_missing)
    except AccountStoreError as e:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
