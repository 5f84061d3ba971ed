"""Tests for custom exception hierarchy."""

from account_store.exceptions import (
    AccountExistsError,
    AccountNotFoundError,
    AccountStoreError,
    ConfigurationError,
    InvalidAccountNumberError,
    InvalidNameError,
    InvalidPositionError,
    NoAccountsError,
    ShortReadError,
    ShortWriteError,
    StorageIOError,
)


class TestExceptionHierarchy:
    """Test exception inheritance chain."""

    def test_base_is_exception(self) -> None:
        assert isinstance(AccountStoreError("test"), Exception)

    def test_domain_errors_are_account_store_errors(self) -> None:
        for cls in (
            InvalidAccountNumberError,
            AccountNotFoundError,
            AccountExistsError,
            InvalidNameError,
            StorageIOError,
            NoAccountsError,
            ConfigurationError,
        ):
            assert isinstance(cls("test"), AccountStoreError)

    def test_short_io_errors_are_storage_errors(self) -> None:
        assert isinstance(ShortReadError("test", position=3), StorageIOError)
        assert isinstance(ShortWriteError("test", position=3), StorageIOError)

    def test_short_read_carries_position_and_record(self) -> None:
        err = ShortReadError("short", position=7, record="sentinel")
        assert err.position == 7
        assert err.record == "sentinel"

    def test_invalid_position_message(self) -> None:
        err = InvalidPositionError(100, 100)
        assert isinstance(err, AccountStoreError)
        assert err.position == 100
        assert str(err) == "Invalid position 100 (must be 0-99)"

    def test_exception_message(self) -> None:
        err = AccountNotFoundError("Account #10 not found")
        assert str(err) == "Account #10 not found"
