"""Tests for config and logging."""

import io
import json
import logging
import os
from pathlib import Path
from unittest.mock import patch

import pytest

from account_store.config import AccountStoreConfig, ReportConfig, StoreConfig
from account_store.exceptions import ConfigurationError
from account_store.logging import JsonFormatter, get_logger, setup_logging

ENV_VARS = [
    "ACCOUNT_STORE_FILE",
    "ACCOUNT_STORE_CREATE",
    "ACCOUNT_STORE_REPORT",
    "OUTPUT_DIR",
    "PRETTY_JSON",
    "LOG_LEVEL",
    "LOG_FORMAT",
    "SEED",
]


@pytest.fixture
def clean_env() -> dict[str, str]:
    """Environment without any account-store variables."""
    return {k: v for k, v in os.environ.items() if k not in ENV_VARS}


@pytest.fixture
def restore_root_logger():
    """Put the root logger back the way it was."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    logging.getLogger("account_store").setLevel(logging.NOTSET)


class TestStoreConfig:
    """Tests for StoreConfig."""

    def test_default_values(self) -> None:
        config = StoreConfig()

        assert config.data_file == Path("accounts.dat")
        assert config.create_if_missing is True


class TestReportConfig:
    """Tests for ReportConfig."""

    def test_default_values(self) -> None:
        config = ReportConfig()

        assert config.text_report_path == Path("accounts.txt")
        assert config.json_output_dir == Path("output")
        assert config.pretty_json is False


class TestAccountStoreConfig:
    """Tests for AccountStoreConfig."""

    def test_default_values(self) -> None:
        config = AccountStoreConfig()

        assert isinstance(config.store, StoreConfig)
        assert isinstance(config.report, ReportConfig)
        assert config.log_level == "INFO"
        assert config.log_format == "standard"
        assert config.seed is None

    def test_invalid_log_level(self) -> None:
        with pytest.raises(ConfigurationError, match="log level"):
            AccountStoreConfig(log_level="LOUD")

    def test_invalid_log_format(self) -> None:
        with pytest.raises(ConfigurationError, match="log format"):
            AccountStoreConfig(log_format="xml")

    def test_from_env_default(self, clean_env: dict[str, str]) -> None:
        with patch.dict(os.environ, clean_env, clear=True):
            config = AccountStoreConfig.from_env()

        assert config.store.data_file == Path("accounts.dat")
        assert config.store.create_if_missing is True
        assert config.report.pretty_json is False
        assert config.seed is None

    def test_from_env_custom(self, clean_env: dict[str, str]) -> None:
        env = {
            **clean_env,
            "ACCOUNT_STORE_FILE": "/data/bank.dat",
            "ACCOUNT_STORE_CREATE": "false",
            "ACCOUNT_STORE_REPORT": "/data/bank.txt",
            "OUTPUT_DIR": "/data/out",
            "PRETTY_JSON": "true",
            "LOG_LEVEL": "DEBUG",
            "LOG_FORMAT": "json",
            "SEED": "7",
        }
        with patch.dict(os.environ, env, clear=True):
            config = AccountStoreConfig.from_env()

        assert config.store.data_file == Path("/data/bank.dat")
        assert config.store.create_if_missing is False
        assert config.report.text_report_path == Path("/data/bank.txt")
        assert config.report.json_output_dir == Path("/data/out")
        assert config.report.pretty_json is True
        assert config.log_level == "DEBUG"
        assert config.log_format == "json"
        assert config.seed == 7

    def test_from_env_bad_seed(self, clean_env: dict[str, str]) -> None:
        with patch.dict(os.environ, {**clean_env, "SEED": "abc"}, clear=True):
            with pytest.raises(ConfigurationError, match="SEED"):
                AccountStoreConfig.from_env()


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_standard_format(self, restore_root_logger: None) -> None:
        setup_logging("DEBUG")
        root = logging.getLogger()

        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert not isinstance(root.handlers[0].formatter, JsonFormatter)
        assert logging.getLogger("account_store").level == logging.DEBUG

    def test_json_format(self, restore_root_logger: None) -> None:
        setup_logging("WARNING", format_type="json")
        root = logging.getLogger()

        assert root.level == logging.WARNING
        assert isinstance(root.handlers[0].formatter, JsonFormatter)

    def test_unknown_level_falls_back_to_info(self, restore_root_logger: None) -> None:
        setup_logging("NOPE")
        assert logging.getLogger().level == logging.INFO

    def test_custom_stream(self, restore_root_logger: None) -> None:
        stream = io.StringIO()
        setup_logging("INFO", stream=stream)

        logging.getLogger("account_store.test").info("hello")

        assert "| INFO     | account_store.test | hello" in stream.getvalue()

    def test_faker_quieted(self, restore_root_logger: None) -> None:
        setup_logging("DEBUG")
        assert logging.getLogger("faker").level == logging.WARNING


class TestJsonFormatter:
    """Tests for JsonFormatter."""

    def test_format(self) -> None:
        record = logging.LogRecord(
            "account_store.x", logging.INFO, __file__, 1, "hi %s", ("there",), None
        )
        data = json.loads(JsonFormatter().format(record))

        assert data["level"] == "INFO"
        assert data["logger"] == "account_store.x"
        assert data["message"] == "hi there"
        assert "timestamp" in data

    def test_format_with_exception(self) -> None:
        try:
            raise ValueError("boom")
        except ValueError:
            import sys

            record = logging.LogRecord(
                "x", logging.ERROR, __file__, 1, "failed", (), sys.exc_info()
            )

        data = json.loads(JsonFormatter().format(record))
        assert "ValueError: boom" in data["exception"]

    def test_format_with_context(self) -> None:
        record = logging.LogRecord("x", logging.INFO, __file__, 1, "msg", (), None)
        record.account_number = 10
        record.path = Path("accounts.dat")

        data = json.loads(JsonFormatter().format(record))
        assert data["account_number"] == 10
        assert data["path"] == "accounts.dat"
        assert "position" not in data

    def test_context_from_logger_extra(self, restore_root_logger: None) -> None:
        stream = io.StringIO()
        setup_logging("INFO", format_type="json", stream=stream)

        logging.getLogger("account_store.test").info("created", extra={"account_number": 7})

        data = json.loads(stream.getvalue())
        assert data["message"] == "created"
        assert data["account_number"] == 7


class TestGetLogger:
    """Tests for get_logger."""

    def test_returns_named_logger(self) -> None:
        assert get_logger("account_store.test").name == "account_store.test"
