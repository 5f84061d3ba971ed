"""Configuration management for account-store."""

from dataclasses import dataclass, field
from pathlib import Path

from account_store.exceptions import ConfigurationError

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMATS = ("standard", "json")


@dataclass
class StoreConfig:
    """Backing file configuration."""

    data_file: Path = field(default_factory=lambda: Path("accounts.dat"))
    create_if_missing: bool = True


@dataclass
class ReportConfig:
    """Report output configuration."""

    text_report_path: Path = field(default_factory=lambda: Path("accounts.txt"))
    json_output_dir: Path = field(default_factory=lambda: Path("output"))
    pretty_json: bool = False


@dataclass
class AccountStoreConfig:
    """Main configuration for account-store."""

    store: StoreConfig = field(default_factory=StoreConfig)
    report: ReportConfig = field(default_factory=ReportConfig)
    log_level: str = "INFO"
    log_format: str = "standard"
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.log_level.upper() not in LOG_LEVELS:
            raise ConfigurationError(f"Unknown log level: {self.log_level}")
        if self.log_format not in LOG_FORMATS:
            raise ConfigurationError(f"Unknown log format: {self.log_format}")

    @classmethod
    def from_env(cls) -> "AccountStoreConfig":
        """Create config from environment variables."""
        import os

        store = StoreConfig(
            data_file=Path(os.getenv("ACCOUNT_STORE_FILE", "accounts.dat")),
            create_if_missing=os.getenv("ACCOUNT_STORE_CREATE", "true").lower() == "true",
        )

        report = ReportConfig(
            text_report_path=Path(os.getenv("ACCOUNT_STORE_REPORT", "accounts.txt")),
            json_output_dir=Path(os.getenv("OUTPUT_DIR", "output")),
            pretty_json=os.getenv("PRETTY_JSON", "false").lower() == "true",
        )

        seed_str = os.getenv("SEED")
        try:
            seed = int(seed_str) if seed_str else None
        except ValueError as e:
            raise ConfigurationError(f"SEED must be an integer, got {seed_str!r}") from e

        return cls(
            store=store,
            report=report,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "standard"),
            seed=seed,
        )
