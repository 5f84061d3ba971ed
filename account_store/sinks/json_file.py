"""JSON file sink for exporting accounts."""

import json
import logging
from pathlib import Path
from typing import Any, Iterable

from account_store.models import Account, AccountSummary
from account_store.sinks.serialization import to_dict

logger = logging.getLogger(__name__)


class JsonFileSink:
    """Write accounts and their summary to JSON files."""

    def __init__(self, output_dir: str | Path, pretty: bool = False) -> None:
        """Initialize JSON file sink.

        Parameters
        ----------
        output_dir : str | Path
            Directory to write JSON files.
        pretty : bool
            Pretty-print JSON output.
        """
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        self.pretty = pretty
        self._counts: dict[str, int] = {}

    def write_accounts(self, accounts: Iterable[Account]) -> Path:
        """Write ``accounts.json``."""
        data = [to_dict(account) for account in accounts]
        self._counts["accounts"] = len(data)
        return self._dump("accounts.json", data)

    def write_summary(self, summary: AccountSummary | None) -> Path:
        """Write ``summary.json``; ``None`` records an empty store."""
        data = to_dict(summary) if summary is not None else {"count": 0}
        self._counts["summary"] = 1
        return self._dump("summary.json", data)

    def close(self) -> None:
        """Log what was written."""
        for name, count in self._counts.items():
            logger.info("Wrote %d %s record(s) to %s", count, name, self.output_dir)

    def _dump(self, filename: str, payload: Any) -> Path:
        file_path = self.output_dir / filename
        with open(file_path, "w", encoding="utf-8") as f:
            if self.pretty:
                json.dump(payload, f, indent=2, ensure_ascii=False)
            else:
                json.dump(payload, f, ensure_ascii=False)
        return file_path
