"""File-backed positional record storage."""

from account_store.store.positional import IntegrityReport, PositionalRecordStore

__all__ = ["IntegrityReport", "PositionalRecordStore"]
