"""Output sinks for account listings and summaries."""

from account_store.sinks.json_file import JsonFileSink
from account_store.sinks.text_report import TextReportSink

__all__ = ["JsonFileSink", "TextReportSink"]
