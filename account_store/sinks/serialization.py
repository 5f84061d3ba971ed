"""Shared serialization utilities for sinks."""

from dataclasses import asdict, is_dataclass
from enum import Enum
from typing import Any

from account_store.models import Account


def to_dict(obj: Any) -> dict:
    """Convert object to dictionary."""
    if isinstance(obj, Account):
        return account_to_dict(obj)
    elif is_dataclass(obj):
        return {key: serialize_value(value) for key, value in asdict(obj).items()}
    elif isinstance(obj, dict):
        return obj
    else:
        return {"value": str(obj)}


def account_to_dict(account: Account) -> dict:
    """Account fields plus its derived status."""
    result = {key: serialize_value(value) for key, value in asdict(account).items()}
    result["status"] = account.status.value
    return result


def serialize_value(value: Any) -> Any:
    """Serialize a value for JSON output."""
    if isinstance(value, Enum):
        return value.value
    elif isinstance(value, dict):
        return {k: serialize_value(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [serialize_value(v) for v in value]
    return value
