"""Enumeration types for account entities."""

from enum import Enum


class AccountStatus(str, Enum):
    ACTIVE = "ACTIVE"
    ZERO = "ZERO"
    OVERDRAWN = "OVERDRAWN"

    @classmethod
    def for_balance(cls, balance: float) -> "AccountStatus":
        """Classify a balance."""
        if balance < 0:
            return cls.OVERDRAWN
        if balance == 0:
            return cls.ZERO
        return cls.ACTIVE
