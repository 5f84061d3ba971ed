"""Sample account generators."""

from account_store.generators.account import AccountGenerator

__all__ = ["AccountGenerator"]
