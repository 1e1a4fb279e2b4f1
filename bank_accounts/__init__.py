"""
Bank Accounts

In-memory savings and current accounts with Decimal balances,
per-kind withdrawal policies and structured logging.
"""

__version__ = "1.0.0"
