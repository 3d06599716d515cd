"""Data models for the bank accounts core."""

from .account import Account
from .bank import Bank
from .exceptions import (
    BankError,
    InsufficientFundsError,
    InvalidAmountError,
)
from .money import to_decimal

__all__ = [
    "Account",
    "Bank",
    "BankError",
    "InsufficientFundsError",
    "InvalidAmountError",
    "to_decimal",
]
