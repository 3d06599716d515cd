"""Custom exceptions for the bank accounts core."""


class BankError(Exception):
    """Base exception for all banking-related errors."""
    pass


class InsufficientFundsError(BankError):
    """Raised when a debit would leave an account with a negative balance."""

    def __init__(self, message: str = "Dinero insuficiente"):
        super().__init__(message)
        self.message = message


class InvalidAmountError(BankError):
    """Raised when a value cannot be used as an exact, finite decimal amount."""
    pass
