"""Custom exceptions for the ATM system."""


class ATMError(Exception):
    """Base exception for all ATM-related errors."""
    pass


class InvalidAmountError(ATMError, ValueError):
    """Raised when an amount entered at the console cannot be parsed."""
    pass


class UnknownTransactionTypeError(ATMError, ValueError):
    """Raised when a transaction kind names no known transaction."""
    pass
