"""
Data models for the ATM system.

This module contains the account record and the transactions that mutate it.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from decimal import Decimal, Overflow
from enum import Enum
from typing import Union

from .exceptions import UnknownTransactionTypeError


class TransactionType(Enum):
    """Types of transactions the ATM can run."""
    DEPOSIT = "deposit"
    WITHDRAW = "withdraw"


@dataclass
class Account:
    """Represents a bank account held in the ATM registry."""

    account_number: str
    pin: str = field(repr=False)
    balance: Decimal = Decimal('0.00')

    def __post_init__(self):
        """Initialize account after creation."""
        # Ensure balance is a Decimal
        if not isinstance(self.balance, Decimal):
            self.balance = Decimal(str(self.balance))

    def check_balance(self) -> Decimal:
        """Return the current balance."""
        return self.balance

    def deposit(self, amount: Decimal) -> bool:
        """Deposit money to account."""
        if not isinstance(amount, Decimal):
            amount = Decimal(str(amount))

        if not amount.is_finite() or amount <= 0:
            return False

        try:
            new_balance = self.balance + amount
        except Overflow:
            return False

        self.balance = new_balance
        return True

    def withdraw(self, amount: Decimal) -> bool:
        """Withdraw money from account."""
        if not isinstance(amount, Decimal):
            amount = Decimal(str(amount))

        if not amount.is_finite() or amount <= 0 or amount > self.balance:
            return False

        self.balance -= amount
        return True

    def verify_pin(self, entered_pin: str) -> bool:
        """Check the entered PIN against the stored one."""
        return self.pin == entered_pin


class Transaction(ABC):
    """A single mutation requested against one account."""

    transaction_type: TransactionType

    def __init__(self, account: Account, amount: Decimal = Decimal('0.00')):
        self.account = account
        if not isinstance(amount, Decimal):
            amount = Decimal(str(amount))
        self.amount = amount

    @abstractmethod
    def execute(self) -> bool:
        """Apply the transaction to the account and report success."""

    def __repr__(self):
        return (f"{type(self).__name__}(account={self.account.account_number!r}, "
                f"amount={self.amount})")


class Deposit(Transaction):
    """Deposit transaction."""

    transaction_type = TransactionType.DEPOSIT

    def execute(self) -> bool:
        return self.account.deposit(self.amount)


class Withdrawal(Transaction):
    """Withdrawal transaction."""

    transaction_type = TransactionType.WITHDRAW

    def execute(self) -> bool:
        return self.account.withdraw(self.amount)


TRANSACTION_CLASSES = {
    TransactionType.DEPOSIT: Deposit,
    TransactionType.WITHDRAW: Withdrawal,
}


def create_transaction(kind: Union[str, TransactionType], account: Account,
                       amount: Decimal = Decimal('0.00')) -> Transaction:
    """
    Build the transaction variant named by ``kind``.

    Args:
        kind: "deposit", "withdraw" or a TransactionType member
        account: Account the transaction will act on
        amount: Amount to move

    Returns:
        An unexecuted Transaction

    Raises:
        UnknownTransactionTypeError: If ``kind`` names no transaction
    """
    try:
        transaction_type = TransactionType(kind)
    except ValueError:
        raise UnknownTransactionTypeError(f"Unknown transaction type: {kind!r}") from None

    return TRANSACTION_CLASSES[transaction_type](account, amount)
