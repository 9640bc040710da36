"""
ATM Simulator

A small automated teller machine simulation with a console session.
Supports PIN verification, balance inquiries, deposits and withdrawals.
"""

__version__ = "0.1.0"
__author__ = "Developer"
__email__ = "dev@example.com"

from .models import Account, Transaction, Deposit, Withdrawal, TransactionType, create_transaction
from .exceptions import ATMError, InvalidAmountError, UnknownTransactionTypeError
from .config import Settings, SeedAccount
from .atm import ATM, create_default_atm
from .cli import main


__all__ = [
    "Account",
    "Transaction",
    "Deposit",
    "Withdrawal",
    "TransactionType",
    "create_transaction",
    "ATMError",
    "InvalidAmountError",
    "UnknownTransactionTypeError",
    "Settings",
    "SeedAccount",
    "ATM",
    "create_default_atm",
    "main"
]
