"""
ATM session manager.

This module contains the account registry and the dispatch of transactions
against authenticated accounts.
"""

import logging
from decimal import Decimal
from typing import Dict, Optional, Union

from .models import Account, TransactionType, create_transaction
from .config import Settings
from .exceptions import UnknownTransactionTypeError

logger = logging.getLogger(__name__)

TRANSACTION_SUCCESSFUL = "Transaction successful"
TRANSACTION_FAILED = "Transaction failed"
INVALID_TRANSACTION_TYPE = "Invalid transaction type"


class ATM:
    """Holds the account registry and runs transactions for a session."""

    def __init__(self):
        """Initialize ATM with an empty registry."""
        self.accounts: Dict[str, Account] = {}

    def add_account(self, account: Account) -> None:
        """Register an account, replacing any account with the same number."""
        if account.account_number in self.accounts:
            logger.debug("Replacing account %s in registry", account.account_number)
        self.accounts[account.account_number] = account

    def get_account(self, account_number: str) -> Optional[Account]:
        """Get account by account number."""
        return self.accounts.get(account_number)

    def verify_pin(self, account_number: str, pin: str) -> Optional[Account]:
        """Return the account if the number is registered and the PIN matches."""
        account = self.accounts.get(account_number)
        if account is not None and account.verify_pin(pin):
            logger.info("Account %s authenticated", account_number)
            return account

        logger.info("Authentication failed for account %s", account_number)
        return None

    def select_transaction(self, account: Account, transaction_type: Union[str, TransactionType],
                           amount: Decimal = Decimal('0.00')) -> str:
        """Run one transaction of the given type and describe the outcome."""
        try:
            transaction = create_transaction(transaction_type, account, amount)
        except UnknownTransactionTypeError:
            logger.warning("Rejected transaction type %r for account %s",
                           transaction_type, account.account_number)
            return INVALID_TRANSACTION_TYPE

        success = transaction.execute()
        logger.info("%r %s", transaction, "succeeded" if success else "failed")
        return TRANSACTION_SUCCESSFUL if success else TRANSACTION_FAILED

    def check_balance(self, account: Account) -> Decimal:
        """Check account balance."""
        return account.check_balance()


def create_default_atm(settings: Optional[Settings] = None) -> ATM:
    """
    Create an ATM loaded with the configured seed accounts.

    Args:
        settings: Settings to seed from; defaults are used when omitted

    Returns:
        ATM instance
    """
    settings = settings or Settings()
    atm = ATM()
    for seed in settings.seed_accounts:
        atm.add_account(Account(seed.account_number, seed.pin, seed.balance))
    return atm
