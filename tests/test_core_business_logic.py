"""
Core business logic tests - the most important ATM behaviours.

These tests cover the essential functionality that must work correctly
for the ATM to be reliable.
"""

import pytest
from decimal import Decimal

from atm_system import ATM, Account, create_default_atm


class TestCoreATMLogic:
    """Core ATM business logic tests."""

    @pytest.fixture
    def atm(self):
        """Create an ATM with the default seed accounts."""
        return create_default_atm()

    def test_seeded_session_walkthrough(self, atm):
        """
        Test 1: Authenticate, deposit, withdraw.
        Critical: Balance must move by exactly the transaction amounts.
        """
        account = atm.verify_pin("123456", "1234")

        assert account is not None
        assert atm.check_balance(account) == Decimal('1000')
        assert atm.select_transaction(account, "deposit", Decimal('200')) == "Transaction successful"
        assert atm.check_balance(account) == Decimal('1200')
        assert atm.select_transaction(account, "withdraw", Decimal('100')) == "Transaction successful"
        assert atm.check_balance(account) == Decimal('1100')

    @pytest.mark.parametrize("amount", ["0.01", "1", "250.75", "1000000"])
    def test_positive_deposit_adds_exact_amount(self, amount):
        """
        Test 2: Deposits of any positive amount.
        Critical: Deposit must add exactly the amount.
        """
        account = Account("1", "1", Decimal('10'))

        assert account.deposit(Decimal(amount)) is True
        assert account.balance == Decimal('10') + Decimal(amount)

    @pytest.mark.parametrize("amount", ["0.01", "5", "10"])
    def test_withdraw_within_balance_subtracts_exact_amount(self, amount):
        """
        Test 3: Withdrawals up to the balance.
        Critical: Withdrawal must subtract exactly the amount.
        """
        account = Account("1", "1", Decimal('10'))

        assert account.withdraw(Decimal(amount)) is True
        assert account.balance == Decimal('10') - Decimal(amount)

    def test_balance_never_goes_negative(self, atm):
        """
        Test 4: Overdrawing is rejected.
        Critical: Failed withdrawals must not change the balance.
        """
        account = atm.verify_pin("654321", "4321")

        assert atm.select_transaction(account, "withdraw", Decimal('501')) == "Transaction failed"
        assert atm.check_balance(account) == Decimal('500')

    def test_unregistered_account_never_authenticates(self, atm):
        """
        Test 5: Unknown account numbers.
        Critical: No PIN can open an account that is not registered.
        """
        for pin in ("1234", "4321", ""):
            assert atm.verify_pin("999999", pin) is None

    def test_invalid_transaction_type_leaves_balance(self, atm):
        """
        Test 6: Unknown transaction kinds.
        Critical: Must be reported without touching the account.
        """
        account = atm.verify_pin("123456", "1234")

        assert atm.select_transaction(account, "transfer", Decimal('50')) == "Invalid transaction type"
        assert atm.check_balance(account) == Decimal('1000')

    def test_reregistration_replaces_account(self):
        """
        Test 7: Duplicate account numbers.
        Critical: The last registration wins.
        """
        atm = ATM()
        atm.add_account(Account("123456", "1234", Decimal('1000')))
        replacement = Account("123456", "1111", Decimal('1'))
        atm.add_account(replacement)

        assert atm.get_account("123456") is replacement
        assert atm.verify_pin("123456", "1111") is replacement
