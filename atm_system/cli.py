"""
CLI interface for the ATM system.

This module provides the interactive console session and a scripted demo.
"""

import click
import logging
from decimal import Decimal, InvalidOperation, getcontext
from typing import Optional

from .config import LOG_LEVELS, Settings
from .atm import ATM, create_default_atm
from .models import Account, TransactionType
from .exceptions import InvalidAmountError

MENU_OPTIONS = (
    "1. Check Balance",
    "2. Deposit",
    "3. Withdraw",
    "4. Exit",
)

INVALID_CREDENTIALS = "Invalid account number or PIN. Please try again."
INVALID_OPTION = "Invalid option. Please try again."
GOODBYE = "Thank you for using the ATM. Goodbye!"


def first_token(value: str) -> str:
    """Return the first whitespace-delimited token of a console entry."""
    tokens = value.split()
    return tokens[0] if tokens else ""


class ATMCLI:
    """CLI wrapper for ATM operations."""

    def __init__(self, atm: Optional[ATM] = None):
        """Initialize CLI with a seeded ATM."""
        self.atm = atm if atm is not None else create_default_atm()

    def format_currency(self, amount: Decimal) -> str:
        """Format currency for display."""
        return f"{amount:,.2f}"

    def parse_amount(self, amount_str: str) -> Decimal:
        """Parse amount input."""
        try:
            clean_str = amount_str.replace(',', '').strip()
            amount = Decimal(clean_str)
        except (InvalidOperation, ValueError):
            raise InvalidAmountError(f"Invalid amount: {amount_str}")

        if not amount.is_finite() or amount.adjusted() > getcontext().Emax:
            raise InvalidAmountError(f"Invalid amount: {amount_str}")

        return amount

    def prompt_amount(self, action: str) -> Decimal:
        """Prompt until a number is entered."""
        while True:
            raw = click.prompt(f"Enter amount to {action}", type=str)
            try:
                return self.parse_amount(first_token(raw))
            except InvalidAmountError as e:
                click.echo(f"Error: {e}", err=True)

    def prompt_choice(self) -> int:
        """Show the menu and read the selected option number."""
        click.echo("")
        for line in MENU_OPTIONS:
            click.echo(line)
        raw = click.prompt("Choose an option", type=str)
        try:
            return int(first_token(raw))
        except ValueError:
            return -1

    def login(self) -> Account:
        """Prompt for credentials until they match a registered account."""
        while True:
            account_number = first_token(click.prompt("Enter account number", type=str))
            pin = first_token(click.prompt("Enter PIN", type=str, hide_input=True))

            account = self.atm.verify_pin(account_number, pin)
            if account is not None:
                return account

            click.echo(INVALID_CREDENTIALS)

    def run_transaction(self, account: Account, transaction_type: TransactionType) -> None:
        """Prompt for an amount and run one transaction."""
        amount = self.prompt_amount(transaction_type.value)
        click.echo(self.atm.select_transaction(account, transaction_type.value, amount))

    def run_session(self) -> None:
        """Authenticate, then serve the menu until the user exits."""
        account = self.login()

        while True:
            choice = self.prompt_choice()

            if choice == 1:
                balance = self.atm.check_balance(account)
                click.echo(f"Balance: {self.format_currency(balance)}")
            elif choice == 2:
                self.run_transaction(account, TransactionType.DEPOSIT)
            elif choice == 3:
                self.run_transaction(account, TransactionType.WITHDRAW)
            elif choice == 4:
                click.echo(GOODBYE)
                return
            else:
                click.echo(INVALID_OPTION)


def configure_logging(ctx: click.Context, level: str) -> None:
    """Send package log records to stderr for the lifetime of the command."""
    package_logger = logging.getLogger('atm_system')
    previous_level = package_logger.level
    previous_propagate = package_logger.propagate
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter('%(asctime)s:%(levelname)s:%(name)s: %(message)s'))
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    package_logger.propagate = False

    def restore():
        package_logger.removeHandler(handler)
        package_logger.setLevel(previous_level)
        package_logger.propagate = previous_propagate

    ctx.call_on_close(restore)


@click.group(invoke_without_command=True)
@click.option('--log-level', type=click.Choice(LOG_LEVELS, case_sensitive=False),
              default=None, help='Logging level (default: ATM_LOG_LEVEL or WARNING)')
@click.pass_context
def cli(ctx, log_level):
    """ATM Simulator CLI"""
    try:
        settings = Settings.load()
    except ValueError as e:
        raise click.UsageError(str(e))

    if log_level:
        settings.log_level = log_level.upper()

    configure_logging(ctx, settings.log_level)

    ctx.ensure_object(dict)
    ctx.obj['cli'] = ATMCLI(create_default_atm(settings))

    if ctx.invoked_subcommand is None:
        ctx.invoke(session)


@cli.command()
@click.pass_context
def session(ctx):
    """Start an interactive ATM session."""
    atm_cli = ctx.obj['cli']

    try:
        atm_cli.run_session()
    except click.Abort:
        # End of input behaves like choosing Exit
        click.echo("")
        click.echo(GOODBYE)


@cli.command()
@click.option('--account-number', default='123456', help='Account number to log in with')
@click.option('--pin', default='1234', help='PIN for the account')
@click.pass_context
def demo(ctx, account_number, pin):
    """Run a scripted deposit and withdrawal against a seeded account."""
    atm_cli = ctx.obj['cli']
    atm = atm_cli.atm

    account = atm.verify_pin(account_number, pin)
    if account is None:
        click.echo("Invalid PIN")
        return

    click.echo(f"Balance: {atm_cli.format_currency(atm.check_balance(account))}")
    click.echo(atm.select_transaction(account, "deposit", Decimal('200')))
    click.echo(f"Balance after deposit: {atm_cli.format_currency(atm.check_balance(account))}")
    click.echo(atm.select_transaction(account, "withdraw", Decimal('100')))
    click.echo(f"Balance after withdrawal: {atm_cli.format_currency(atm.check_balance(account))}")


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == '__main__':
    main()
