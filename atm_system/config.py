"""Configuration management for the ATM system."""
import os
from dataclasses import dataclass, field
from decimal import Decimal
from typing import List

LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR')


@dataclass(frozen=True)
class SeedAccount:
    """An account loaded into the ATM at startup."""

    account_number: str
    pin: str = field(repr=False)
    balance: Decimal = Decimal('0.00')


def _default_seed_accounts() -> List[SeedAccount]:
    return [
        SeedAccount("123456", "1234", Decimal('1000')),
        SeedAccount("654321", "4321", Decimal('500')),
    ]


@dataclass
class Settings:
    """Configuration settings for the ATM.

    This class centralizes the seed accounts and logging level so the
    console entry point and the tests build the ATM the same way.
    """

    seed_accounts: List[SeedAccount] = field(default_factory=_default_seed_accounts)
    log_level: str = 'WARNING'

    @classmethod
    def load(cls) -> 'Settings':
        """Load settings from environment variables.

        Returns:
            Settings: A Settings instance; ATM_LOG_LEVEL overrides the
            default logging level.

        Raises:
            ValueError: If ATM_LOG_LEVEL is set to an unknown level.
        """
        log_level = os.getenv('ATM_LOG_LEVEL', 'WARNING').upper()
        if log_level not in LOG_LEVELS:
            raise ValueError(f"ATM_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}")

        return cls(log_level=log_level)
