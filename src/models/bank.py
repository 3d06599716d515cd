"""Bank data model."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from decimal import Decimal
from functools import reduce

from tabulate import tabulate

from src.models.account import Account
from src.models.money import exact_sum

logger = logging.getLogger(__name__)


@dataclass
class Bank:
    """
    A named registry of accounts that performs transfers between them.

    The bank holds its accounts by membership only: accounts are built
    independently and registered afterwards, and nothing is ever removed.
    Like Account, it assumes a single thread of control.
    """

    name: str = ""
    accounts: list[Account] = field(default_factory=list)

    def add_account(self, account: Account) -> None:
        """
        Register an account with this bank.

        The account is appended in order and its back-reference is pointed
        at this bank. Registering the same account twice lists it twice.

        Args:
            account: The account to register
        """
        self.accounts.append(account)
        account.bank = self
        logger.debug("Registered account of %s with bank %r", account.holder, self.name)

    def transfer(
        self,
        source: Account,
        destination: Account,
        amount: Decimal | str | int | float,
    ) -> None:
        """
        Move an amount from one account to another.

        The source is debited before the destination is credited. If the
        debit fails the error propagates and the destination is untouched.

        Args:
            source: The account to debit
            destination: The account to credit
            amount: The amount to move

        Raises:
            InsufficientFundsError: If the source cannot cover the amount
        """
        source.debit(amount)
        destination.credit(amount)
        logger.info(
            "Transferred %s from %s to %s", amount, source.holder, destination.holder
        )

    def find_account(self, holder: str) -> Account | None:
        """
        Find the first registered account of a holder.

        Returns:
            The first matching Account, or None if there is none
        """
        return next((a for a in self.accounts if a.holder == holder), None)

    def has_account(self, holder: str) -> bool:
        return any(a.holder == holder for a in self.accounts)

    @property
    def total_balance(self) -> Decimal:
        """Sum of the balances of all registered accounts."""
        return reduce(exact_sum, (a.balance for a in self.accounts), Decimal("0"))

    def summary(self) -> str:
        """
        Render the registered accounts as a plain-text table.

        Balances are shown in plain notation with all their digits and are
        right-aligned as text, so their decimal points do not line up.
        """
        rows = [[a.holder, a.plain_balance] for a in self.accounts]
        table = tabulate(
            rows,
            headers=["Holder", "Balance"],
            stralign="right",
            numalign="right",
            disable_numparse=True,
        )
        return f"{self.name}\n{table}"
