"""Account data model."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import TYPE_CHECKING, Any

from src.models.exceptions import InsufficientFundsError
from src.models.money import exact_sum, to_decimal

if TYPE_CHECKING:
    from src.models.bank import Bank

logger = logging.getLogger(__name__)


@dataclass
class Account:
    """
    Represents a bank account.

    Two accounts are equal when their holder and balance are equal. The
    bank back-reference takes no part in equality. Accounts are mutable, so
    they are unhashable and cannot be used in sets or as dict keys.

    Whatever is assigned to ``balance`` is coerced to an exact Decimal, and
    debits and credits never round.

    Debits read the balance, check it and write it back with no locking, so
    an account must only be mutated from one thread at a time.
    """

    holder: str
    balance: Decimal
    bank: Bank | None = field(default=None, compare=False, repr=False)

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "balance":
            value = to_decimal(value)
        super().__setattr__(name, value)

    @property
    def plain_balance(self) -> str:
        """The balance in plain notation, never with an exponent."""
        return format(self.balance, "f")

    def debit(self, amount: Decimal | str | int | float) -> None:
        """
        Subtract an amount from the balance.

        The new balance is computed first and only committed when it is
        not negative. A zero balance is allowed.

        Args:
            amount: The amount to subtract

        Raises:
            InsufficientFundsError: If the balance would become negative
            InvalidAmountError: If the amount is not a finite decimal
        """
        new_balance = exact_sum(self.balance, to_decimal(amount).copy_negate())
        if new_balance < 0:
            logger.warning(
                "Debit of %s rejected for %s: balance %s", amount, self.holder, self.balance
            )
            raise InsufficientFundsError()
        self.balance = new_balance
        logger.debug("Debited %s from %s, balance %s", amount, self.holder, self.balance)

    def credit(self, amount: Decimal | str | int | float) -> None:
        """Add an amount to the balance."""
        self.balance = exact_sum(self.balance, to_decimal(amount))
        logger.debug("Credited %s to %s, balance %s", amount, self.holder, self.balance)
