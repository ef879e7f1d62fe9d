import logging
from decimal import Decimal
from typing import Callable, Optional

from online_wallet.domain import MAX_AMOUNT, Balance, Deposit, Withdrawal
from online_wallet.exceptions import InsufficientBalance, InvalidAmount, LedgerConflict
from online_wallet.models.ledger import LedgerEntry
from online_wallet.services.ledger import LedgerStore

logger = logging.getLogger(__name__)


class WalletService:
    """
    Derives the balance from the last ledger entry and applies deposits and
    withdrawals by appending exactly one new entry.

    Read, validate and append are retried together when the store reports
    that another writer got there first, so a withdrawal is always checked
    against the balance it is actually appended on top of.
    """

    def __init__(self, store: LedgerStore, max_attempts: int = 3):
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self.store = store
        self.max_attempts = max_attempts

    def get_balance(self) -> Balance:
        return Balance(amount=self._current_balance(self.store.get_last_entry()))

    def deposit_funds(self, deposit: Deposit) -> Balance:
        def delta(current: Decimal) -> Decimal:
            if current + deposit.amount >= MAX_AMOUNT:
                raise InvalidAmount(f"Deposit would take the balance to {MAX_AMOUNT} or more")
            return deposit.amount

        balance = self._append(delta)
        logger.info(f"Deposited {deposit.amount}, balance is now {balance.amount}")
        return balance

    def withdraw_funds(self, withdrawal: Withdrawal) -> Balance:
        def delta(current: Decimal) -> Decimal:
            if withdrawal.amount > current:
                logger.warning(
                    f"Withdrawal of {withdrawal.amount} rejected, balance is {current}"
                )
                raise InsufficientBalance(balance=current, requested=withdrawal.amount)
            return -withdrawal.amount

        balance = self._append(delta)
        logger.info(f"Withdrew {withdrawal.amount}, balance is now {balance.amount}")
        return balance

    def _append(self, delta: Callable[[Decimal], Decimal]) -> Balance:
        for attempt in range(1, self.max_attempts + 1):
            last = self.store.get_last_entry()
            current = self._current_balance(last)
            amount = delta(current)

            entry = LedgerEntry(
                sequence=(last.sequence + 1) if last else 1,
                balance_before=current,
                amount=amount,
            )
            try:
                self.store.append_entry(entry)
            except LedgerConflict:
                if attempt == self.max_attempts:
                    logger.error(f"Giving up after {attempt} conflicting ledger appends")
                    raise
                logger.warning(f"Ledger append conflict, retrying ({attempt}/{self.max_attempts})")
                continue

            return Balance(amount=current + amount)

        raise LedgerConflict("Ledger append did not complete")

    @staticmethod
    def _current_balance(last: Optional[LedgerEntry]) -> Decimal:
        if last is None:
            return Decimal("0")
        return last.balance_after
