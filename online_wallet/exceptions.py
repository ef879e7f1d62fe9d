from decimal import Decimal


class WalletError(Exception):
    """Base class for errors raised by the wallet core."""


class InvalidAmount(WalletError):
    """The amount is missing, not a number, or negative."""


class InsufficientBalance(WalletError):
    def __init__(self, balance: Decimal, requested: Decimal):
        self.balance = balance
        self.requested = requested
        super().__init__(
            f"Insufficient balance: requested {requested}, available {balance}"
        )


class LedgerConflict(WalletError):
    """Another writer appended to the ledger between our read and our append."""
