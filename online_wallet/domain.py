from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any

from online_wallet.exceptions import InvalidAmount

# Ledger columns are NUMERIC(20, 6): 14 integer digits, 6 decimal places.
AMOUNT_PLACES = 6
MAX_AMOUNT = Decimal(10) ** 14
SMALLEST_UNIT = Decimal(1).scaleb(-AMOUNT_PLACES)


def to_amount(value: Any) -> Decimal:
    """
    Normalises a caller-supplied amount to a finite, non-negative Decimal.
    Floats go through str() so 50.567 stays 50.567.
    """
    if value is None:
        raise InvalidAmount("Amount is required")
    if isinstance(value, bool):
        raise InvalidAmount("Amount must be a number")
    if isinstance(value, float):
        value = str(value)

    try:
        amount = Decimal(value)
    except (InvalidOperation, TypeError, ValueError):
        raise InvalidAmount(f"Amount must be a number, got {value!r}")

    if not amount.is_finite():
        raise InvalidAmount("Amount must be finite")
    if amount < 0:
        raise InvalidAmount("Amount cannot be negative")
    if amount >= MAX_AMOUNT:
        raise InvalidAmount(f"Amount must be below {MAX_AMOUNT}")
    if amount != amount.quantize(SMALLEST_UNIT):
        raise InvalidAmount(f"Amount cannot have more than {AMOUNT_PLACES} decimal places")
    return amount


@dataclass(frozen=True)
class Balance:
    amount: Decimal = Decimal("0")


@dataclass(frozen=True)
class Deposit:
    amount: Decimal

    def __post_init__(self):
        object.__setattr__(self, "amount", to_amount(self.amount))


@dataclass(frozen=True)
class Withdrawal:
    amount: Decimal

    def __post_init__(self):
        object.__setattr__(self, "amount", to_amount(self.amount))
