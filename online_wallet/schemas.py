from decimal import Decimal
from typing import Any, Optional
from pydantic import BaseModel, Field

# amount is parsed by online_wallet.domain.to_amount, which reports bad input as InvalidAmount
class DepositRequest(BaseModel):
    amount: Optional[Any] = Field(default=None, description="Amount to deposit")

class WithdrawalRequest(BaseModel):
    amount: Optional[Any] = Field(default=None, description="Amount to withdraw")

class BalanceResponse(BaseModel):
    amount: Decimal
