import logging
from fastapi import APIRouter, Depends, HTTPException, Request
from sqlmodel import Session

from online_wallet.config import settings
from online_wallet.database import get_session
from online_wallet.domain import Deposit, Withdrawal
from online_wallet.exceptions import InsufficientBalance, InvalidAmount, LedgerConflict
from online_wallet.limiter import limiter
from online_wallet.schemas import BalanceResponse, DepositRequest, WithdrawalRequest
from online_wallet.services.ledger import SQLLedgerStore
from online_wallet.services.wallet import WalletService
logger = logging.getLogger(__name__)

router = APIRouter(prefix="/onlinewallet", tags=["OnlineWallet"])


def get_wallet_service(session: Session = Depends(get_session)) -> WalletService:
    return WalletService(
        SQLLedgerStore(session),
        max_attempts=settings.LEDGER_APPEND_ATTEMPTS
    )


@router.get("/balance", response_model=BalanceResponse)
@limiter.limit(settings.RATE_LIMIT_READ)
def get_balance(
    request: Request,
    service: WalletService = Depends(get_wallet_service)
):
    """
    Returns the current balance, derived from the last ledger entry.
    """
    balance = service.get_balance()
    return BalanceResponse(amount=balance.amount)


@router.post("/deposit", response_model=BalanceResponse)
@limiter.limit(settings.RATE_LIMIT_WRITE)
def deposit_funds(
    request: Request,
    request_data: DepositRequest,
    service: WalletService = Depends(get_wallet_service)
):
    """
    Adds funds to the wallet and returns the new balance.
    """
    try:
        deposit = Deposit(amount=request_data.amount)
        balance = service.deposit_funds(deposit)
    except InvalidAmount as e:
        raise HTTPException(status_code=400, detail=str(e))
    except LedgerConflict as e:
        logger.error(f"Ledger append kept conflicting: {e}")
        raise HTTPException(status_code=409, detail=str(e))

    return BalanceResponse(amount=balance.amount)


@router.post("/withdraw", response_model=BalanceResponse)
@limiter.limit(settings.RATE_LIMIT_WRITE)
def withdraw_funds(
    request: Request,
    request_data: WithdrawalRequest,
    service: WalletService = Depends(get_wallet_service)
):
    """
    Takes funds out of the wallet. Fails with 400 when the balance is too low.
    """
    try:
        withdrawal = Withdrawal(amount=request_data.amount)
        balance = service.withdraw_funds(withdrawal)
    except (InvalidAmount, InsufficientBalance) as e:
        raise HTTPException(status_code=400, detail=str(e))
    except LedgerConflict as e:
        logger.error(f"Ledger append kept conflicting: {e}")
        raise HTTPException(status_code=409, detail=str(e))

    return BalanceResponse(amount=balance.amount)
