from sqlmodel import SQLModel, Field
from sqlalchemy import Column, Numeric, String
from sqlalchemy.types import TypeDecorator
from decimal import Decimal
import uuid
from datetime import datetime, timezone

AMOUNT_PRECISION = 20
AMOUNT_SCALE = 6


class LedgerAmount(TypeDecorator):
    """
    NUMERIC(20, 6) where the database has a real decimal type.
    SQLite would store NUMERIC as a float, so there the value is kept as text.
    """
    impl = Numeric(AMOUNT_PRECISION, AMOUNT_SCALE)
    cache_ok = True

    def load_dialect_impl(self, dialect):
        if dialect.name == "sqlite":
            return dialect.type_descriptor(String(AMOUNT_PRECISION + 2))
        return dialect.type_descriptor(Numeric(AMOUNT_PRECISION, AMOUNT_SCALE, asdecimal=True))

    def process_bind_param(self, value, dialect):
        if value is None or dialect.name != "sqlite":
            return value
        return str(Decimal(value))

    def process_result_value(self, value, dialect):
        if value is None:
            return value
        return Decimal(value) if dialect.name == "sqlite" else value


class LedgerEntry(SQLModel, table=True):
    """
    One balance-changing event. Entries are appended in sequence order
    and never updated; the last one encodes the running balance.
    """
    __tablename__ = "ledger_entry" #type: ignore

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    sequence: int = Field(unique=True, index=True)
    balance_before: Decimal = Field(sa_column=Column(LedgerAmount(), nullable=False))
    amount: Decimal = Field(sa_column=Column(LedgerAmount(), nullable=False))
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def balance_after(self) -> Decimal:
        return self.balance_before + self.amount
