from .ledger import LedgerEntry

__all__ = ["LedgerEntry"]
