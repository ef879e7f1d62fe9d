import logging
import threading
from typing import List, Optional, Protocol

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select, desc

from online_wallet.exceptions import LedgerConflict
from online_wallet.models.ledger import LedgerEntry

logger = logging.getLogger(__name__)


class LedgerStore(Protocol):
    def get_last_entry(self) -> Optional[LedgerEntry]: ...

    def append_entry(self, entry: LedgerEntry) -> None: ...


class SQLLedgerStore:
    """
    Ledger store backed by the ledger_entry table.
    The unique constraint on sequence makes append a compare-and-append:
    two writers that read the same last entry cannot both commit.
    """

    def __init__(self, session: Session):
        self.session = session

    def get_last_entry(self) -> Optional[LedgerEntry]:
        statement = select(LedgerEntry).order_by(desc(LedgerEntry.sequence)).limit(1)
        return self.session.exec(statement).first()

    def append_entry(self, entry: LedgerEntry) -> None:
        self.session.add(entry)
        try:
            self.session.commit()
        except IntegrityError:
            self.session.rollback()
            logger.warning(f"Ledger sequence {entry.sequence} already taken")
            raise LedgerConflict(f"Ledger entry {entry.sequence} was already written")
        self.session.refresh(entry)


class InMemoryLedgerStore:
    def __init__(self, entries: Optional[List[LedgerEntry]] = None):
        self._entries: List[LedgerEntry] = list(entries or [])
        self._lock = threading.Lock()

    @property
    def entries(self) -> List[LedgerEntry]:
        with self._lock:
            return list(self._entries)

    def get_last_entry(self) -> Optional[LedgerEntry]:
        with self._lock:
            return self._entries[-1] if self._entries else None

    def append_entry(self, entry: LedgerEntry) -> None:
        with self._lock:
            expected = self._entries[-1].sequence + 1 if self._entries else 1
            if entry.sequence != expected:
                raise LedgerConflict(
                    f"Ledger entry {entry.sequence} rejected, next sequence is {expected}"
                )
            self._entries.append(entry)
