import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session, SQLModel, create_engine
from sqlmodel.pool import StaticPool
from online_wallet.main import app
from online_wallet.database import get_session
from online_wallet.services.ledger import InMemoryLedgerStore
from online_wallet.services.wallet import WalletService

sqlite_url = "sqlite://"

engine = create_engine(
    sqlite_url,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool
)

@pytest.fixture(name="session")
def session_fixture():
    SQLModel.metadata.create_all(engine)
    with Session(engine) as session:
        yield session
    SQLModel.metadata.drop_all(engine)

@pytest.fixture(name="other_session")
def other_session_fixture(session: Session):
    with Session(engine) as other_session:
        yield other_session

@pytest.fixture(name="client")
def client_fixture(session: Session):
    def get_session_override():
        return session

    app.dependency_overrides[get_session] = get_session_override
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()

@pytest.fixture(name="store")
def store_fixture():
    return InMemoryLedgerStore()

@pytest.fixture(name="service")
def service_fixture(store: InMemoryLedgerStore):
    return WalletService(store)
