from sqlmodel import create_engine, SQLModel, Session
from online_wallet.config import settings

connection_string = str(settings.DATABASE_URL)
if connection_string.startswith("postgres://"):
    connection_string = connection_string.replace("postgres://", "postgresql://", 1)

connect_args = {}
if connection_string.startswith("sqlite"):
    connect_args = {"check_same_thread": False}

engine = create_engine(
    connection_string,
    echo=False,
    connect_args=connect_args,
    pool_pre_ping=True,
    pool_recycle=1800
)

def create_db_and_tables():
    SQLModel.metadata.create_all(engine)

def get_session():
    with Session(engine) as session:
        yield session
