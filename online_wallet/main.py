import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from online_wallet.database import create_db_and_tables
from online_wallet.limiter import limiter
from online_wallet.logging_config import configure_logging
from online_wallet import models
from online_wallet.routers import wallet

logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    logger.info("Startup: Creating database tables...")
    create_db_and_tables()
    yield
    logger.info("Shutdown: cleaning up...")

app = FastAPI(lifespan=lifespan)
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
app.include_router(wallet.router)


@app.get("/")
def read_root():
    return {"status":"ok", "service": "Online wallet"}
