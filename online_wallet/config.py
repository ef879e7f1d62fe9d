from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./wallet.db"
    LOG_LEVEL: str = "INFO"

    LEDGER_APPEND_ATTEMPTS: int = 3

    RATE_LIMIT_ENABLED: bool = True
    RATE_LIMIT_READ: str = "100/minute"
    RATE_LIMIT_WRITE: str = "20/minute"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()
