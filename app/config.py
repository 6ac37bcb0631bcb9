from typing import List, Union, Optional
from pydantic_settings import BaseSettings
from pydantic import field_validator


class Settings(BaseSettings):
    DATABASE_URL: str = "postgresql+asyncpg://postgres:root@db/postgres"
    CORS_ORIGINS: Union[str, List[str]] = ["*"]
    LOG_LEVEL: str = "INFO"

    # Parser limits and policies
    PARSER_MAX_TEXT_LENGTH: int = 20000
    PARSER_REGEX_TIMEOUT_SECONDS: Optional[float] = 0.25
    PARSER_DAY_FIRST: bool = True
    PARSER_UNKNOWN_MERCHANT_PLACEHOLDER: Optional[str] = None

    # Email ingestion
    EXPENSE_DEFAULT_USER_ID: Optional[str] = None
    EMAIL_SYNC_INITIAL_DAYS: int = 30
    EMAIL_SYNC_BATCH_SIZE: int = 50
    EMAIL_SYNC_INITIAL_BATCH_SIZE: int = 200

    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def parse_cors_origins(cls, v):
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",")]
        return v

    @field_validator("PARSER_UNKNOWN_MERCHANT_PLACEHOLDER", "EXPENSE_DEFAULT_USER_ID", mode="before")
    @classmethod
    def blank_to_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": True,
        "extra": "ignore",
    }


settings = Settings()
