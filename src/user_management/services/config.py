import logging
import sys

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    @field_validator("USER_MANAGEMENT_URL_PREFIX", mode="before")
    @classmethod
    def normalize_prefix(cls, value: str) -> str:
        value = (value or "").strip().rstrip("/")
        if value and not value.startswith("/"):
            value = f"/{value}"
        return value

    @field_validator("USER_MANAGEMENT_LOG_LEVEL", mode="before")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        return str(value).strip().upper()

    USER_MANAGEMENT_API_TOKEN: str = Field(default="valid-token", description="Accepted bearer token")
    USER_MANAGEMENT_DEFAULT_PAGE: int = Field(default=1, description="Page used when none is requested")
    USER_MANAGEMENT_DEFAULT_PAGE_SIZE: int = Field(default=10, description="Page size used when none is requested")
    USER_MANAGEMENT_URL_PREFIX: str = Field(default="", description="API URL prefix")
    USER_MANAGEMENT_LOG_LEVEL: str = Field(default="INFO", description="Root log level")
    DEBUG: int = Field(default=0, description="Debug mode flag")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"


settings = Settings()

logging.basicConfig(stream=sys.stdout, level=settings.USER_MANAGEMENT_LOG_LEVEL)
