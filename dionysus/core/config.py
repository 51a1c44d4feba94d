from typing import Literal
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Backend
    api_base_url: str = Field(default="http://localhost:8000", min_length=1, description="Backend origin, without trailing slash")
    request_timeout: float = Field(default=30.0, gt=0, le=600, description="Transport timeout in seconds")

    # Secure token storage
    keyring_service: str = Field(default="dionysus", min_length=1, description="Keyring service name for the auth token")
    keyring_account: str = Field(default="auth-token", min_length=1, description="Keyring account name for the auth token")

    # Codec
    date_format: Literal["strict", "iso8601"] = Field(
        default="strict",
        description="Date decoding policy applied to every response"
    )

    # Logging
    log_level: str = "INFO"
    log_structured: bool = Field(default=False, description="Emit JSON log lines instead of plain text")

    @field_validator('api_base_url')
    @classmethod
    def validate_base_url(cls, v):
        """Strip whitespace and trailing slash from the origin"""
        v = v.strip().rstrip('/')
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"API base URL must be http(s): {v}")
        return v

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v):
        level = v.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level

    model_config = SettingsConfigDict(
        env_prefix="DIONYSUS_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore"
    )


settings = Settings()
