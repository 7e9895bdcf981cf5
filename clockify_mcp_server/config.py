"""
Server configuration loaded from environment variables and `.env`.

Environment variables (see .env.example):
  CLOCKIFY_API_KEY   - fallback API key, used when a request brings no header
  CLOCKIFY_API_BASE  - API base URL (default: https://api.clockify.me/api/v1)
  HTTP_TIMEOUT       - upstream request timeout in seconds
  LOG_LEVEL          - DEBUG / INFO / WARNING / ERROR / CRITICAL
  LOG_FILE           - optional log file, in addition to stderr
  MCP_HOST, MCP_PORT - bind address for the sse / streamable-http transports
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Server settings. Loaded once at startup."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    # Optional: the key can also arrive per request in a header
    clockify_api_key: Optional[SecretStr] = Field(default=None)
    clockify_api_base: str = Field(default="https://api.clockify.me/api/v1")

    http_timeout: float = Field(default=30.0, ge=1.0, le=120.0)

    log_level: str = Field(default="INFO")
    log_file: Optional[str] = Field(default=None)

    mcp_host: str = Field(default="127.0.0.1")
    mcp_port: int = Field(default=8000, ge=1, le=65535)

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, v: str) -> str:
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in allowed:
            raise ValueError(f"log_level must be one of {allowed}")
        return upper

    @field_validator("clockify_api_base")
    @classmethod
    def _require_https(cls, v: str) -> str:
        if not v.startswith("https://"):
            raise ValueError("CLOCKIFY_API_BASE must use HTTPS")
        return v.rstrip("/")

    def api_key_value(self) -> Optional[str]:
        """Return the configured fallback key in plain text, or None."""
        if self.clockify_api_key is None:
            return None
        return self.clockify_api_key.get_secret_value() or None


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Return the singleton Settings instance.

    Raises ValidationError at startup if a variable is present but invalid.
    """
    return Settings()
