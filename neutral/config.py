from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from neutral.auth import ApiAuth
from neutral.client import DEFAULT_BASE_URL


class NeutralSettings(BaseSettings):
    """Settings for the lookup gateway, read from `NEUTRAL_*` environment variables or `.env`."""

    model_config = SettingsConfigDict(
        env_prefix="NEUTRAL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        min_length=1,
        description="Scheme and authority of the neutrinoapi.com service.",
    )
    user_id: SecretStr = Field(description="neutrinoapi.com user id.")
    api_key: SecretStr = Field(description="neutrinoapi.com API key.")
    timeout_seconds: float = Field(
        default=5.0,
        gt=0,
        description="Timeout per request (seconds).",
    )

    def api_auth(self) -> ApiAuth:
        return ApiAuth(user_id=self.user_id, api_key=self.api_key)
