"""Environment-driven configuration helpers.

Reads ``SPARK_*`` variables from the process environment and an optional
``.env`` file in the working directory.
"""

from __future__ import annotations

from pydantic import Field, PositiveInt, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from sparkapi.config.models import DEFAULT_BASE_URL, ClientConfig, build_client_config
from sparkapi.core.exceptions import SparkValidationError

__all__ = ["EnvironmentSettings", "load_environment"]


class EnvironmentSettings(BaseSettings):
    """Typed view of sparkapi environment variables."""

    model_config = SettingsConfigDict(
        env_file=(".env",),
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    token: SecretStr | None = Field(default=None, alias="SPARK_TOKEN")
    page_size: PositiveInt | None = Field(default=None, alias="SPARK_PAGE_SIZE")
    base_url: str = Field(default=DEFAULT_BASE_URL, alias="SPARK_BASE_URL")
    log_level: str = Field(default="WARNING", alias="SPARK_LOG_LEVEL")

    @field_validator("token", mode="before")
    @classmethod
    def _blank_token_is_missing(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("log_level")
    @classmethod
    def _normalise_level(cls, value: str) -> str:
        return value.strip().upper() or "WARNING"

    def to_client_config(self) -> ClientConfig:
        """Convert the environment view into a :class:`ClientConfig`."""

        if self.token is None:
            raise SparkValidationError("SPARK_TOKEN is not set")
        values: dict[str, object] = {"token": self.token, "base_url": self.base_url}
        if self.page_size is not None:
            values["page_size"] = self.page_size
        return build_client_config(**values)


def load_environment() -> EnvironmentSettings:
    return EnvironmentSettings()
