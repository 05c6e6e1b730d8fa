"""Client configuration model."""

from __future__ import annotations

from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    PositiveFloat,
    PositiveInt,
    SecretStr,
    ValidationError,
    field_validator,
)

from sparkapi.core.exceptions import SparkValidationError

__all__ = ["ClientConfig", "DEFAULT_BASE_URL", "DEFAULT_PAGE_SIZE", "build_client_config"]

DEFAULT_BASE_URL = "https://api.ciscospark.com/v1"
DEFAULT_PAGE_SIZE = 50


class ClientConfig(BaseModel):
    """Immutable per-client settings.

    Instances are frozen; :meth:`with_page_size` returns a new value so
    holders of the previous configuration are unaffected.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    token: SecretStr = Field(..., description="Bearer token sent with every request.")
    page_size: PositiveInt = Field(
        default=DEFAULT_PAGE_SIZE,
        description="Ceiling for the number of items requested per page.",
    )
    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        description="API root that resource paths are appended to.",
    )
    timeout_sec: PositiveFloat = Field(
        default=60.0, description="Total request timeout in seconds."
    )
    connect_timeout_sec: PositiveFloat = Field(
        default=15.0,
        description="Connection timeout in seconds.",
    )
    user_agent: str = Field(
        default="sparkapi/0.1 (RequestsTransport)",
        description="User-Agent header installed on the default transport session.",
    )

    @field_validator("token")
    @classmethod
    def _require_token(cls, value: SecretStr) -> SecretStr:
        if not value.get_secret_value().strip():
            raise ValueError("token must not be empty")
        return value

    @field_validator("base_url")
    @classmethod
    def _normalise_base_url(cls, value: str) -> str:
        stripped = value.strip().rstrip("/")
        if not stripped.startswith(("http://", "https://")):
            raise ValueError("base_url must start with http:// or https://")
        return stripped

    @property
    def timeout(self) -> tuple[float, float]:
        """Return the ``(connect, read)`` pair handed to ``requests``."""

        connect = min(self.connect_timeout_sec, self.timeout_sec)
        return (connect, self.timeout_sec)

    @property
    def authorization(self) -> str:
        return f"Bearer {self.token.get_secret_value()}"

    def resource_url(self, resource: str) -> str:
        return f"{self.base_url}/{resource.strip('/')}"

    def with_page_size(self, page_size: int) -> ClientConfig:
        """Return a copy of this configuration with a different page ceiling."""

        return build_client_config(**{**self.model_dump(), "page_size": page_size})


def build_client_config(**values: Any) -> ClientConfig:
    """Validate ``values`` into a :class:`ClientConfig`.

    Pydantic validation failures surface as :class:`SparkValidationError`
    so callers only deal with the library's own exception types.
    """

    try:
        return ClientConfig.model_validate(values)
    except ValidationError as exc:
        raise SparkValidationError(f"invalid client configuration: {exc}") from exc
