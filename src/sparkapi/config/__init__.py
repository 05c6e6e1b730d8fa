"""Configuration models and environment loading."""

from sparkapi.config.environment import EnvironmentSettings, load_environment
from sparkapi.config.models import (
    DEFAULT_BASE_URL,
    DEFAULT_PAGE_SIZE,
    ClientConfig,
    build_client_config,
)

__all__ = [
    "ClientConfig",
    "DEFAULT_BASE_URL",
    "DEFAULT_PAGE_SIZE",
    "EnvironmentSettings",
    "build_client_config",
    "load_environment",
]
