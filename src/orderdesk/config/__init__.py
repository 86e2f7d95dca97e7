"""Application configuration helpers."""

from __future__ import annotations

from .env import optional_env_var
from .errors import ConfigurationError
from .sources import DataSourceConfig, get_data_source_config

__all__ = [
    "ConfigurationError",
    "DataSourceConfig",
    "get_data_source_config",
    "optional_env_var",
]
