"""Configuration management for ByteSummary."""

from .loader import Config, load_config, save_config
from .models import (
    ConfigModel,
    FetchConfig,
    LLMConfig,
    PipelineConfig,
    PostgresConfig,
    ServerConfig,
    StoreConfig,
)

__all__ = [
    "Config",
    "ConfigModel",
    "FetchConfig",
    "LLMConfig",
    "PipelineConfig",
    "PostgresConfig",
    "ServerConfig",
    "StoreConfig",
    "load_config",
    "save_config",
]
