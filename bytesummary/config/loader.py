"""Configuration loader.

Settings come from a YAML file (`~/.config/bytesummary/config.yaml` unless
`BYTESUMMARY_CONFIG` points elsewhere), then a few `BYTESUMMARY_*`
environment variables override individual values. Secrets are never written
to the file; they are read from the environment variables it names.
"""

import os
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import yaml
from pydantic import ValidationError

from .models import ConfigModel

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "bytesummary" / "config.yaml"

ENV_OVERRIDES: Dict[str, Tuple[str, str]] = {
    "BYTESUMMARY_STORE_BACKEND": ("store", "backend"),
    "BYTESUMMARY_LLM_PROVIDER": ("llm", "provider"),
    "BYTESUMMARY_LLM_MODEL": ("llm", "model"),
    "BYTESUMMARY_HOST": ("server", "host"),
    "BYTESUMMARY_PORT": ("server", "port"),
}


def _read_yaml(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in config file: {e}")
    return data or {}


def _build(data: Dict[str, Any]) -> ConfigModel:
    try:
        return ConfigModel(**data)
    except ValidationError as e:
        raise ValueError(f"Invalid configuration: {e}")


def apply_env_overrides(data: Dict[str, Any], environ: Optional[Dict[str, str]] = None) -> Dict[str, Any]:
    """Overlay BYTESUMMARY_* environment variables onto raw config data."""
    environ = os.environ if environ is None else environ
    for var, (section, key) in ENV_OVERRIDES.items():
        if environ.get(var):
            data.setdefault(section, {})[key] = environ[var]
    return data


def _with_secret(values: Dict[str, Any], env_field: str, target_field: str) -> Dict[str, Any]:
    env_name = values.get(env_field)
    if env_name and os.environ.get(env_name):
        values[target_field] = os.environ[env_name]
    return values


class Config:
    """Configuration manager."""

    def __init__(self, config_path: Optional[Path] = None) -> None:
        """Initialize config manager."""
        if config_path is None:
            config_path = Path(os.environ.get("BYTESUMMARY_CONFIG", DEFAULT_CONFIG_PATH))
        self.config_path = Path(config_path)
        self._config: Optional[ConfigModel] = None

    @property
    def config(self) -> ConfigModel:
        """Get loaded config; defaults apply when no file exists."""
        if self._config is None:
            data = _read_yaml(self.config_path) if self.config_path.exists() else {}
            self._config = _build(apply_env_overrides(data))
        return self._config

    def get_db_config(self) -> Dict[str, Any]:
        """Postgres settings with the password resolved from the environment."""
        return _with_secret(self.config.postgres.model_dump(), "password_env", "password")

    def get_llm_config(self) -> Dict[str, Any]:
        """LLM settings with the API key resolved from the environment."""
        return _with_secret(self.config.llm.model_dump(), "api_key_env", "api_key")


def load_config(config_path: Path) -> ConfigModel:
    """
    Load configuration from a YAML file, without environment overrides.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is not valid YAML or fails validation
    """
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")
    return _build(_read_yaml(config_path))


def save_config(config: ConfigModel, config_path: Path) -> None:
    """Write configuration to a YAML file."""
    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "w") as f:
        yaml.dump(config.model_dump(exclude={"llm": {"api_key"}, "postgres": {"password"}}), f, sort_keys=False)
