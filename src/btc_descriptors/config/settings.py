"""Descriptor settings loaded from environment variables and config files.

Configuration is loaded from (highest priority first):
1. Environment variables (prefix: ``BTCDESC_``)
2. YAML config file (``BTCDESC_CONFIG_PATH`` env var or :meth:`from_yaml`)
3. Defaults defined here
"""

from __future__ import annotations

import enum
from pathlib import Path
from typing import Any, Self

import yaml
from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from btc_descriptors.bitcoin.address import Network


class LogLevel(enum.StrEnum):
    """Accepted logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


def _load_yaml(path: str | Path) -> dict[str, Any]:
    """Load a YAML configuration file and return its contents as a dict.

    Returns an empty dict if the file doesn't exist or is empty.
    """
    p = Path(path)
    if not p.exists():
        return {}
    data = yaml.safe_load(p.read_text(encoding="utf-8"))
    return data if isinstance(data, dict) else {}


class DescriptorSettings(BaseSettings):
    """Settings for parsing descriptors.

    ``network`` restricts which addresses are accepted; ``None`` accepts
    addresses of any network.
    """

    model_config = SettingsConfigDict(
        env_prefix="BTCDESC_",
        case_sensitive=False,
    )

    network: Network | None = Field(
        default=None,
        description="Expected network of parsed addresses, or unset for any",
    )
    require_checksum: bool = Field(
        default=False,
        description="Reject descriptors without a '#checksum' suffix",
    )
    log_level: LogLevel = LogLevel.INFO
    config_path: str = ""

    @model_validator(mode="before")
    @classmethod
    def _merge_yaml(cls, values: dict[str, Any]) -> dict[str, Any]:
        """Merge YAML config file contents under the env var overrides."""
        config_path = values.get("config_path", "")
        if not config_path:
            return values
        for key, val in _load_yaml(config_path).items():
            if key not in values or values[key] is None:
                values[key] = val
        return values

    @classmethod
    def from_yaml(cls, path: str | Path) -> Self:
        """Construct settings with defaults from a YAML file.

        Environment variables still override YAML values.
        """
        return cls(config_path=str(path))
