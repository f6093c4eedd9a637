"""Application settings — Pydantic-based configuration with YAML and env var support.

Configuration is loaded from (in order of precedence):
  1. Environment variables (XUNSCOUT_ prefix)
  2. YAML config file (if specified)
  3. Default values
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings


class HostSettings(BaseModel):
    """Addresses of the two Xunsearch daemons."""

    index: str = Field(default="127.0.0.1:8383", description="Index server address (host:port or port)")
    search: str = Field(default="127.0.0.1:8384", description="Search server address (host:port or port)")

    @field_validator("index", "search", mode="before")
    @classmethod
    def _port_only(cls, v: Any) -> Any:
        """Accept a bare port number, as Xunsearch does."""
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v


class XunsearchSettings(BaseModel):
    """Xunsearch engine configuration."""

    fuzzy: bool = Field(default=False, description="Enable fuzzy matching for every query")
    hosts: HostSettings = Field(default_factory=HostSettings)
    per_page: int = Field(default=15, ge=1, description="Result limit used when a query sets none")
    client_factory: str | None = Field(
        default=None,
        description="Dotted path 'package.module:callable' building a client session from INI text",
    )

    @field_validator("client_factory")
    @classmethod
    def _check_factory_path(cls, v: str | None) -> str | None:
        if v is not None and ":" not in v:
            raise ValueError("client_factory must look like 'package.module:callable'")
        return v


class ObservabilitySettings(BaseModel):
    """Observability configuration."""

    log_level: str = Field(default="info", description="Log level: debug, info, warning, error")
    log_format: str = Field(default="json", description="Log format: json, console")


class Settings(BaseSettings):
    """Root settings.

    Nested settings use double underscores::

        XUNSCOUT_XUNSEARCH__FUZZY=true
        XUNSCOUT_XUNSEARCH__HOSTS__INDEX=10.0.0.5:8383
        XUNSCOUT_XUNSEARCH__CLIENT_FACTORY=myapp.xs:connect
    """

    model_config = {
        "env_prefix": "XUNSCOUT_",
        "env_nested_delimiter": "__",
        "case_sensitive": False,
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }

    xunsearch: XunsearchSettings = Field(default_factory=XunsearchSettings)
    observability: ObservabilitySettings = Field(default_factory=ObservabilitySettings)

    @classmethod
    def from_yaml(cls, path: str | Path) -> Settings:
        """Load settings from a YAML configuration file.

        Values from the YAML file are used as defaults; environment variables
        still take precedence.

        Raises:
            FileNotFoundError: If the file does not exist.
        """
        import yaml  # type: ignore[import-untyped]

        config_path = Path(path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_path) as f:
            data = yaml.safe_load(f) or {}

        return cls(**data)
