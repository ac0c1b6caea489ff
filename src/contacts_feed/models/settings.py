"""Client settings loaded from the environment or a YAML file."""

import os
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field, ValidationError

from contacts_feed.errors import ConfigError

DEFAULT_FEED_BASE_URL = "https://www.google.com"
DEFAULT_TOKEN_URL = "https://accounts.google.com/o/oauth2/token"

ENV_PREFIX = "GOOGLE_CONTACTS_"


class ClientSettings(BaseModel):
    """OAuth credentials and transport options for ContactsClient."""

    token: Optional[str] = Field(default=None, description="Bearer access token")
    refresh_token: Optional[str] = None
    client_id: Optional[str] = Field(default=None, description="OAuth consumer key")
    client_secret: Optional[str] = Field(default=None, description="OAuth consumer secret")

    timeout: float = Field(default=30.0, gt=0)
    max_pages: Optional[int] = Field(
        default=None,
        ge=1,
        description="Stop following next links after this many pages; None = unbounded",
    )

    feed_base_url: str = DEFAULT_FEED_BASE_URL
    token_url: str = DEFAULT_TOKEN_URL

    @classmethod
    def from_env(cls, environ: Optional[dict[str, str]] = None) -> "ClientSettings":
        """Read GOOGLE_CONTACTS_* variables. Unset or blank variables keep defaults."""
        env = os.environ if environ is None else environ
        data: dict = {}
        for key in (
            "token",
            "refresh_token",
            "client_id",
            "client_secret",
            "timeout",
            "max_pages",
            "feed_base_url",
            "token_url",
        ):
            value = (env.get(ENV_PREFIX + key.upper()) or "").strip()
            if value:
                data[key] = value
        return cls._validate(data, source="environment")

    @classmethod
    def from_yaml(cls, path: str | Path) -> "ClientSettings":
        """Load settings from YAML. Supports nested (oauth/transport) or flat structure."""
        try:
            data = yaml.safe_load(Path(path).read_text()) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Cannot read settings file {path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigError(f"Settings file {path} must contain a mapping")

        flat: dict = {}
        for section in ("oauth", "transport"):
            nested = data.get(section) or {}
            if isinstance(nested, dict):
                flat.update(nested)
        flat.update({k: v for k, v in data.items() if k not in ("oauth", "transport")})
        return cls._validate(flat, source=str(path))

    @classmethod
    def _validate(cls, data: dict, *, source: str) -> "ClientSettings":
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ConfigError(f"Invalid settings from {source}: {e}") from e
