"""Core configuration.

Why here:
- Centralizes environment variables (pydantic-settings) without leaking into the CLI.
- Lets adapters (HTTP, cache) and the content client read config consistently.
- The "CMS enabled" flag is derived once from these settings and injected,
  so accessors never look at `os.environ` themselves.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no extra dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "storefront-cms"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "storefront-cms"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "storefront-cms"
    return Path.home() / ".config" / "storefront-cms"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _parse_env_lines(text: str) -> dict[str, str]:
    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key:
            data[key] = value
    return data


def write_user_env_vars(values: dict[str, str], *, env_path: Path | None = None) -> Path:
    """Write/update variables in the user's global .env."""

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# storefront-cms user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Central application settings.

    Why pydantic-settings:
    - Typing + validation at the edge (env vars) without polluting the core.
    - A single configuration contract for the CLI, adapters and services.
    """

    model_config = SettingsConfigDict(
        env_prefix="STOREFRONT_CMS_",
        extra="ignore",
        case_sensitive=False,
        populate_by_name=True,
        # Order: project first (dev), then the user's global config.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    strapi_url: str | None = Field(
        default=None,
        validation_alias=AliasChoices("STRAPI_URL", "NEXT_PUBLIC_STRAPI_URL"),
        description="Base URL of the Strapi backend. Empty disables the CMS.",
    )
    strapi_read_token: str | None = Field(
        default=None,
        validation_alias=AliasChoices("STRAPI_READ_TOKEN", "NEXT_PUBLIC_STRAPI_READ_TOKEN"),
        description="Read-only API token sent as a bearer token.",
    )

    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Per-request timeout (seconds).",
    )
    user_agent: str = Field(
        default="storefront-cms/0.1",
        min_length=1,
        description="User-Agent sent to the CMS.",
    )

    log_level: str = Field(
        default="WARNING",
        description="Root log level (DEBUG, INFO, WARNING, ...).",
    )
    log_json: bool = Field(
        default=False,
        description="Render log lines as JSON instead of console output.",
    )

    @field_validator("strapi_url", mode="before")
    @classmethod
    def _normalize_url(cls, value: object) -> object:
        if isinstance(value, str):
            value = value.strip().rstrip("/")
            return value or None
        return value

    @property
    def strapi_enabled(self) -> bool:
        """True when a backend base URL is configured."""

        return bool(self.strapi_url)
