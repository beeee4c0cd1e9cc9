"""Application configuration and settings management."""

from pathlib import Path
from typing import Any, Optional

import json
from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables or defaults."""

    model_config = SettingsConfigDict(
        env_prefix="LIBHOURS_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    app_name: str = "Library Hours API"
    api_prefix: str = "/api"
    data_root: Path = Field(default=Path("data"), description="Root directory for static data files.")
    schedules_file: Optional[Path] = Field(
        default=None,
        description="Weekly schedule entries exported from the admin workflow (defaults to data_root/schedules.json).",
    )
    exceptions_file: Optional[Path] = Field(
        default=None,
        description="Closure exceptions, one per date (defaults to data_root/closure_exceptions.json).",
    )
    default_location: str = Field(default="GISHUSHU", description="Location used when a request names none.")
    next_open_scan_days: int = Field(
        default=14,
        ge=1,
        description="How many days ahead to look for the next opening when closed.",
    )
    closing_soon_hours: float = Field(default=2.0, ge=0.0)
    status_refresh_seconds: int = Field(
        default=300,
        ge=1,
        description="Suggested polling interval for clients showing the live status.",
    )
    frontend_allowed_origins: tuple[str, ...] = Field(
        default=(
            "http://localhost:3000",
            "http://127.0.0.1:3000",
        ),
        description="Permitted web origins for browser clients (CORS).",
    )

    # Supabase configuration
    supabase_url: Optional[str] = Field(
        default=None,
        description="Supabase project URL (e.g., https://xxx.supabase.co).",
    )
    supabase_key: Optional[str] = Field(
        default=None,
        description="Supabase service role key for backend operations.",
    )

    @field_validator("data_root", "schedules_file", "exceptions_file", mode="before")
    @classmethod
    def _expand_path(cls, value: Any) -> Optional[Path]:
        if value is None:
            return None
        path_value = value if isinstance(value, Path) else Path(str(value))
        return path_value.expanduser().resolve()

    @field_validator("default_location", mode="before")
    @classmethod
    def _normalize_location(cls, value: Any) -> str:
        return str(value).strip().upper()

    @field_validator("frontend_allowed_origins", mode="before")
    @classmethod
    def _parse_str_tuple_from_env(cls, value: Any) -> tuple[str, ...]:
        """Parse string tuple from environment variable (comma-separated or JSON array)."""
        if isinstance(value, tuple):
            return value
        if isinstance(value, list):
            return tuple(str(item) for item in value)
        if isinstance(value, str):
            try:
                parsed = json.loads(value)
                if isinstance(parsed, list):
                    return tuple(str(item) for item in parsed)
            except (json.JSONDecodeError, TypeError):
                pass
            if "," in value:
                return tuple(item.strip() for item in value.split(",") if item.strip())
            if value.strip():
                return (value.strip(),)
        return tuple()

    @model_validator(mode="after")
    def _default_data_files(self) -> "Settings":
        if self.schedules_file is None:
            self.schedules_file = self.data_root / "schedules.json"
        if self.exceptions_file is None:
            self.exceptions_file = self.data_root / "closure_exceptions.json"
        return self


settings = Settings()
