"""Application configuration and settings management."""

from pathlib import Path
from typing import Any, Literal, Optional

import json
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables or defaults."""

    model_config = SettingsConfigDict(
        env_prefix="LANES_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    app_name: str = "Lane Behavioral Analytics API"
    api_prefix: str = "/api/v1"
    log_level: str = Field(default="INFO", description="Root logging level for the service.")
    aggregate_backend: Literal["supabase", "csv"] = Field(
        default="supabase",
        description="Store that produces per-lane shipment aggregates.",
    )
    aggregates_file: Path = Field(
        default=Path("data/lane_aggregates.csv"),
        description="Pre-aggregated lane rows used by the CSV backend.",
    )
    location_names_file: Optional[Path] = Field(
        default=None,
        description="Optional CSV (code,name) extending the built-in ZIP3 short-name table.",
    )
    lane_aggregates_rpc: str = Field(
        default="lane_aggregates",
        description="Stored procedure returning one aggregate row per origin/destination pair.",
    )
    total_carriers: int = Field(default=117, ge=0)
    total_locations: int = Field(default=806, ge=0)
    friction_min_volume: int = Field(default=100, ge=0)
    terminal_min_volume: int = Field(default=50, ge=0)
    regional_min_lane_volume: int = Field(default=10, ge=0)
    default_lane_limit: int = Field(default=100, ge=1)
    default_cluster_lane_limit: int = Field(default=20, ge=1)
    default_similar_limit: int = Field(default=10, ge=1)
    default_friction_limit: int = Field(default=10, ge=1)
    default_terminal_limit: int = Field(default=5, ge=1)
    early_top_destinations: int = Field(default=10, ge=1)
    frontend_allowed_origins: tuple[str, ...] = Field(
        default=(
            "http://localhost:5173",
            "http://127.0.0.1:5173",
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

    @field_validator("aggregates_file", "location_names_file", mode="before")
    @classmethod
    def _expand_path(cls, value: Any) -> Optional[Path]:
        if value is None or value == "":
            return None
        path_value = value if isinstance(value, Path) else Path(str(value))
        return path_value.expanduser().resolve()

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


settings = Settings()
