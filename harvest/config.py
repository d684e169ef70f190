from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Harvester configuration using pydantic-settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="HARVEST_",
        case_sensitive=False,
        extra="ignore",
    )

    # Database
    database_url: str = Field(
        default="sqlite+aiosqlite:///./harvest.db",
        description="Database connection URL",
    )

    # Output
    output_dir: str = Field(default="data", description="Directory for JSON output")

    # Restaurant dedup tuning
    fuzzy_prefix_len: int = Field(
        default=8,
        ge=6,
        le=10,
        description="Leading characters compared when matching near-duplicate names",
    )
    fuzzy_min_name_len: int = Field(
        default=8,
        ge=0,
        description="Names at or below this length are only matched exactly",
    )

    # Extraction
    workers: int = Field(
        default=1, ge=1, le=32, description="Threads used for per-fragment extraction"
    )

    # Application
    log_level: str = Field(default="INFO", description="Root logging level")


# Global settings instance
settings = Settings()
