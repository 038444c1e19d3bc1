"""Configuration management using Pydantic settings."""

import functools
import uuid
from pathlib import Path
from typing import TYPE_CHECKING, Any

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


__all__ = ["Settings", "get_settings"]


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    if TYPE_CHECKING:
        # Pydantic dynamically generates a rich `__init__` for settings models.
        # Some type checkers miss those parameters; declare the ones we rely on in tests.
        def __init__(self, *, _env_file: Any | None = None, **values: Any) -> None: ...

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="PICKERS_",
        extra="ignore",
    )

    # Language picker generation
    language_count: int = Field(default=60, ge=1, description="Number of synthetic languages")
    language_group_size: int = Field(default=20, ge=1, description="Languages per banner page")
    language_icons: tuple[str, str] = Field(
        default=("image4", "image5"),
        description="Icon tokens for even and odd language rows",
    )

    # Carousels
    country_banners: list[str] = Field(
        default_factory=lambda: ["imagedan", "bisb", "ila"],
        min_length=1,
        description="Banner images on the country screen",
    )
    language_banners: list[str] = Field(
        default_factory=lambda: ["image1", "image2", "image3"],
        min_length=1,
        description="Banner images on the language screen",
    )
    reshuffle_banner_index: int = Field(
        default=2,
        ge=0,
        description="Country banner index that reshuffles the country list",
    )

    # Selection
    clear_selection_on_consume: bool = Field(
        default=True,
        description="Forget the selected item once it has been handed to the detail view",
    )

    # Logging
    log_dir: Path = Field(default=Path("logs"), description="Log directory")
    log_to_file: bool = Field(default=True, description="Write a timestamped log file")
    run_id: str = Field(
        default_factory=lambda: uuid.uuid4().hex[:8],
        description="Short id attached to every log line of this run",
    )

    @model_validator(mode="after")
    def _check_reshuffle_banner(self) -> "Settings":
        if self.reshuffle_banner_index >= len(self.country_banners):
            raise ValueError(
                f"reshuffle_banner_index={self.reshuffle_banner_index} is outside "
                f"the {len(self.country_banners)} country banners"
            )
        return self

    def ensure_directories(self) -> None:
        """Create all required directories."""
        if self.log_to_file:
            self.log_dir.mkdir(parents=True, exist_ok=True)


@functools.lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    settings = Settings()
    settings.ensure_directories()
    return settings
