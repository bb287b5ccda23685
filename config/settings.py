"""
Application settings using Pydantic.

Settings are loaded from environment variables with .env file support.
"""

import math
from functools import lru_cache
from pathlib import Path

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class WheelSettings(BaseModel):
    """Selection and spin timing rules."""

    # Subscription slice unlocks after this many completed spins
    subscription_threshold: int = Field(default=20, ge=0)
    subscription_pct: float = Field(default=6.0, ge=0.0, le=100.0)

    # Spin animation
    extra_turns: int = Field(default=6, ge=1)
    spin_duration_ms: float = Field(default=5000.0, gt=0.0)
    settle_delay_ms: float = Field(default=650.0, ge=0.0)
    pointer_angle: float = -math.pi / 2  # straight up
    easing: str = "ease_out_cubic"


class DisplaySettings(BaseModel):
    """Display-related settings."""

    # Wheel canvas (square)
    canvas_size: int = Field(default=500, ge=64)

    # Window
    window_width: int = 720
    window_height: int = 720
    fps: int = 60

    # Labels
    font_size: int = 18
    line_height: int = 20
    label_radius_ratio: float = Field(default=0.55, gt=0.0, lt=1.0)
    label_padding: int = 20


class EffectsSettings(BaseModel):
    """Celebration effects shown when a spin lands."""

    confetti_count: int = 40
    confetti_lifetime_ms: float = 5000.0
    flash_ring_ms: float = 1100.0
    confetti_colors: list[str] = Field(
        default=["#ffcf33", "#ff8a3d", "#ff2d55", "#38f9d7", "#ffffff"]
    )


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="SPINWHEEL_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    debug: bool = False

    # Theme (YAML file name under config/themes, built-in defaults if missing)
    theme: str = "default"

    # Paths
    state_file: Path = Field(default_factory=lambda: Path.home() / ".spinwheel" / "state.json")
    log_file: Path | None = None

    # Nested settings
    wheel: WheelSettings = Field(default_factory=WheelSettings)
    display: DisplaySettings = Field(default_factory=DisplaySettings)
    effects: EffectsSettings = Field(default_factory=EffectsSettings)

    @property
    def themes_path(self) -> Path:
        """Path to themes configuration."""
        return Path(__file__).parent / "themes"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
