"""
Base theme class and theme loading utilities.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml


@dataclass
class ThemeColors:
    """Theme color palette."""
    background: str = "#0f1218"   # Window background
    panel: str = "#1b2029"        # Dialog background
    text: str = "#f4f6fb"         # Dialog text
    label: str = "#0f1218"        # Slice label text
    accent: str = "#ffcf33"       # Close button, rim
    pointer: str = "#ffffff"      # Pointer triangle
    hub: str = "#ff2d55"          # Spin button
    hub_disabled: str = "#5a6070" # Spin button while spinning
    backdrop: str = "#000000"     # Behind the dialog

    def to_rgb(self, color_name: str) -> tuple[int, int, int]:
        """Convert hex color to RGB tuple."""
        hex_color = getattr(self, color_name, self.text)
        hex_color = hex_color.lstrip("#")
        return tuple(int(hex_color[i:i+2], 16) for i in (0, 2, 4))


@dataclass
class ThemeMessages:
    """Theme-specific messages."""
    title: str = "Spin Wheel"
    spin: str = "SPIN"
    result_title: str = "Your task"
    close: str = "Close"


@dataclass
class Theme:
    """Complete theme configuration."""
    name: str = "default"
    description: str = "Default theme"
    backdrop_alpha: int = 170  # 0-255

    colors: ThemeColors = field(default_factory=ThemeColors)
    messages: ThemeMessages = field(default_factory=ThemeMessages)

    @classmethod
    def from_yaml(cls, data: dict[str, Any]) -> "Theme":
        """Create theme from YAML data."""
        theme = cls(
            name=data.get("name", "default"),
            description=data.get("description", ""),
            backdrop_alpha=int(data.get("backdrop_alpha", 170)),
        )

        if "colors" in data:
            theme.colors = ThemeColors(**data["colors"])

        if "messages" in data:
            theme.messages = ThemeMessages(**data["messages"])

        return theme


def load_theme(theme_name: str, themes_path: Path | None = None) -> Theme:
    """
    Load a theme from YAML file.

    Args:
        theme_name: Name of the theme (without .yaml extension)
        themes_path: Path to themes directory

    Returns:
        Theme instance
    """
    if themes_path is None:
        themes_path = Path(__file__).parent

    theme_file = themes_path / f"{theme_name}.yaml"

    if not theme_file.exists():
        # Return default theme
        return Theme(name=theme_name)

    with open(theme_file, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    return Theme.from_yaml(data)


def list_themes(themes_path: Path | None = None) -> list[str]:
    """List available themes."""
    if themes_path is None:
        themes_path = Path(__file__).parent

    return sorted(f.stem for f in themes_path.glob("*.yaml"))
