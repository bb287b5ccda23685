"""Window themes."""

from .base import Theme, ThemeColors, ThemeMessages, load_theme, list_themes

__all__ = ["Theme", "ThemeColors", "ThemeMessages", "load_theme", "list_themes"]
