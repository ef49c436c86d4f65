"""Configuration management for glyphdraw.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- PageConfig: Settings for new documents
- FontConfig: Font folder and default font selection
- RenderConfig: Rendering resolution
- LoggingConfig: Logging settings
- GlyphDrawSettings: Main application settings
"""

from glyphdraw.config.settings import (
    FontConfig,
    GlyphDrawSettings,
    LoggingConfig,
    PageConfig,
    PageOrientation,
    PageUnit,
    RenderConfig,
    get_default_settings,
)

__all__ = [
    "FontConfig",
    "GlyphDrawSettings",
    "LoggingConfig",
    "PageConfig",
    "PageOrientation",
    "PageUnit",
    "RenderConfig",
    "get_default_settings",
]
