"""Configuration settings for Glyphdraw."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field

from glyphdraw.domain.state import FontData, FontFamily, FontStyle


class PageOrientation(str, Enum):
    """Page orientation."""

    PORTRAIT = "P"
    LANDSCAPE = "L"


class PageUnit(str, Enum):
    """User unit of the document coordinate system."""

    POINT = "pt"
    MILLIMETER = "mm"
    CENTIMETER = "cm"
    INCH = "in"


class PageConfig(BaseModel):
    """Configuration for new documents."""

    orientation: PageOrientation = Field(
        default=PageOrientation.PORTRAIT,
        description="Page orientation",
    )
    unit: PageUnit = Field(
        default=PageUnit.POINT,
        description="User unit for drawing coordinates",
    )
    size: str = Field(
        default="A4",
        description="Page format name (A3, A4, A5, letter, legal)",
    )


class FontConfig(BaseModel):
    """Font selection defaults."""

    folder: Path = Field(
        default=Path("fonts"),
        description="Folder holding the TrueType font files",
    )
    name: str = Field(
        default="luxi",
        description="Default font base name",
    )
    family: FontFamily = Field(
        default=FontFamily.SANS,
        description="Default font family",
    )
    bold: bool = Field(default=False, description="Use the bold style")
    italic: bool = Field(default=False, description="Use the italic style")
    size: float = Field(
        default=10.0,
        gt=0.0,
        le=1000.0,
        description="Default font size in points",
    )

    def font_data(self) -> FontData:
        """Return the configured font selection."""
        style = FontStyle.NORMAL
        if self.bold:
            style |= FontStyle.BOLD
        if self.italic:
            style |= FontStyle.ITALIC
        return FontData(self.name, self.family, style)


class RenderConfig(BaseModel):
    """Configuration for rendering."""

    dpi: int = Field(
        default=72,
        ge=1,
        le=2400,
        description="Resolution used to derive the glyph scale",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class GlyphDrawSettings(BaseModel):
    """Main application settings."""

    page: PageConfig = Field(default_factory=PageConfig)
    font: FontConfig = Field(default_factory=FontConfig)
    render: RenderConfig = Field(default_factory=RenderConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> GlyphDrawSettings:
    """Get default application settings."""
    return GlyphDrawSettings()
