"""Domain models for glyphdraw.

This module contains the value types shared by the rendering core:
paths, paint state and glyph outlines. They are independent of the
document writer and of fontTools table details.

Key classes:
- Path: Ordered path segments grouped into subpaths
- DrawingState: Paint, transform and path state of one scope
- Color: RGBA color with 16-bit components
- OutlinePoint: A glyph outline point with its on-curve flag
- GlyphOutline: A glyph's points grouped into contours
"""

from glyphdraw.domain.outline import GlyphOutline, OutlinePoint
from glyphdraw.domain.path import (
    ArcTo,
    Close,
    CubicCurveTo,
    LineTo,
    MoveTo,
    Path,
    QuadCurveTo,
    Segment,
    circle,
    ellipse,
    rect,
)
from glyphdraw.domain.state import (
    BLACK,
    DEFAULT_FONT_DATA,
    WHITE,
    Color,
    DrawingState,
    FillRule,
    FontData,
    FontFamily,
    FontStyle,
    LineCap,
    LineJoin,
    font_file_name,
)

__all__: list[str] = [
    # Enums
    "FillRule",
    "FontFamily",
    "FontStyle",
    "LineCap",
    "LineJoin",
    # Path segments
    "ArcTo",
    "Close",
    "CubicCurveTo",
    "LineTo",
    "MoveTo",
    "QuadCurveTo",
    "Segment",
    # Core types
    "Color",
    "DrawingState",
    "FontData",
    "GlyphOutline",
    "OutlinePoint",
    "Path",
    # Constants
    "BLACK",
    "DEFAULT_FONT_DATA",
    "WHITE",
    # Helpers
    "circle",
    "ellipse",
    "font_file_name",
    "rect",
]
