"""Core rendering algorithms for glyphdraw.

This module contains:

- Numeric conversions (design units to pixels, colors to channels)
- Contour tracing of TrueType quadratic outlines
- String layout with kerning and advance widths
- Path dispatch into ordered fill/stroke commands
- Save/restore state bookkeeping
- The PDF graphics backend tying them together

Key functions:
- funits_to_pixels: Convert scaled design units to pixels
- trace_contour: Append one glyph contour to a path
- layout_string: Lay out a string as glyph contours

Key classes:
- StateStack: Nested drawing states with save/restore
- PathDispatcher: Converts paths and paints them
- GraphicsBackend: Capability interface of a graphics backend
- PdfGraphicContext: GraphicsBackend for document writers
"""

from glyphdraw.core.backend import GraphicsBackend
from glyphdraw.core.context import DPI, PdfGraphicContext, glyph_scale
from glyphdraw.core.contour import trace_contour
from glyphdraw.core.dispatch import (
    PathConverter,
    PathDispatcher,
    arc_to_cubics,
    fill_stroke_style,
    fill_style,
)
from glyphdraw.core.layout import LayoutResult, layout_string
from glyphdraw.core.numeric import (
    alpha_fraction,
    color_to_channels,
    funits_to_pixels,
    glyph_point_to_pixel,
    trunc_div,
    trunc_mod,
)
from glyphdraw.core.stack import StateStack

__all__ = [
    # Backend classes
    "DPI",
    "GraphicsBackend",
    "PdfGraphicContext",
    "glyph_scale",
    # Dispatch
    "PathConverter",
    "PathDispatcher",
    "arc_to_cubics",
    "fill_stroke_style",
    "fill_style",
    # Layout
    "LayoutResult",
    "layout_string",
    "trace_contour",
    # Numeric conversions
    "alpha_fraction",
    "color_to_channels",
    "funits_to_pixels",
    "glyph_point_to_pixel",
    "trunc_div",
    "trunc_mod",
    # State
    "StateStack",
]
