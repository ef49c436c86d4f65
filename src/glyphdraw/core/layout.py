"""String layout into glyph outline paths.

The layout engine walks the code points of a string, applies pairwise
kerning and advance widths, and traces every contour of every glyph into
a path. It reports failures in its result instead of logging them so the
caller decides how to surface them.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING

from glyphdraw.core.contour import trace_contour
from glyphdraw.core.numeric import funits_to_pixels
from glyphdraw.domain.path import Path
from glyphdraw.exceptions import GlyphLoadError

if TYPE_CHECKING:
    from glyphdraw.io.font import FontBackend


@dataclass
class LayoutResult:
    """Outcome of laying out one string.

    Attributes:
        advance: Horizontal advance consumed. On failure this is
            ``start_x - cursor_x`` at the point of failure, which is
            negative once glyphs have advanced past the start.
        glyph_count: Number of glyphs traced into the path
        error: The glyph-load failure that stopped layout, if any
    """

    advance: float
    glyph_count: int = 0
    error: GlyphLoadError | None = None

    @property
    def ok(self) -> bool:
        """True when every glyph was laid out."""
        return self.error is None


def layout_string(
    text: str,
    x: float,
    y: float,
    font: "FontBackend",
    scale: int,
    path: Path,
) -> LayoutResult:
    """Lay out a string as glyph contours starting at (x, y).

    Args:
        text: String to lay out
        x: Pen start X in pixels
        y: Baseline Y in pixels
        font: Font backend providing glyph indices, metrics and outlines
        scale: Integer glyph scale passed to the font backend
        path: Path receiving the traced contours

    Returns:
        LayoutResult with the consumed advance. Layout stops at the first
        glyph that fails to load; contours already traced stay in the path.
    """
    start_x = x
    prev: int | None = None
    count = 0

    for char in text:
        index = font.index(char)
        if prev is not None:
            x += funits_to_pixels(font.kerning(scale, prev, index))

        try:
            outline = font.load_glyph(scale, index)
        except GlyphLoadError as e:
            return LayoutResult(advance=start_x - x, glyph_count=count, error=e)

        for contour in outline.contours():
            trace_contour(contour, x, y, path)

        x += funits_to_pixels(font.advance_width(scale, index))
        prev = index
        count += 1

    return LayoutResult(advance=x - start_x, glyph_count=count)
