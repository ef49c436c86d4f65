"""Raw glyph outlines as produced by the font backend.

Outline coordinates are integers in design units already scaled for the
requested glyph scale, with positive Y going upwards.
"""

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class OutlinePoint:
    """A point of a glyph outline.

    Attributes:
        x: X coordinate in scaled design units
        y: Y coordinate in scaled design units
        on_curve: True for points on the outline, False for quadratic
            control points
    """

    x: int
    y: int
    on_curve: bool = True


@dataclass(frozen=True)
class GlyphOutline:
    """Flat point list of a glyph, grouped into contours by end offsets.

    Attributes:
        points: All outline points in contour order
        ends: Exclusive end offset of each contour in ``points``
    """

    points: tuple[OutlinePoint, ...] = ()
    ends: tuple[int, ...] = ()

    def contours(self) -> Iterator[tuple[OutlinePoint, ...]]:
        """Yield the points of each contour in order."""
        start = 0
        for end in self.ends:
            yield self.points[start:end]
            start = end

    def is_empty(self) -> bool:
        """Check if the glyph has no outline (e.g., a space)."""
        return not self.ends
