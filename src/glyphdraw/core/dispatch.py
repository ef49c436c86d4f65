"""Conversion of paths and paint state into document draw calls.

Key components:
- PathConverter: replays path segments on a document writer
- PathDispatcher: converts paths, syncs the writer's alpha and paints
- fill_style / fill_stroke_style: style tokens for the active fill rule
"""

import logging
import math

from glyphdraw.domain.path import (
    ArcTo,
    Close,
    CubicCurveTo,
    LineTo,
    MoveTo,
    Path,
    QuadCurveTo,
)
from glyphdraw.domain.state import FillRule
from glyphdraw.io.document import DocumentWriter

logger = logging.getLogger(__name__)

STROKE = "D"
FILL = "F"
FILL_STROKE = "FD"
EVEN_ODD_SUFFIX = "*"


def fill_style(rule: FillRule) -> str:
    """Style token for a fill with the given rule."""
    return FILL if rule.use_non_zero_winding() else FILL + EVEN_ODD_SUFFIX


def fill_stroke_style(rule: FillRule) -> str:
    """Style token for a combined fill and stroke with the given rule."""
    return FILL_STROKE if rule.use_non_zero_winding() else FILL_STROKE + EVEN_ODD_SUFFIX


def arc_to_cubics(arc: ArcTo) -> list[CubicCurveTo]:
    """Approximate an elliptical arc with cubic Bezier curves.

    The arc is split into pieces of at most a quarter turn; each piece
    uses the standard ``4/3 * tan(theta/4)`` control distance.

    Args:
        arc: Arc segment to approximate

    Returns:
        Cubic segments starting at the arc start and ending at its end
    """
    if arc.angle == 0:
        return []

    count = max(1, math.ceil(abs(arc.angle) / (math.pi / 2) - 1e-9))
    step = arc.angle / count
    k = 4.0 / 3.0 * math.tan(step / 4)

    curves: list[CubicCurveTo] = []
    a0 = arc.start_angle
    for _ in range(count):
        a1 = a0 + step
        x0 = arc.cx + math.cos(a0) * arc.rx
        y0 = arc.cy + math.sin(a0) * arc.ry
        x3 = arc.cx + math.cos(a1) * arc.rx
        y3 = arc.cy + math.sin(a1) * arc.ry
        curves.append(
            CubicCurveTo(
                x0 - k * arc.rx * math.sin(a0),
                y0 + k * arc.ry * math.cos(a0),
                x3 + k * arc.rx * math.sin(a1),
                y3 - k * arc.ry * math.cos(a1),
                x3,
                y3,
            )
        )
        a0 = a1
    return curves


class PathConverter:
    """Replays paths on a document writer, segment by segment."""

    def __init__(self, document: DocumentWriter) -> None:
        self._document = document

    def convert(self, *paths: Path) -> None:
        """Send every segment of every path, preserving subpaths."""
        for path in paths:
            for segment in path:
                self._convert_segment(segment)

    def _convert_segment(self, segment: object) -> None:
        doc = self._document
        if isinstance(segment, MoveTo):
            doc.move_to(segment.x, segment.y)
        elif isinstance(segment, LineTo):
            doc.line_to(segment.x, segment.y)
        elif isinstance(segment, QuadCurveTo):
            doc.curve_to(segment.cx, segment.cy, segment.x, segment.y)
        elif isinstance(segment, CubicCurveTo):
            doc.curve_bezier_cubic_to(
                segment.c1x, segment.c1y, segment.c2x, segment.c2y, segment.x, segment.y
            )
        elif isinstance(segment, ArcTo):
            for curve in arc_to_cubics(segment):
                self._convert_segment(curve)
        elif isinstance(segment, Close):
            doc.close_path()


class PathDispatcher:
    """Issues paint operations for paths on a document writer.

    The writer's alpha is only updated when it differs from the requested
    one; its blend mode is kept as is.
    """

    def __init__(self, document: DocumentWriter) -> None:
        self._document = document
        self._converter = PathConverter(document)
        self.draw_count = 0

    def draw(self, style: str, alpha: float, paths: list[Path]) -> None:
        """Convert paths and paint them.

        Args:
            style: Style token ("D", "F", "F*", "FD" or "FD*")
            alpha: Opacity between 0 and 1
            paths: Paths to paint, in order
        """
        self._converter.convert(*paths)

        current, blend_mode = self._document.get_alpha()
        if alpha != current:
            self._document.set_alpha(alpha, blend_mode)

        self._document.draw_path(style)
        self.draw_count += 1
        logger.debug("draw_path style=%s alpha=%.3f paths=%d", style, alpha, len(paths))
