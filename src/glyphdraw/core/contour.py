"""Contour tracing for TrueType glyph outlines.

TrueType contours are sequences of on-curve points and quadratic control
points. Two consecutive control points imply an on-curve point halfway
between them. The tracer turns such a sequence into move/line/curve
segments in document pixel space.
"""

from collections.abc import Sequence

from glyphdraw.core.numeric import glyph_point_to_pixel
from glyphdraw.domain.outline import OutlinePoint
from glyphdraw.domain.path import Path


def trace_contour(
    points: Sequence[OutlinePoint],
    dx: float,
    dy: float,
    path: Path,
) -> None:
    """Append one closed contour to a path.

    The first point is taken as on-curve. Every emitted coordinate is
    offset by (dx, dy).

    Args:
        points: Outline points of a single closed contour
        dx: Horizontal placement offset in pixels
        dy: Vertical placement offset in pixels
        path: Path receiving the segments

    Examples:
        >>> path = Path()
        >>> trace_contour([OutlinePoint(0, 0), OutlinePoint(64, 0)], 0, 0, path)
        >>> len(path)
        3
    """
    if not points:
        return

    start_x, start_y = glyph_point_to_pixel(points[0])
    path.move_to(start_x + dx, start_y + dy)

    q0_x, q0_y, on0 = start_x, start_y, True
    for point in points[1:]:
        q_x, q_y = glyph_point_to_pixel(point)
        on = point.on_curve

        if on:
            if on0:
                path.line_to(q_x + dx, q_y + dy)
            else:
                path.quad_curve_to(q0_x + dx, q0_y + dy, q_x + dx, q_y + dy)
        elif not on0:
            mid_x = (q0_x + q_x) / 2
            mid_y = (q0_y + q_y) / 2
            path.quad_curve_to(q0_x + dx, q0_y + dy, mid_x + dx, mid_y + dy)

        q0_x, q0_y, on0 = q_x, q_y, on

    if on0:
        path.line_to(start_x + dx, start_y + dy)
    else:
        path.quad_curve_to(q0_x + dx, q0_y + dy, start_x + dx, start_y + dy)
