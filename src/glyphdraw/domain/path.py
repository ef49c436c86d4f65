"""Path geometry built by drawing operations.

This module defines the path model shared by the state stack, the contour
tracer and the draw dispatcher:
- Segment types: MoveTo, LineTo, QuadCurveTo, CubicCurveTo, ArcTo, Close
- Path: an ordered list of segments grouped into subpaths by move-to
- Shape helpers: rect, ellipse, circle
"""

import math
from collections.abc import Iterator
from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class MoveTo:
    """Start a new subpath at (x, y)."""

    x: float
    y: float


@dataclass(frozen=True, slots=True)
class LineTo:
    """Straight line from the current point to (x, y)."""

    x: float
    y: float


@dataclass(frozen=True, slots=True)
class QuadCurveTo:
    """Quadratic Bezier curve with control point (cx, cy) ending at (x, y)."""

    cx: float
    cy: float
    x: float
    y: float


@dataclass(frozen=True, slots=True)
class CubicCurveTo:
    """Cubic Bezier curve with two control points ending at (x, y)."""

    c1x: float
    c1y: float
    c2x: float
    c2y: float
    x: float
    y: float


@dataclass(frozen=True, slots=True)
class ArcTo:
    """Elliptical arc around (cx, cy).

    Attributes:
        cx: X coordinate of the center
        cy: Y coordinate of the center
        rx: Horizontal radius
        ry: Vertical radius
        start_angle: Start angle in radians
        angle: Swept angle in radians (negative sweeps the other way)
    """

    cx: float
    cy: float
    rx: float
    ry: float
    start_angle: float
    angle: float

    @property
    def start(self) -> tuple[float, float]:
        """Point where the arc begins."""
        return (
            self.cx + math.cos(self.start_angle) * self.rx,
            self.cy + math.sin(self.start_angle) * self.ry,
        )

    @property
    def end(self) -> tuple[float, float]:
        """Point where the arc ends."""
        end_angle = self.start_angle + self.angle
        return (
            self.cx + math.cos(end_angle) * self.rx,
            self.cy + math.sin(end_angle) * self.ry,
        )


@dataclass(frozen=True, slots=True)
class Close:
    """Close the current subpath back to its starting point."""


Segment = MoveTo | LineTo | QuadCurveTo | CubicCurveTo | ArcTo | Close


@dataclass
class Path:
    """An ordered sequence of path segments.

    Subpaths are delimited by MoveTo segments. The path tracks the last
    point reached and the start of the current subpath so that Close
    moves the pen back where the subpath began.

    Attributes:
        segments: Segments in drawing order
    """

    segments: list[Segment] = field(default_factory=list)
    _last: tuple[float, float] = field(default=(0.0, 0.0), repr=False)
    _start: tuple[float, float] = field(default=(0.0, 0.0), repr=False)

    def move_to(self, x: float, y: float) -> None:
        """Begin a new subpath at (x, y)."""
        self.segments.append(MoveTo(x, y))
        self._last = self._start = (x, y)

    def line_to(self, x: float, y: float) -> None:
        """Add a line from the last point to (x, y)."""
        self.segments.append(LineTo(x, y))
        self._last = (x, y)

    def quad_curve_to(self, cx: float, cy: float, x: float, y: float) -> None:
        """Add a quadratic curve from the last point to (x, y)."""
        self.segments.append(QuadCurveTo(cx, cy, x, y))
        self._last = (x, y)

    def cubic_curve_to(
        self,
        c1x: float,
        c1y: float,
        c2x: float,
        c2y: float,
        x: float,
        y: float,
    ) -> None:
        """Add a cubic curve from the last point to (x, y)."""
        self.segments.append(CubicCurveTo(c1x, c1y, c2x, c2y, x, y))
        self._last = (x, y)

    def arc_to(
        self,
        cx: float,
        cy: float,
        rx: float,
        ry: float,
        start_angle: float,
        angle: float,
    ) -> None:
        """Add an elliptical arc.

        The pen is first brought to the arc start: with a line when the
        current subpath is still open, otherwise with a move.

        Args:
            cx: X coordinate of the center
            cy: Y coordinate of the center
            rx: Horizontal radius
            ry: Vertical radius
            start_angle: Start angle in radians
            angle: Swept angle in radians
        """
        arc = ArcTo(cx, cy, rx, ry, start_angle, angle)
        start_x, start_y = arc.start
        if self.is_empty() or isinstance(self.segments[-1], Close):
            self.move_to(start_x, start_y)
        else:
            self.line_to(start_x, start_y)
        self.segments.append(arc)
        self._last = arc.end

    def close(self) -> None:
        """Close the current subpath."""
        self.segments.append(Close())
        self._last = self._start

    def is_empty(self) -> bool:
        """Check if the path has no segments."""
        return not self.segments

    def last_point(self) -> tuple[float, float]:
        """Return the current pen position."""
        return self._last

    def copy(self) -> "Path":
        """Return an independent copy of this path."""
        return Path(segments=list(self.segments), _last=self._last, _start=self._start)

    def subpaths(self) -> list[list[Segment]]:
        """Split the path into subpaths at each MoveTo.

        Returns:
            List of segment lists, each starting with its MoveTo (a leading
            run of segments without a MoveTo forms its own subpath)
        """
        result: list[list[Segment]] = []
        for segment in self.segments:
            if isinstance(segment, MoveTo) or not result:
                result.append([])
            result[-1].append(segment)
        return result

    def __iter__(self) -> Iterator[Segment]:
        return iter(self.segments)

    def __len__(self) -> int:
        return len(self.segments)


def rect(path: Path, x1: float, y1: float, x2: float, y2: float) -> None:
    """Append a closed rectangle with corners (x1, y1) and (x2, y2)."""
    path.move_to(x1, y1)
    path.line_to(x2, y1)
    path.line_to(x2, y2)
    path.line_to(x1, y2)
    path.close()


def ellipse(path: Path, cx: float, cy: float, rx: float, ry: float) -> None:
    """Append a closed ellipse centered on (cx, cy)."""
    path.arc_to(cx, cy, rx, ry, 0, -math.pi * 2)
    path.close()


def circle(path: Path, cx: float, cy: float, radius: float) -> None:
    """Append a closed circle centered on (cx, cy)."""
    ellipse(path, cx, cy, radius, radius)
