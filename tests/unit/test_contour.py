"""Unit tests for contour tracing."""

from glyphdraw.core.contour import trace_contour
from glyphdraw.domain import LineTo, MoveTo, OutlinePoint, Path, QuadCurveTo


def _on(x: int, y: int) -> OutlinePoint:
    return OutlinePoint(x, y, on_curve=True)


def _off(x: int, y: int) -> OutlinePoint:
    return OutlinePoint(x, y, on_curve=False)


class TestTraceContour:
    """Tests for trace_contour."""

    def test_empty_contour(self) -> None:
        """Test that an empty contour adds nothing."""
        path = Path()
        trace_contour([], 0, 0, path)
        assert path.is_empty()

    def test_single_point(self) -> None:
        """Test that a lone point is closed onto itself."""
        path = Path()
        trace_contour([_on(64, 64)], 0, 0, path)
        assert list(path) == [MoveTo(1.0, -1.0), LineTo(1.0, -1.0)]

    def test_all_on_curve_square(self) -> None:
        """Test a polygon contour with a placement offset."""
        path = Path()
        points = [_on(0, 0), _on(0, 64), _on(64, 64), _on(64, 0)]
        trace_contour(points, 10, 20, path)

        assert list(path) == [
            MoveTo(10.0, 20.0),
            LineTo(10.0, 19.0),
            LineTo(11.0, 19.0),
            LineTo(11.0, 20.0),
            LineTo(10.0, 20.0),
        ]

    def test_single_control_point(self) -> None:
        """Test an on/off/on sequence producing one quadratic curve."""
        path = Path()
        trace_contour([_on(0, 0), _off(64, 128), _on(128, 0)], 0, 0, path)

        assert list(path) == [
            MoveTo(0.0, 0.0),
            QuadCurveTo(1.0, -2.0, 2.0, 0.0),
            LineTo(0.0, 0.0),
        ]

    def test_consecutive_control_points_imply_midpoint(self) -> None:
        """Test that two control points in a row split at their midpoint."""
        path = Path()
        points = [_on(0, 0), _off(64, 64), _off(128, 64), _on(192, 0)]
        trace_contour(points, 0, 0, path)

        assert list(path) == [
            MoveTo(0.0, 0.0),
            QuadCurveTo(1.0, -1.0, 1.5, -1.0),
            QuadCurveTo(2.0, -1.0, 3.0, 0.0),
            LineTo(0.0, 0.0),
        ]

    def test_trailing_control_point_closes_with_curve(self) -> None:
        """Test that a contour ending off-curve closes with a quadratic curve."""
        path = Path()
        trace_contour([_on(0, 0), _on(64, 0), _off(64, 64)], 0, 0, path)

        assert list(path) == [
            MoveTo(0.0, 0.0),
            LineTo(1.0, 0.0),
            QuadCurveTo(1.0, -1.0, 0.0, 0.0),
        ]

    def test_offset_applies_to_control_points(self) -> None:
        """Test that control points are offset like end points."""
        path = Path()
        trace_contour([_on(0, 0), _off(64, 128), _on(128, 0)], 5, 7, path)
        assert path.segments[1] == QuadCurveTo(6.0, 5.0, 7.0, 7.0)

    def test_appends_to_existing_path(self) -> None:
        """Test that each contour starts its own subpath."""
        path = Path()
        trace_contour([_on(0, 0), _on(64, 0)], 0, 0, path)
        trace_contour([_on(0, 0), _on(64, 0)], 0, 0, path)
        assert len(path.subpaths()) == 2
