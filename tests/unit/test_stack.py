"""Unit tests for StateStack."""

import math

import pytest
from fontTools.misc.transform import Identity, Transform

from glyphdraw.core.stack import StateStack
from glyphdraw.domain import BLACK, Color, DrawingState, FillRule, LineCap, LineJoin


class TestSaveRestore:
    """Tests for save and restore."""

    def test_initial_state(self) -> None:
        """Test a new stack holds a default state."""
        stack = StateStack()
        assert stack.depth == 0
        assert stack.current.stroke_color == BLACK

    def test_custom_initial_state(self) -> None:
        """Test a stack built around an existing state."""
        state = DrawingState(line_width=3.0)
        assert StateStack(state).current is state

    def test_restore_undoes_changes(self) -> None:
        """Test that restore brings back every saved setting."""
        stack = StateStack()
        stack.save()
        stack.set_stroke_color(Color(1, 2, 3))
        stack.set_fill_rule(FillRule.NON_ZERO_WINDING)
        stack.set_line_width(4.0)
        stack.set_line_cap(LineCap.SQUARE)
        stack.set_line_join(LineJoin.MITER)
        stack.set_font_size(30)
        stack.translate(5, 5)
        stack.restore()

        state = stack.current
        assert state.stroke_color == BLACK
        assert state.fill_rule == FillRule.EVEN_ODD
        assert state.line_width == 1.0
        assert state.cap == LineCap.ROUND
        assert state.join == LineJoin.ROUND
        assert state.font_size == 10.0
        assert state.transform == Identity

    def test_restore_returns_inner_state(self) -> None:
        """Test that restore hands back the discarded state."""
        stack = StateStack()
        stack.save()
        inner = stack.current
        assert stack.restore() is inner
        assert stack.depth == 0

    def test_restore_without_save_is_noop(self) -> None:
        """Test that an unmatched restore leaves the state alone."""
        stack = StateStack()
        stack.set_line_width(7.0)
        current = stack.current

        assert stack.restore() is None
        assert stack.current is current
        assert stack.current.line_width == 7.0

    def test_nested_scopes(self) -> None:
        """Test that scopes unwind in reverse order."""
        stack = StateStack()
        for width in (2.0, 3.0, 4.0):
            stack.save()
            stack.set_line_width(width)
        assert stack.depth == 3

        stack.restore()
        assert stack.current.line_width == 3.0
        stack.restore()
        stack.restore()
        assert stack.current.line_width == 1.0

    def test_saved_path_is_a_snapshot(self) -> None:
        """Test that drawing after save does not alter the saved path."""
        stack = StateStack()
        stack.move_to(0, 0)
        stack.save()
        stack.line_to(5, 5)
        stack.restore()
        assert len(stack.current.path) == 1


class TestTransforms:
    """Tests for transform composition."""

    def test_translate_then_scale(self) -> None:
        """Test that transforms compose like fontTools transforms."""
        stack = StateStack()
        stack.translate(10, 20)
        stack.scale(2, 3)
        assert stack.get_matrix_transform().transformPoint((1, 1)) == (12, 23)

    def test_rotate(self) -> None:
        """Test a quarter-turn rotation."""
        stack = StateStack()
        stack.rotate(math.pi / 2)
        x, y = stack.get_matrix_transform().transformPoint((1, 0))
        assert (x, y) == pytest.approx((0, 1))

    def test_set_and_compose(self) -> None:
        """Test replacing and composing the transform."""
        stack = StateStack()
        stack.set_matrix_transform(Transform().translate(1, 1))
        stack.compose_matrix_transform(Transform().scale(2))
        assert stack.get_matrix_transform().transformPoint((1, 1)) == (3, 3)


class TestPathBuilding:
    """Tests for path operations on the current state."""

    def test_path_operations(self) -> None:
        """Test building and resetting the current path."""
        stack = StateStack()
        assert stack.is_empty()

        stack.move_to(1, 1)
        stack.line_to(2, 2)
        stack.quad_curve_to(3, 3, 4, 4)
        stack.cubic_curve_to(5, 5, 6, 6, 7, 7)
        assert stack.last_point() == (7, 7)

        stack.close()
        assert stack.last_point() == (1, 1)

        stack.begin_path()
        assert stack.is_empty()

    def test_arc_to(self) -> None:
        """Test that arcs move the pen to their end point."""
        stack = StateStack()
        stack.arc_to(0, 0, 10, 10, 0, math.pi)
        assert stack.last_point() == pytest.approx((-10, 0))

    def test_line_dash_is_copied(self) -> None:
        """Test that the dash list is not shared with the caller."""
        stack = StateStack()
        dash = [2.0, 1.0]
        stack.set_line_dash(dash, 0.5)
        dash.append(9.0)
        assert stack.current.dash == [2.0, 1.0]
        assert stack.current.dash_offset == 0.5
