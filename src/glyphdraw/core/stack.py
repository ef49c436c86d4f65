"""Save/restore bookkeeping for graphic contexts.

StateStack holds the current DrawingState and a stack of saved snapshots.
It owns path building and transform composition but never talks to a
document writer, so any backend can delegate its generic state handling
to it and add its own side effects around each call.
"""

from fontTools.misc.transform import Transform

from glyphdraw.domain.path import Path
from glyphdraw.domain.state import Color, DrawingState, FillRule, LineCap, LineJoin


class StateStack:
    """Nested drawing states with save/restore semantics.

    Example:
        stack = StateStack()
        stack.save()
        stack.translate(10, 0)
        stack.restore()  # transform is back to identity
    """

    def __init__(self, state: DrawingState | None = None) -> None:
        """Initialize with a current state.

        Args:
            state: Initial state (a default DrawingState if None)
        """
        self.current = state if state is not None else DrawingState()
        self._saved: list[DrawingState] = []

    @property
    def depth(self) -> int:
        """Number of saved states."""
        return len(self._saved)

    def save(self) -> None:
        """Push a snapshot of the current state.

        The current state keeps working on a copy of the in-progress path.
        """
        self._saved.append(self.current)
        self.current = self.current.copy()

    def restore(self) -> DrawingState | None:
        """Pop the most recently saved state.

        Returns:
            The discarded inner state, or None when nothing was saved (in
            which case the current state is left untouched)
        """
        if not self._saved:
            return None
        inner = self.current
        self.current = self._saved.pop()
        return inner

    # Transforms

    def get_matrix_transform(self) -> Transform:
        """Return the current transform."""
        return self.current.transform

    def set_matrix_transform(self, transform: Transform) -> None:
        """Replace the current transform."""
        self.current.transform = transform

    def compose_matrix_transform(self, transform: Transform) -> None:
        """Apply ``transform`` before the current transform."""
        self.current.transform = self.current.transform.transform(transform)

    def scale(self, sx: float, sy: float) -> None:
        self.current.transform = self.current.transform.scale(sx, sy)

    def rotate(self, angle: float) -> None:
        """Rotate by ``angle`` radians."""
        self.current.transform = self.current.transform.rotate(angle)

    def translate(self, tx: float, ty: float) -> None:
        self.current.transform = self.current.transform.translate(tx, ty)

    # Path building

    def begin_path(self) -> None:
        """Discard the in-progress path."""
        self.current.path = Path()

    def move_to(self, x: float, y: float) -> None:
        self.current.path.move_to(x, y)

    def line_to(self, x: float, y: float) -> None:
        self.current.path.line_to(x, y)

    def quad_curve_to(self, cx: float, cy: float, x: float, y: float) -> None:
        self.current.path.quad_curve_to(cx, cy, x, y)

    def cubic_curve_to(
        self,
        c1x: float,
        c1y: float,
        c2x: float,
        c2y: float,
        x: float,
        y: float,
    ) -> None:
        self.current.path.cubic_curve_to(c1x, c1y, c2x, c2y, x, y)

    def arc_to(
        self,
        cx: float,
        cy: float,
        rx: float,
        ry: float,
        start_angle: float,
        angle: float,
    ) -> None:
        self.current.path.arc_to(cx, cy, rx, ry, start_angle, angle)

    def close(self) -> None:
        self.current.path.close()

    def is_empty(self) -> bool:
        return self.current.path.is_empty()

    def last_point(self) -> tuple[float, float]:
        return self.current.path.last_point()

    # Paint setters

    def set_stroke_color(self, color: Color) -> None:
        self.current.stroke_color = color

    def set_fill_color(self, color: Color) -> None:
        self.current.fill_color = color

    def set_fill_rule(self, rule: FillRule) -> None:
        self.current.fill_rule = rule

    def set_line_width(self, width: float) -> None:
        self.current.line_width = width

    def set_line_cap(self, cap: LineCap) -> None:
        self.current.cap = cap

    def set_line_join(self, join: LineJoin) -> None:
        self.current.join = join

    def set_line_dash(self, dash: list[float], offset: float) -> None:
        self.current.dash = list(dash)
        self.current.dash_offset = offset

    def set_font_size(self, size: float) -> None:
        self.current.font_size = size
