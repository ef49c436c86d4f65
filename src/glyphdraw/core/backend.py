"""Capability interface of a graphics backend.

GraphicsBackend lists the drawing operations a backend offers to drawing
code. Backends implement it directly and delegate their generic
save/restore and path bookkeeping to a StateStack.
"""

from typing import TYPE_CHECKING, Protocol

from fontTools.misc.transform import Transform
from PIL import Image

from glyphdraw.domain.path import Path
from glyphdraw.domain.state import Color, FillRule, FontData, LineCap, LineJoin

if TYPE_CHECKING:
    from glyphdraw.io.font import FontBackend


class GraphicsBackend(Protocol):
    """Operations shared by every graphics backend."""

    # Path building
    def begin_path(self) -> None: ...

    def move_to(self, x: float, y: float) -> None: ...

    def line_to(self, x: float, y: float) -> None: ...

    def quad_curve_to(self, cx: float, cy: float, x: float, y: float) -> None: ...

    def cubic_curve_to(
        self, c1x: float, c1y: float, c2x: float, c2y: float, x: float, y: float
    ) -> None: ...

    def arc_to(
        self, cx: float, cy: float, rx: float, ry: float, start_angle: float, angle: float
    ) -> None: ...

    def close(self) -> None: ...

    def is_empty(self) -> bool: ...

    def last_point(self) -> tuple[float, float]: ...

    # Transforms and scopes
    def get_matrix_transform(self) -> Transform: ...

    def set_matrix_transform(self, transform: Transform) -> None: ...

    def compose_matrix_transform(self, transform: Transform) -> None: ...

    def scale(self, sx: float, sy: float) -> None: ...

    def rotate(self, angle: float) -> None: ...

    def translate(self, tx: float, ty: float) -> None: ...

    def save(self) -> None: ...

    def restore(self) -> None: ...

    # Paint state
    def set_stroke_color(self, color: Color) -> None: ...

    def set_fill_color(self, color: Color) -> None: ...

    def set_fill_rule(self, rule: FillRule) -> None: ...

    def set_line_width(self, width: float) -> None: ...

    def set_line_cap(self, cap: LineCap) -> None: ...

    def set_line_join(self, join: LineJoin) -> None: ...

    def set_line_dash(self, dash: list[float], offset: float) -> None: ...

    # Fonts and text
    def set_font(self, font: "FontBackend") -> None: ...

    def set_font_data(self, font_data: FontData) -> None: ...

    def set_font_size(self, size: float) -> None: ...

    def set_dpi(self, dpi: int) -> None: ...

    def get_dpi(self) -> int: ...

    def get_string_bounds(self, text: str) -> tuple[float, float, float, float]: ...

    def create_string_path(self, text: str, x: float, y: float) -> float: ...

    def fill_string(self, text: str) -> float: ...

    def fill_string_at(self, text: str, x: float, y: float) -> float: ...

    def stroke_string(self, text: str) -> float: ...

    def stroke_string_at(self, text: str, x: float, y: float) -> float: ...

    # Painting
    def stroke(self, *paths: Path) -> None: ...

    def fill(self, *paths: Path) -> None: ...

    def fill_stroke(self, *paths: Path) -> None: ...

    def draw_image(self, image: Image.Image) -> None: ...

    def clear(self) -> None: ...

    def clear_rect(self, x1: int, y1: int, x2: int, y2: int) -> None: ...
