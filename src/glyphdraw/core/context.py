"""PDF graphics backend.

PdfGraphicContext implements GraphicsBackend for page-based document
writers with a fixed 72 units-per-inch coordinate system. Generic state
handling is delegated to a StateStack; every setter that the writer caches
is mirrored into the writer as it happens.

Transforms (scale, rotate, translate) must be placed between save() and
restore(), otherwise the produced document is invalid. Text operations
require a font set with set_font() beforehand.
"""

import math
from collections.abc import Callable
from io import BytesIO
from typing import TYPE_CHECKING

from fontTools.misc.transform import Transform
from PIL import Image

from glyphdraw.core.dispatch import STROKE, PathDispatcher, fill_stroke_style, fill_style
from glyphdraw.core.layout import layout_string
from glyphdraw.core.numeric import alpha_fraction, color_to_channels
from glyphdraw.core.stack import StateStack
from glyphdraw.domain.path import Path, rect
from glyphdraw.domain.state import (
    WHITE,
    Color,
    DrawingState,
    FillRule,
    FontData,
    FontStyle,
    LineCap,
    LineJoin,
    font_file_name,
)
from glyphdraw.io.document import DocumentWriter
from glyphdraw.utils.logging import RenderLogger, RenderStats

if TYPE_CHECKING:
    from glyphdraw.io.font import FontBackend

# Resolution of the document coordinate system.
DPI = 72

# Fallback ascent ratio for fonts without a descriptor (standard fonts).
DEFAULT_ASCENT_RATIO = 0.81

IMAGE_TYPE = "PNG"


def glyph_scale(font_size: float, dpi: int) -> float:
    """Glyph scale passed to the font backend for a font size and DPI.

    Examples:
        >>> glyph_scale(12, 72)
        256.0
    """
    return font_size * float(dpi) * (64.0 / 72.0) / 3.0


class PdfGraphicContext:
    """Graphics backend drawing into a DocumentWriter.

    Example:
        doc = new_pdf("P", "pt", "A4")
        gc = PdfGraphicContext(doc, font=TrueTypeFont.from_path(font_path))
        gc.set_fill_color(Color.from_hex("#202020"))
        gc.set_font_size(24)
        gc.fill_string_at("Hello", 40, 80)
        doc.output(Path("hello.pdf"))
    """

    def __init__(
        self,
        document: DocumentWriter,
        font: "FontBackend | None" = None,
        dpi: int = DPI,
        image_names: Callable[[], str] | None = None,
        render_logger: RenderLogger | None = None,
    ) -> None:
        """Initialize the context.

        Args:
            document: Writer receiving every drawing command
            font: Glyph outline source for text operations
            dpi: Resolution used to derive the glyph scale
            image_names: Generator of unique image resource names
                (a per-context counter if None)
            render_logger: Logger for rendering events
        """
        self._document = document
        self._stack = StateStack()
        self._stack.current.font = font
        self._dispatcher = PathDispatcher(document)
        self._image_count = 0
        self._image_names = image_names or self._next_image_name
        self._logger = render_logger or RenderLogger()
        self._dpi = dpi
        self.set_dpi(dpi)

    @property
    def current(self) -> DrawingState:
        """The current DrawingState."""
        return self._stack.current

    @property
    def document(self) -> DocumentWriter:
        return self._document

    @property
    def stats(self) -> RenderStats:
        """Render statistics collected so far."""
        return self._logger.stats

    def _next_image_name(self) -> str:
        name = str(self._image_count)
        self._image_count += 1
        return name

    # DPI and font scale

    def _recalc(self) -> None:
        self._stack.current.scale = glyph_scale(self._stack.current.font_size, self._dpi)

    def set_dpi(self, dpi: int) -> None:
        """Set the DPI which influences the glyph scale."""
        self._dpi = dpi
        self._recalc()

    def get_dpi(self) -> int:
        """Return the DPI which influences the glyph scale.

        The document itself always uses 72 units per inch.
        """
        return self._dpi

    def set_font_size(self, size: float) -> None:
        """Set the font size in points and recompute the glyph scale."""
        self._stack.set_font_size(size)
        self._recalc()

    def set_font(self, font: "FontBackend") -> None:
        """Set the glyph outline source used by text operations."""
        self._stack.current.font = font

    def set_font_data(self, font_data: FontData) -> None:
        """Register and select a font file in the document writer.

        The writer looks the font up by its TrueType file name (see
        ``font_file_name``) and selects it at its current font size.
        """
        self._stack.current.font_data = font_data
        style = ""
        if font_data.style & FontStyle.BOLD:
            style += "B"
        if font_data.style & FontStyle.ITALIC:
            style += "I"
        size, _ = self._document.get_font_size()
        self._document.add_font(font_data.name, style, font_file_name(font_data))
        self._document.set_font(font_data.name, style, size)

    # Paint setters mirrored into the document

    def set_stroke_color(self, color: Color) -> None:
        self._stack.set_stroke_color(color)
        self._document.set_draw_color(*color_to_channels(color))

    def set_fill_color(self, color: Color) -> None:
        """Set the fill color, also used as the text color."""
        self._stack.set_fill_color(color)
        channels = color_to_channels(color)
        self._document.set_fill_color(*channels)
        self._document.set_text_color(*channels)

    def set_fill_rule(self, rule: FillRule) -> None:
        self._stack.set_fill_rule(rule)

    def set_line_width(self, width: float) -> None:
        self._stack.set_line_width(width)
        self._document.set_line_width(width)

    def set_line_cap(self, cap: LineCap) -> None:
        self._stack.set_line_cap(cap)
        self._document.set_line_cap_style(cap.value)

    def set_line_join(self, join: LineJoin) -> None:
        self._stack.set_line_join(join)
        self._document.set_line_join_style(join.value)

    def set_line_dash(self, dash: list[float], offset: float) -> None:
        """Pass a dash pattern through to the document writer."""
        self._stack.set_line_dash(dash, offset)
        self._document.set_dash_pattern(list(dash), offset)

    # Path building

    def begin_path(self) -> None:
        self._stack.begin_path()

    def move_to(self, x: float, y: float) -> None:
        self._stack.move_to(x, y)

    def line_to(self, x: float, y: float) -> None:
        self._stack.line_to(x, y)

    def quad_curve_to(self, cx: float, cy: float, x: float, y: float) -> None:
        self._stack.quad_curve_to(cx, cy, x, y)

    def cubic_curve_to(
        self, c1x: float, c1y: float, c2x: float, c2y: float, x: float, y: float
    ) -> None:
        self._stack.cubic_curve_to(c1x, c1y, c2x, c2y, x, y)

    def arc_to(
        self, cx: float, cy: float, rx: float, ry: float, start_angle: float, angle: float
    ) -> None:
        self._stack.arc_to(cx, cy, rx, ry, start_angle, angle)

    def close(self) -> None:
        self._stack.close()

    def is_empty(self) -> bool:
        return self._stack.is_empty()

    def last_point(self) -> tuple[float, float]:
        return self._stack.last_point()

    # Transforms

    def get_matrix_transform(self) -> Transform:
        return self._stack.get_matrix_transform()

    def set_matrix_transform(self, transform: Transform) -> None:
        """Replace the local transform (the document's transform is unaffected)."""
        self._stack.set_matrix_transform(transform)

    def compose_matrix_transform(self, transform: Transform) -> None:
        """Compose into the local transform (the document's transform is unaffected)."""
        self._stack.compose_matrix_transform(transform)

    def scale(self, sx: float, sy: float) -> None:
        """Scale the following drawings by sx and sy.

        Must be placed between save() and restore().
        """
        self._stack.scale(sx, sy)
        self._document.transform_scale(sx * 100, sy * 100, 0, 0)

    def rotate(self, angle: float) -> None:
        """Rotate the following drawings.

        The angle is in radians, measured clockwise from the 3 o'clock
        position. Must be placed between save() and restore().
        """
        self._stack.rotate(angle)
        self._document.transform_rotate(-angle * 180 / math.pi, 0, 0)

    def translate(self, tx: float, ty: float) -> None:
        """Move the following drawings by (tx, ty).

        Must be placed between save() and restore().
        """
        self._stack.translate(tx, ty)
        self._document.transform_translate(tx, ty)

    # Scopes

    def save(self) -> None:
        """Save the current state and open a transform block."""
        self._stack.save()
        self._document.transform_begin()

    def restore(self) -> None:
        """Close the transform block and restore the saved state.

        The document does not restore its cached settings on its own, so
        font size, line width, colors, fill rule, cap and join are applied
        again. The font, font data, dash pattern and in-progress path of
        the inner scope are kept rather than restored.
        """
        self._document.transform_end()
        inner = self._stack.restore()
        c = self._stack.current
        if inner is not None:
            c.font = inner.font
            c.font_data = inner.font_data
            c.dash = inner.dash
            c.dash_offset = inner.dash_offset
            c.path = inner.path
        self.set_font_size(c.font_size)
        self.set_line_width(c.line_width)
        self.set_stroke_color(c.stroke_color)
        self.set_fill_color(c.fill_color)
        self.set_fill_rule(c.fill_rule)
        self.set_line_cap(c.cap)
        self.set_line_join(c.join)

    # Painting

    def _take_paths(self, extra: tuple[Path, ...]) -> list[Path]:
        """Return the extra paths plus the current path, resetting it."""
        paths = [*extra, self._stack.current.path]
        self._stack.begin_path()
        return paths

    def _draw(self, style: str, alpha: float, paths: list[Path]) -> None:
        self._dispatcher.draw(style, alpha, paths)
        self._logger.log_draw(style, alpha)

    def stroke(self, *paths: Path) -> None:
        """Stroke the paths and the current path with the stroke color."""
        alpha = alpha_fraction(self._stack.current.stroke_color)
        self._draw(STROKE, alpha, self._take_paths(paths))

    def fill(self, *paths: Path) -> None:
        """Fill the paths and the current path with the fill color."""
        state = self._stack.current
        self._draw(fill_style(state.fill_rule), alpha_fraction(state.fill_color), self._take_paths(paths))

    def fill_stroke(self, *paths: Path) -> None:
        """Fill then stroke the paths and the current path.

        When fill and stroke alphas match one combined operation is
        issued; otherwise the fill is painted first and the stroke second,
        each at its own alpha.
        """
        state = self._stack.current
        alpha_stroke = alpha_fraction(state.stroke_color)
        alpha_fill = alpha_fraction(state.fill_color)
        all_paths = self._take_paths(paths)
        if alpha_stroke == alpha_fill:
            self._draw(fill_stroke_style(state.fill_rule), alpha_fill, all_paths)
        else:
            self._draw(fill_style(state.fill_rule), alpha_fill, all_paths)
            self._draw(STROKE, alpha_stroke, all_paths)

    # Text

    def get_string_bounds(self, text: str) -> tuple[float, float, float, float]:
        """Return the approximate bounds (left, top, right, bottom) of a string.

        The left edge of the first character's em square and the baseline
        intersect at (0, 0), so top may well be negative.
        """
        _, height = self._document.get_font_size()
        desc = self._document.get_font_descriptor()
        if desc.ascent == 0:
            top = DEFAULT_ASCENT_RATIO * height
        else:
            top = -float(desc.ascent) * height / float(desc.ascent - desc.descent)
        return 0.0, top, self._document.get_string_width(text), top + height

    def create_string_path(self, text: str, x: float, y: float) -> float:
        """Add the outlines of a string at (x, y) to the current path.

        Returns:
            The advance width of the string. If a glyph fails to load the
            layout stops there, the failure is logged and ``x_start - x``
            at that point is returned.
        """
        state = self._stack.current
        if state.font is None:
            self._logger.log_missing_font(text)
            return 0.0

        result = layout_string(text, x, y, state.font, int(state.scale), state.path)
        if result.error is not None:
            self._logger.log_glyph_error(text, result.error, result.glyph_count)
        else:
            self._logger.log_layout(text, result.glyph_count, result.advance)
        return result.advance

    def fill_string(self, text: str) -> float:
        """Draw a string at (0, 0)."""
        return self.fill_string_at(text, 0, 0)

    def fill_string_at(self, text: str, x: float, y: float) -> float:
        """Draw a string at (x, y) and return its advance width."""
        width = self.create_string_path(text, x, y)
        self.fill()
        return width

    def stroke_string(self, text: str) -> float:
        """Draw a string at (0, 0); text outlines are filled, not stroked."""
        return self.stroke_string_at(text, 0, 0)

    def stroke_string_at(self, text: str, x: float, y: float) -> float:
        """Draw a string at (x, y); text outlines are filled, not stroked."""
        return self.fill_string_at(text, x, y)

    # Images and clearing

    def draw_image(self, image: Image.Image) -> None:
        """Draw a Pillow image at its own size, encoded as PNG."""
        name = self._image_names()
        buffer = BytesIO()
        image.save(buffer, format=IMAGE_TYPE)
        self._document.register_image(name, IMAGE_TYPE, buffer.getvalue())
        width, height = image.size
        self._document.image(name, 0.0, 0.0, float(width), float(height), IMAGE_TYPE)
        self._logger.log_image(name, width, height)

    def clear(self) -> None:
        """Paint the whole page white."""
        width, height = self._document.get_page_size()
        self._clear_rect(0, 0, width, height)

    def clear_rect(self, x1: int, y1: int, x2: int, y2: int) -> None:
        """Paint the given area white."""
        self._clear_rect(float(x1), float(y1), float(x2), float(y2))

    def _clear_rect(self, x1: float, y1: float, x2: float, y2: float) -> None:
        fill_color = self._stack.current.fill_color
        x, y = self._document.get_xy()
        self.set_fill_color(WHITE)
        rect(self._stack.current.path, x1, y1, x2, y2)
        self.fill()
        self.set_fill_color(fill_color)
        self._document.set_xy(x, y)
