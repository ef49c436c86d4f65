"""Document writer contract and an in-memory recording writer.

The rendering core never serializes output itself. It drives a
DocumentWriter: a page-based writer with a fixed 72 units-per-inch
coordinate system in which positive Y goes downward. The writer keeps
stateful caches (alpha and blend mode, font, colors) that the core relies
on, so calls must reach it in exactly the order they are issued.
"""

from dataclasses import dataclass, field
from typing import Any, Protocol

BLEND_NORMAL = "Normal"


@dataclass(frozen=True)
class FontDescriptor:
    """Vertical metrics of the writer's current font.

    Attributes:
        ascent: Ascender height in font units (0 when undefined)
        descent: Descender depth in font units (usually negative)
    """

    ascent: int = 0
    descent: int = 0


class DocumentWriter(Protocol):
    """Commands accepted by a page-based document writer."""

    # Path construction and painting
    def move_to(self, x: float, y: float) -> None: ...

    def line_to(self, x: float, y: float) -> None: ...

    def curve_to(self, cx: float, cy: float, x: float, y: float) -> None:
        """Quadratic curve from the current point."""
        ...

    def curve_bezier_cubic_to(
        self, c1x: float, c1y: float, c2x: float, c2y: float, x: float, y: float
    ) -> None: ...

    def close_path(self) -> None: ...

    def draw_path(self, style: str) -> None:
        """Paint the pending path.

        Args:
            style: "D" stroke, "F" fill, "FD" fill and stroke; a trailing
                "*" selects the even-odd rule
        """
        ...

    # Colors and line style
    def set_draw_color(self, r: int, g: int, b: int) -> None: ...

    def set_fill_color(self, r: int, g: int, b: int) -> None: ...

    def set_text_color(self, r: int, g: int, b: int) -> None: ...

    def set_line_width(self, width: float) -> None: ...

    def set_line_cap_style(self, style: str) -> None: ...

    def set_line_join_style(self, style: str) -> None: ...

    def set_dash_pattern(self, dashes: list[float], offset: float) -> None: ...

    # Transform blocks
    def transform_begin(self) -> None: ...

    def transform_end(self) -> None: ...

    def transform_scale(self, sx_percent: float, sy_percent: float, x: float, y: float) -> None: ...

    def transform_rotate(self, degrees: float, x: float, y: float) -> None: ...

    def transform_translate(self, tx: float, ty: float) -> None: ...

    # Transparency
    def get_alpha(self) -> tuple[float, str]: ...

    def set_alpha(self, alpha: float, blend_mode: str) -> None: ...

    # Images
    def register_image(self, name: str, image_type: str, data: bytes) -> None: ...

    def image(self, name: str, x: float, y: float, w: float, h: float, image_type: str) -> None: ...

    # Fonts and text metrics
    def get_font_size(self) -> tuple[float, float]:
        """Return the font size in points and in user units."""
        ...

    def get_font_descriptor(self) -> FontDescriptor: ...

    def add_font(self, family: str, style: str, file_name: str) -> None: ...

    def set_font(self, family: str, style: str, size: float) -> None: ...

    def get_string_width(self, text: str) -> float: ...

    # Page geometry
    def get_page_size(self) -> tuple[float, float]: ...

    def get_xy(self) -> tuple[float, float]: ...

    def set_xy(self, x: float, y: float) -> None: ...


@dataclass
class RecordingDocument:
    """A DocumentWriter that records every call it receives.

    Useful to inspect the exact command stream produced by a graphic
    context. Alpha, font size and position behave like a real writer's
    caches; transform depth is tracked to detect unbalanced blocks.

    Example:
        doc = RecordingDocument()
        gc = PdfGraphicContext(doc)
        gc.fill()
        print(doc.names())
    """

    page_size: tuple[float, float] = (595.28, 841.89)
    font_size: float = 12.0
    font_descriptor: FontDescriptor = field(default_factory=FontDescriptor)
    char_width: float = 0.5
    calls: list[tuple[str, tuple[Any, ...]]] = field(default_factory=list)
    alpha: float = 1.0
    blend_mode: str = BLEND_NORMAL
    transform_depth: int = 0
    images: dict[str, bytes] = field(default_factory=dict)
    _xy: tuple[float, float] = (0.0, 0.0)

    def _record(self, name: str, *args: Any) -> None:
        self.calls.append((name, args))

    def names(self) -> list[str]:
        """Return the recorded call names in order."""
        return [name for name, _ in self.calls]

    def calls_to(self, name: str) -> list[tuple[Any, ...]]:
        """Return the argument tuples of every call to ``name``."""
        return [args for call, args in self.calls if call == name]

    def clear(self) -> None:
        """Forget recorded calls, keeping the cached state."""
        self.calls.clear()

    @property
    def balanced(self) -> bool:
        """True when every transform block has been closed."""
        return self.transform_depth == 0

    def move_to(self, x: float, y: float) -> None:
        self._record("move_to", x, y)

    def line_to(self, x: float, y: float) -> None:
        self._record("line_to", x, y)

    def curve_to(self, cx: float, cy: float, x: float, y: float) -> None:
        self._record("curve_to", cx, cy, x, y)

    def curve_bezier_cubic_to(
        self, c1x: float, c1y: float, c2x: float, c2y: float, x: float, y: float
    ) -> None:
        self._record("curve_bezier_cubic_to", c1x, c1y, c2x, c2y, x, y)

    def close_path(self) -> None:
        self._record("close_path")

    def draw_path(self, style: str) -> None:
        self._record("draw_path", style)

    def set_draw_color(self, r: int, g: int, b: int) -> None:
        self._record("set_draw_color", r, g, b)

    def set_fill_color(self, r: int, g: int, b: int) -> None:
        self._record("set_fill_color", r, g, b)

    def set_text_color(self, r: int, g: int, b: int) -> None:
        self._record("set_text_color", r, g, b)

    def set_line_width(self, width: float) -> None:
        self._record("set_line_width", width)

    def set_line_cap_style(self, style: str) -> None:
        self._record("set_line_cap_style", style)

    def set_line_join_style(self, style: str) -> None:
        self._record("set_line_join_style", style)

    def set_dash_pattern(self, dashes: list[float], offset: float) -> None:
        self._record("set_dash_pattern", list(dashes), offset)

    def transform_begin(self) -> None:
        self.transform_depth += 1
        self._record("transform_begin")

    def transform_end(self) -> None:
        self.transform_depth -= 1
        self._record("transform_end")

    def transform_scale(self, sx_percent: float, sy_percent: float, x: float, y: float) -> None:
        self._record("transform_scale", sx_percent, sy_percent, x, y)

    def transform_rotate(self, degrees: float, x: float, y: float) -> None:
        self._record("transform_rotate", degrees, x, y)

    def transform_translate(self, tx: float, ty: float) -> None:
        self._record("transform_translate", tx, ty)

    def get_alpha(self) -> tuple[float, str]:
        return self.alpha, self.blend_mode

    def set_alpha(self, alpha: float, blend_mode: str) -> None:
        self.alpha = alpha
        self.blend_mode = blend_mode
        self._record("set_alpha", alpha, blend_mode)

    def register_image(self, name: str, image_type: str, data: bytes) -> None:
        self.images[name] = data
        self._record("register_image", name, image_type)

    def image(self, name: str, x: float, y: float, w: float, h: float, image_type: str) -> None:
        self._record("image", name, x, y, w, h, image_type)

    def get_font_size(self) -> tuple[float, float]:
        return self.font_size, self.font_size

    def get_font_descriptor(self) -> FontDescriptor:
        return self.font_descriptor

    def add_font(self, family: str, style: str, file_name: str) -> None:
        self._record("add_font", family, style, file_name)

    def set_font(self, family: str, style: str, size: float) -> None:
        self.font_size = size
        self._record("set_font", family, style, size)

    def get_string_width(self, text: str) -> float:
        return len(text) * self.char_width * self.font_size

    def get_page_size(self) -> tuple[float, float]:
        return self.page_size

    def get_xy(self) -> tuple[float, float]:
        return self._xy

    def set_xy(self, x: float, y: float) -> None:
        self._xy = (x, y)
        self._record("set_xy", x, y)
