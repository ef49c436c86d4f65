"""DocumentWriter implementation on top of fpdf2.

Coordinates arrive in user units with the origin at the top-left of the
page and Y growing downward; they are converted to PDF space as
``(x * k, (h - y) * k)``. Path operators are buffered until ``draw_path``
so that the line style and transparency of the paint operation can be
wrapped around the whole path in one fpdf2 local context.
"""

import math
from io import BytesIO
from pathlib import Path

from fpdf import FPDF

from glyphdraw.exceptions import DocumentSaveError
from glyphdraw.io.document import BLEND_NORMAL, FontDescriptor

# draw_path style tokens to PDF painting operators.
PAINT_OPERATORS = {
    "F": "f",
    "F*": "f*",
    "FD": "B",
    "DF": "B",
    "FD*": "B*",
    "DF*": "B*",
}


class FpdfDocument:
    """Drive an fpdf2 FPDF document through the DocumentWriter contract.

    Example:
        doc = new_pdf("P", "pt", "A4")
        gc = PdfGraphicContext(doc)
        ...
        doc.output(Path("out.pdf"))
    """

    def __init__(self, pdf: FPDF, font_folder: Path | None = None) -> None:
        """Wrap an existing FPDF document.

        Args:
            pdf: The fpdf2 document receiving the commands
            font_folder: Folder in which font file names are resolved
        """
        self._pdf = pdf
        self._font_folder = font_folder
        self._path_ops: list[str] = []
        self._current = (0.0, 0.0)
        self._start = (0.0, 0.0)
        self._alpha = 1.0
        self._blend_mode = BLEND_NORMAL
        self._cap = "round"
        self._join = "round"
        self._images: dict[str, bytes] = {}

    @property
    def pdf(self) -> FPDF:
        """Return the wrapped fpdf2 document."""
        return self._pdf

    def _point(self, x: float, y: float) -> tuple[float, float]:
        return x * self._pdf.k, (self._pdf.h - y) * self._pdf.k

    def _out(self, operator: str) -> None:
        self._pdf._out(operator)  # noqa: SLF001

    # Path construction and painting

    def move_to(self, x: float, y: float) -> None:
        px, py = self._point(x, y)
        self._path_ops.append(f"{px:.2f} {py:.2f} m")
        self._current = self._start = (x, y)

    def line_to(self, x: float, y: float) -> None:
        px, py = self._point(x, y)
        self._path_ops.append(f"{px:.2f} {py:.2f} l")
        self._current = (x, y)

    def curve_to(self, cx: float, cy: float, x: float, y: float) -> None:
        """Quadratic curve, written as the equivalent cubic."""
        x0, y0 = self._current
        c1x = x0 + 2.0 / 3.0 * (cx - x0)
        c1y = y0 + 2.0 / 3.0 * (cy - y0)
        c2x = x + 2.0 / 3.0 * (cx - x)
        c2y = y + 2.0 / 3.0 * (cy - y)
        self.curve_bezier_cubic_to(c1x, c1y, c2x, c2y, x, y)

    def curve_bezier_cubic_to(
        self, c1x: float, c1y: float, c2x: float, c2y: float, x: float, y: float
    ) -> None:
        p1 = self._point(c1x, c1y)
        p2 = self._point(c2x, c2y)
        p3 = self._point(x, y)
        self._path_ops.append(
            f"{p1[0]:.5f} {p1[1]:.5f} {p2[0]:.5f} {p2[1]:.5f} {p3[0]:.5f} {p3[1]:.5f} c"
        )
        self._current = (x, y)

    def close_path(self) -> None:
        self._path_ops.append("h")
        self._current = self._start

    def draw_path(self, style: str) -> None:
        """Paint the buffered path with the current line style and alpha."""
        operator = PAINT_OPERATORS.get(style.upper(), "S")
        style_kwargs: dict[str, object] = {
            "stroke_cap_style": self._cap,
            "stroke_join_style": self._join,
        }
        if self._alpha != 1.0:
            style_kwargs["fill_opacity"] = self._alpha
            style_kwargs["stroke_opacity"] = self._alpha
        if self._blend_mode != BLEND_NORMAL:
            style_kwargs["blend_mode"] = self._blend_mode

        with self._pdf.local_context(**style_kwargs):
            for op in self._path_ops:
                self._out(op)
            self._out(operator)
        self._path_ops = []

    # Colors and line style

    def set_draw_color(self, r: int, g: int, b: int) -> None:
        self._pdf.set_draw_color(r, g, b)

    def set_fill_color(self, r: int, g: int, b: int) -> None:
        self._pdf.set_fill_color(r, g, b)

    def set_text_color(self, r: int, g: int, b: int) -> None:
        self._pdf.set_text_color(r, g, b)

    def set_line_width(self, width: float) -> None:
        self._pdf.set_line_width(width)

    def set_line_cap_style(self, style: str) -> None:
        self._cap = style

    def set_line_join_style(self, style: str) -> None:
        self._join = style

    def set_dash_pattern(self, dashes: list[float], offset: float) -> None:
        """Write the dash operator; an empty list selects a solid line.

        Written on every call: transform blocks restore the PDF state
        without updating fpdf2's own dash cache.
        """
        k = self._pdf.k
        array = " ".join(f"{d * k:.3f}" for d in dashes)
        self._out(f"[{array}] {offset * k:.3f} d")

    # Transform blocks

    def transform_begin(self) -> None:
        self._out("q")

    def transform_end(self) -> None:
        self._out("Q")

    def _transform(self, a: float, b: float, c: float, d: float, e: float, f: float) -> None:
        self._out(f"{a:.5f} {b:.5f} {c:.5f} {d:.5f} {e:.5f} {f:.5f} cm")

    def transform_scale(self, sx_percent: float, sy_percent: float, x: float, y: float) -> None:
        """Scale by percentages around the point (x, y)."""
        px, py = self._point(x, y)
        sx = sx_percent / 100
        sy = sy_percent / 100
        self._transform(sx, 0, 0, sy, px * (1 - sx), py * (1 - sy))

    def transform_rotate(self, degrees: float, x: float, y: float) -> None:
        """Rotate counter-clockwise by ``degrees`` around the point (x, y)."""
        px, py = self._point(x, y)
        angle = degrees * math.pi / 180
        cos_a = math.cos(angle)
        sin_a = math.sin(angle)
        self._transform(
            cos_a,
            sin_a,
            -sin_a,
            cos_a,
            px + sin_a * py - cos_a * px,
            py - cos_a * py - sin_a * px,
        )

    def transform_translate(self, tx: float, ty: float) -> None:
        k = self._pdf.k
        self._transform(1, 0, 0, 1, tx * k, -ty * k)

    # Transparency

    def get_alpha(self) -> tuple[float, str]:
        return self._alpha, self._blend_mode

    def set_alpha(self, alpha: float, blend_mode: str) -> None:
        self._alpha = alpha
        self._blend_mode = blend_mode

    # Images

    def register_image(self, name: str, image_type: str, data: bytes) -> None:  # noqa: ARG002
        self._images[name] = data

    def image(self, name: str, x: float, y: float, w: float, h: float, image_type: str) -> None:  # noqa: ARG002
        self._pdf.image(BytesIO(self._images[name]), x=x, y=y, w=w, h=h)

    # Fonts and text metrics

    def get_font_size(self) -> tuple[float, float]:
        return self._pdf.font_size_pt, self._pdf.font_size

    def get_font_descriptor(self) -> FontDescriptor:
        desc = getattr(self._pdf.current_font, "desc", None)
        if desc is None:
            return FontDescriptor()
        return FontDescriptor(
            ascent=int(getattr(desc, "ascent", 0)),
            descent=int(getattr(desc, "descent", 0)),
        )

    def add_font(self, family: str, style: str, file_name: str) -> None:
        font_path = self._font_folder / file_name if self._font_folder else Path(file_name)
        self._pdf.add_font(family, style, str(font_path))

    def set_font(self, family: str, style: str, size: float) -> None:
        self._pdf.set_font(family, style, size)

    def get_string_width(self, text: str) -> float:
        """Return the width of ``text`` in the current font, 0 when none is set."""
        if not self._pdf.font_family:
            return 0.0
        return self._pdf.get_string_width(text)

    # Page geometry

    def get_page_size(self) -> tuple[float, float]:
        return self._pdf.w, self._pdf.h

    def get_xy(self) -> tuple[float, float]:
        return self._pdf.get_x(), self._pdf.get_y()

    def set_xy(self, x: float, y: float) -> None:
        self._pdf.set_xy(x, y)

    def output(self, output_path: Path) -> None:
        """Write the document to disk.

        Raises:
            DocumentSaveError: If the file cannot be written
        """
        try:
            self._pdf.output(str(output_path))
        except OSError as e:
            raise DocumentSaveError(str(output_path), str(e)) from e


def new_pdf(
    orientation: str = "P",
    unit: str = "pt",
    size: str = "A4",
    font_folder: Path | None = None,
) -> FpdfDocument:
    """Create a one-page document with drawing defaults.

    The page has no margins, a black draw color, a white fill color,
    round caps and joins and a line width of 1.

    Args:
        orientation: "P" (portrait) or "L" (landscape)
        unit: User unit ("pt", "mm", "cm" or "in")
        size: Page format name (e.g., "A4", "letter")
        font_folder: Folder holding the TrueType font files

    Returns:
        FpdfDocument wrapping the new document
    """
    pdf = FPDF(orientation=orientation, unit=unit, format=size)
    pdf.set_margins(0, 0, 0)
    pdf.set_auto_page_break(False)
    document = FpdfDocument(pdf, font_folder)
    document.set_draw_color(0, 0, 0)
    document.set_fill_color(255, 255, 255)
    document.set_line_cap_style("round")
    document.set_line_join_style("round")
    document.set_line_width(1)
    pdf.add_page()
    return document
