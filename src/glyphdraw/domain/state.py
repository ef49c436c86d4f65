"""Paint and transform state of a graphic context.

This module defines the value types making up one drawing state:
- Color: RGBA color with 16-bit components
- FillRule, LineCap, LineJoin: paint style enums
- FontFamily, FontStyle, FontData: font selection for the document writer
- DrawingState: the complete mutable state of one save/restore scope
"""

from dataclasses import dataclass, field
from enum import Enum, IntFlag
from typing import TYPE_CHECKING

from fontTools.misc.transform import Identity, Transform

from glyphdraw.domain.path import Path

if TYPE_CHECKING:
    from glyphdraw.io.font import FontBackend

CHANNEL_MAX = 0xFFFF


@dataclass(frozen=True, slots=True)
class Color:
    """An RGBA color with components in the 0..65535 range.

    Attributes:
        r: Red component
        g: Green component
        b: Blue component
        a: Alpha component (65535 is fully opaque)
    """

    r: int
    g: int
    b: int
    a: int = CHANNEL_MAX

    @classmethod
    def from_rgba8(cls, r: int, g: int, b: int, a: int = 255) -> "Color":
        """Build a color from 8-bit components."""
        return cls(r * 257, g * 257, b * 257, a * 257)

    @classmethod
    def from_hex(cls, value: str) -> "Color":
        """Parse a '#rrggbb' or '#rrggbbaa' string.

        Raises:
            ValueError: If the string is not a valid hex color
        """
        digits = value.lstrip("#")
        if len(digits) not in (6, 8):
            raise ValueError(f"Invalid hex color: {value!r}")
        channels = [int(digits[i : i + 2], 16) for i in range(0, len(digits), 2)]
        return cls.from_rgba8(*channels)

    def rgba(self) -> tuple[int, int, int, int]:
        """Return the (r, g, b, a) components."""
        return (self.r, self.g, self.b, self.a)


BLACK = Color(0, 0, 0)
WHITE = Color(CHANNEL_MAX, CHANNEL_MAX, CHANNEL_MAX)


class FillRule(Enum):
    """How overlapping subpaths combine when filled."""

    EVEN_ODD = "evenodd"
    NON_ZERO_WINDING = "nonzero"

    def use_non_zero_winding(self) -> bool:
        """Check if this is the nonzero winding rule."""
        return self is FillRule.NON_ZERO_WINDING


class LineCap(str, Enum):
    """Line cap style; values are the document writer's tokens."""

    ROUND = "round"
    BUTT = "butt"
    SQUARE = "square"


class LineJoin(str, Enum):
    """Line join style; values are the document writer's tokens."""

    ROUND = "round"
    BEVEL = "bevel"
    MITER = "miter"


class FontFamily(Enum):
    """Generic font family, used to build font file names."""

    SANS = "s"
    SERIF = "r"
    MONO = "m"


class FontStyle(IntFlag):
    """Font style bit flags."""

    NORMAL = 0
    BOLD = 1
    ITALIC = 2


@dataclass(frozen=True)
class FontData:
    """Font selection for the document writer.

    Attributes:
        name: Base font name (e.g., "luxi")
        family: Generic family
        style: Combination of FontStyle flags
    """

    name: str
    family: FontFamily = FontFamily.SANS
    style: FontStyle = FontStyle.NORMAL


DEFAULT_FONT_DATA = FontData("luxi", FontFamily.SANS, FontStyle.NORMAL)


def font_file_name(font_data: FontData) -> str:
    """Build the TrueType file name for a font selection.

    The name is the base name, a family letter, 'b' for bold or 'r' for
    regular, an optional 'i' for italic and the '.ttf' extension.

    Examples:
        >>> font_file_name(FontData("luxi", FontFamily.SANS, FontStyle.NORMAL))
        'luxisr.ttf'
        >>> font_file_name(FontData("luxi", FontFamily.MONO, FontStyle.BOLD | FontStyle.ITALIC))
        'luximbi.ttf'
    """
    name = font_data.name + font_data.family.value
    name += "b" if font_data.style & FontStyle.BOLD else "r"
    if font_data.style & FontStyle.ITALIC:
        name += "i"
    return name + ".ttf"


@dataclass
class DrawingState:
    """The paint, transform and path state of one scope.

    Attributes:
        transform: Composited scale/rotate/translate transform
        stroke_color: Color used by stroke operations
        fill_color: Color used by fill operations and text
        fill_rule: Rule used when filling overlapping subpaths
        line_width: Stroke width in document units
        cap: Line cap style
        join: Line join style
        dash: Dash pattern lengths (empty for a solid line)
        dash_offset: Offset into the dash pattern
        font: Glyph outline source for text operations
        font_data: Font selected in the document writer
        font_size: Font size in points
        scale: Glyph scale derived from font size and DPI
        path: Path being built for the next draw operation
    """

    transform: Transform = Identity
    stroke_color: Color = BLACK
    fill_color: Color = WHITE
    fill_rule: FillRule = FillRule.EVEN_ODD
    line_width: float = 1.0
    cap: LineCap = LineCap.ROUND
    join: LineJoin = LineJoin.ROUND
    dash: list[float] = field(default_factory=list)
    dash_offset: float = 0.0
    font: "FontBackend | None" = None
    font_data: FontData = DEFAULT_FONT_DATA
    font_size: float = 10.0
    scale: float = 0.0
    path: Path = field(default_factory=Path)

    def copy(self) -> "DrawingState":
        """Snapshot this state.

        The path and dash list are copied so the snapshot is unaffected by
        later drawing; the font reference is shared.
        """
        return DrawingState(
            transform=self.transform,
            stroke_color=self.stroke_color,
            fill_color=self.fill_color,
            fill_rule=self.fill_rule,
            line_width=self.line_width,
            cap=self.cap,
            join=self.join,
            dash=list(self.dash),
            dash_offset=self.dash_offset,
            font=self.font,
            font_data=self.font_data,
            font_size=self.font_size,
            scale=self.scale,
            path=self.path.copy(),
        )
