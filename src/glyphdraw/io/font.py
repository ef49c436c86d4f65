"""Font backend for glyph indices, metrics and outlines.

This module defines the FontBackend protocol consumed by the layout engine
and a TrueType implementation on top of fontTools. Metric and outline
values are returned as integers in design units scaled for an integer
glyph scale, rounded half away from zero.
"""

from pathlib import Path
from typing import Protocol

from fontTools.ttLib import TTFont

from glyphdraw.core.numeric import trunc_div
from glyphdraw.domain.outline import GlyphOutline, OutlinePoint
from glyphdraw.exceptions import FontLoadError, GlyphLoadError

# Bit 0 of a glyf point flag marks an on-curve point.
FLAG_ON_CURVE = 0x01


class FontBackend(Protocol):
    """Source of glyph indices, metrics and outlines."""

    @property
    def units_per_em(self) -> int: ...

    def index(self, char: str) -> int:
        """Map a character to a glyph index (0 when unmapped)."""
        ...

    def kerning(self, scale: int, left: int, right: int) -> int:
        """Kerning between two glyphs at the given scale."""
        ...

    def advance_width(self, scale: int, index: int) -> int:
        """Advance width of a glyph at the given scale."""
        ...

    def load_glyph(self, scale: int, index: int) -> GlyphOutline:
        """Load a glyph outline at the given scale.

        Raises:
            GlyphLoadError: If no outline can be produced
        """
        ...


def scale_funits(value: int, scale: int, units_per_em: int) -> int:
    """Scale a design-unit value, rounding half away from zero.

    Examples:
        >>> scale_funits(600, 256, 1024)
        150
        >>> scale_funits(-2, 256, 1024)
        -1
    """
    x = value * scale
    half = units_per_em // 2
    x = x + half if x >= 0 else x - half
    return trunc_div(x, units_per_em)


class TrueTypeFont:
    """TrueType glyph source backed by a fontTools TTFont.

    Example:
        font = TrueTypeFont.from_path(Path("DejaVuSans.ttf"))
        outline = font.load_glyph(256, font.index("A"))
    """

    def __init__(self, font: TTFont, path: str = "<memory>") -> None:
        """Initialize from an already loaded font.

        Args:
            font: The fontTools TTFont object
            path: Source path, used in error messages
        """
        self._font = font
        self._path = path
        self._glyph_order = font.getGlyphOrder()
        self._cmap = font.getBestCmap() or {}
        self._kern_pairs: dict[tuple[str, str], int] | None = None

    @classmethod
    def from_path(cls, font_path: Path) -> "TrueTypeFont":
        """Load a font file.

        Raises:
            FontLoadError: If the file is missing or cannot be parsed
        """
        if not font_path.exists():
            raise FontLoadError(str(font_path), "file not found")
        try:
            font = TTFont(str(font_path))
        except Exception as e:
            raise FontLoadError(str(font_path), str(e)) from e
        return cls(font, str(font_path))

    @property
    def units_per_em(self) -> int:
        """Return the font's units per em."""
        return self._font["head"].unitsPerEm  # type: ignore[attr-defined]

    @property
    def glyph_count(self) -> int:
        """Return the number of glyphs in the font."""
        return len(self._glyph_order)

    @property
    def family_name(self) -> str:
        """Return the family name from the name table."""
        name = self._font["name"].getDebugName(1) if "name" in self._font else None
        return name or "Unknown"

    @property
    def has_kerning(self) -> bool:
        """Check if the font carries a usable 'kern' table."""
        return bool(self._pairs())

    def index(self, char: str) -> int:
        """Map a character to a glyph index through the best cmap."""
        name = self._cmap.get(ord(char))
        if name is None:
            return 0
        return self._font.getGlyphID(name)

    def kerning(self, scale: int, left: int, right: int) -> int:
        """Return the scaled kerning between two glyph indices."""
        pairs = self._pairs()
        if not pairs:
            return 0
        key = (self._glyph_name(left), self._glyph_name(right))
        return scale_funits(pairs.get(key, 0), scale, self.units_per_em)

    def advance_width(self, scale: int, index: int) -> int:
        """Return the scaled advance width of a glyph."""
        advance, _ = self._font["hmtx"][self._glyph_name(index)]
        return scale_funits(advance, scale, self.units_per_em)

    def load_glyph(self, scale: int, index: int) -> GlyphOutline:
        """Load and scale a glyph outline.

        Composite glyphs are resolved into their component contours. The
        outline is shifted so that the glyph origin (x minimum less the
        left side bearing) lands on x=0.

        Raises:
            GlyphLoadError: If the index is out of range or the font has
                no TrueType outlines
        """
        if not 0 <= index < len(self._glyph_order):
            raise GlyphLoadError(index, "glyph index out of range")
        if "glyf" not in self._font:
            raise GlyphLoadError(index, "font has no TrueType outlines")

        name = self._glyph_order[index]
        glyf_table = self._font["glyf"]
        try:
            glyph = glyf_table[name]
            coordinates, end_pts, flags = glyph.getCoordinates(glyf_table)
        except Exception as e:
            raise GlyphLoadError(index, str(e)) from e

        if not end_pts:
            return GlyphOutline()

        _, lsb = self._font["hmtx"][name]
        x_min = min(round(x) for x, _ in coordinates)
        shift = lsb - x_min

        upm = self.units_per_em
        points = tuple(
            OutlinePoint(
                scale_funits(round(x) + shift, scale, upm),
                scale_funits(round(y), scale, upm),
                bool(flag & FLAG_ON_CURVE),
            )
            for (x, y), flag in zip(coordinates, flags)
        )
        ends = tuple(end + 1 for end in end_pts)
        return GlyphOutline(points=points, ends=ends)

    def close(self) -> None:
        """Close the font file and free resources."""
        self._font.close()

    def __enter__(self) -> "TrueTypeFont":
        """Context manager entry."""
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()

    def _glyph_name(self, index: int) -> str:
        if 0 <= index < len(self._glyph_order):
            return self._glyph_order[index]
        return self._glyph_order[0]

    def _pairs(self) -> dict[tuple[str, str], int]:
        """Merge the format 0 'kern' subtables into one pair lookup."""
        if self._kern_pairs is None:
            self._kern_pairs = {}
            if "kern" in self._font:
                for subtable in self._font["kern"].kernTables:  # type: ignore[attr-defined]
                    table = getattr(subtable, "kernTable", None)
                    if table:
                        self._kern_pairs.update(table)
        return self._kern_pairs
