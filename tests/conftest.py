"""Shared fixtures: a small TrueType font built in memory.

Glyphs (units per em 1024):
- "A": square (0, 0)-(512, 704), all points on-curve, advance 640
- "B": arch with one quadratic control point, advance 512
- "space": no outline, advance 256
Kerning A -> B is -64.

At font size 12 and 72 DPI the glyph scale is 256, so one design unit
maps to 1/256 pixel: advance(A) = 2.5, advance(B) = 2.0, kern = -0.25.
"""

from pathlib import Path

import pytest
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen
from fontTools.ttLib import TTFont, newTable
from fontTools.ttLib.tables._k_e_r_n import KernTable_format_0

from glyphdraw.io.font import TrueTypeFont

UPM = 1024
GLYPH_ORDER = [".notdef", "space", "A", "B"]


def _empty_glyph():
    return TTGlyphPen(None).glyph()


def _square_glyph():
    pen = TTGlyphPen(None)
    pen.moveTo((0, 0))
    pen.lineTo((0, 704))
    pen.lineTo((512, 704))
    pen.lineTo((512, 0))
    pen.closePath()
    return pen.glyph()


def _arch_glyph():
    pen = TTGlyphPen(None)
    pen.moveTo((0, 0))
    pen.qCurveTo((256, 768), (512, 0))
    pen.closePath()
    return pen.glyph()


def build_test_font() -> TTFont:
    """Build the test font described in the module docstring."""
    fb = FontBuilder(UPM, isTTF=True)
    fb.setupGlyphOrder(GLYPH_ORDER)
    fb.setupCharacterMap({32: "space", 65: "A", 66: "B"})
    fb.setupGlyf(
        {
            ".notdef": _empty_glyph(),
            "space": _empty_glyph(),
            "A": _square_glyph(),
            "B": _arch_glyph(),
        }
    )
    fb.setupHorizontalMetrics(
        {
            ".notdef": (512, 0),
            "space": (256, 0),
            "A": (640, 0),
            "B": (512, 0),
        }
    )
    fb.setupHorizontalHeader(ascent=820, descent=-204)
    fb.setupNameTable({"familyName": "Glyphdraw Test", "styleName": "Regular"})
    fb.setupOS2(sTypoAscender=820, usWinAscent=820, usWinDescent=204)
    fb.setupPost()

    kern = newTable("kern")
    kern.version = 0
    subtable = KernTable_format_0()
    subtable.version = 0
    subtable.coverage = 1
    subtable.kernTable = {("A", "B"): -64}
    kern.kernTables = [subtable]
    fb.font["kern"] = kern

    return fb.font


@pytest.fixture
def test_ttfont() -> TTFont:
    """The in-memory test font as a fontTools TTFont."""
    return build_test_font()


@pytest.fixture
def truetype_font(test_ttfont: TTFont) -> TrueTypeFont:
    """The in-memory test font wrapped as a TrueTypeFont."""
    return TrueTypeFont(test_ttfont)


@pytest.fixture
def font_file(tmp_path: Path) -> Path:
    """The test font saved to a temporary .ttf file."""
    path = tmp_path / "GlyphdrawTest.ttf"
    build_test_font().save(str(path))
    return path
