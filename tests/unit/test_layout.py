"""Unit tests for string layout."""

import pytest

from glyphdraw.core.layout import LayoutResult, layout_string
from glyphdraw.domain import GlyphOutline, MoveTo, OutlinePoint, Path
from glyphdraw.exceptions import GlyphLoadError
from glyphdraw.io.font import TrueTypeFont

SQUARE = GlyphOutline(
    points=(
        OutlinePoint(0, 0),
        OutlinePoint(0, 64),
        OutlinePoint(64, 64),
        OutlinePoint(64, 0),
    ),
    ends=(4,),
)


class FakeFont:
    """Font backend with fixed metrics, independent of the scale."""

    def __init__(
        self,
        advances: dict[str, int],
        kerning: dict[tuple[str, str], int] | None = None,
        broken: set[str] | None = None,
    ) -> None:
        self._chars = sorted(advances)
        self._advances = advances
        self._kerning = kerning or {}
        self._broken = broken or set()
        self.loaded: list[int] = []

    @property
    def units_per_em(self) -> int:
        return 1024

    def _char(self, index: int) -> str:
        return self._chars[index - 1]

    def index(self, char: str) -> int:
        return self._chars.index(char) + 1 if char in self._advances else 0

    def kerning(self, scale: int, left: int, right: int) -> int:
        return self._kerning.get((self._char(left), self._char(right)), 0)

    def advance_width(self, scale: int, index: int) -> int:
        return self._advances[self._char(index)]

    def load_glyph(self, scale: int, index: int) -> GlyphOutline:
        self.loaded.append(index)
        if index == 0 or self._char(index) in self._broken:
            raise GlyphLoadError(index, "broken glyph")
        if self._char(index) == " ":
            return GlyphOutline()
        return SQUARE


class TestLayoutString:
    """Tests for layout_string with a fake font."""

    def test_empty_string(self) -> None:
        """Test that an empty string consumes no advance."""
        path = Path()
        result = layout_string("", 5, 5, FakeFont({"A": 640}), 256, path)
        assert result == LayoutResult(advance=0.0, glyph_count=0)
        assert result.ok
        assert path.is_empty()

    def test_advance_with_kerning(self) -> None:
        """Test advances 10 + kerning 2 + advance 8 for a kerned pair."""
        font = FakeFont({"A": 640, "V": 512}, kerning={("A", "V"): 128})
        result = layout_string("AV", 0, 0, font, 256, Path())

        assert result.advance == 20.0
        assert result.glyph_count == 2

    def test_kerning_only_between_glyphs(self) -> None:
        """Test that a single glyph is not kerned."""
        font = FakeFont({"A": 640}, kerning={("A", "A"): 128})
        assert layout_string("A", 0, 0, font, 256, Path()).advance == 10.0
        assert layout_string("AA", 0, 0, font, 256, Path()).advance == 22.0

    def test_glyphs_placed_at_pen_position(self) -> None:
        """Test that each glyph is traced at the kerned pen position."""
        font = FakeFont({"A": 640, "V": 512}, kerning={("A", "V"): 128})
        path = Path()
        layout_string("AV", 3, 50, font, 256, path)

        moves = [s for s in path if isinstance(s, MoveTo)]
        assert moves == [MoveTo(3.0, 50.0), MoveTo(15.0, 50.0)]

    def test_glyph_without_outline_still_advances(self) -> None:
        """Test that blank glyphs add no contours but advance the pen."""
        font = FakeFont({" ": 256, "A": 640})
        path = Path()
        result = layout_string(" A", 0, 0, font, 256, path)

        assert result.advance == 14.0
        assert path.segments[0] == MoveTo(4.0, 0.0)

    def test_failure_stops_layout(self) -> None:
        """Test that a failing glyph stops layout and reports the error."""
        font = FakeFont({"A": 640, "B": 512, "C": 512}, broken={"B"})
        path = Path()
        result = layout_string("ABC", 0, 0, font, 256, path)

        assert not result.ok
        assert isinstance(result.error, GlyphLoadError)
        assert result.glyph_count == 1
        # "C" is never loaded and "A" stays in the path
        assert font.loaded == [1, 2]
        assert len(path.subpaths()) == 1

    def test_failure_returns_start_minus_cursor(self) -> None:
        """Test the advance reported after a failure is start minus cursor."""
        font = FakeFont({"A": 640, "B": 512}, broken={"B"})
        result = layout_string("AB", 0, 0, font, 256, Path())
        assert result.advance == -10.0

    def test_unmapped_character_fails_on_index_zero(self) -> None:
        """Test that an unmapped character is looked up as glyph 0."""
        font = FakeFont({"A": 640})
        result = layout_string("?", 0, 0, font, 256, Path())
        assert result.error is not None
        assert result.error.index == 0


class TestLayoutWithTrueTypeFont:
    """Tests for layout_string on the built test font."""

    def test_kerned_pair_advance(self, truetype_font: TrueTypeFont) -> None:
        """Test A (2.5) + kerning (-0.25) + B (2.0) at scale 256."""
        result = layout_string("AB", 0, 0, truetype_font, 256, Path())
        assert result.ok
        assert result.advance == pytest.approx(4.25)

    def test_space_has_no_contours(self, truetype_font: TrueTypeFont) -> None:
        """Test that the space glyph only advances."""
        path = Path()
        result = layout_string(" ", 0, 0, truetype_font, 256, path)
        assert result.advance == pytest.approx(1.0)
        assert path.is_empty()

    def test_square_glyph_contour(self, truetype_font: TrueTypeFont) -> None:
        """Test that the square glyph traces a closed polygon above the baseline."""
        path = Path()
        layout_string("A", 10, 100, truetype_font, 256, path)

        assert path.segments[0] == MoveTo(10.0, 100.0)
        assert len(path) == 5
        xs = [s.x for s in path]
        ys = [s.y for s in path]
        assert min(xs) == 10.0 and max(xs) == 12.0
        assert min(ys) == 97.25 and max(ys) == 100.0
