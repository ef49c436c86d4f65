"""Exception hierarchy for Glyphdraw."""


class GlyphDrawError(Exception):
    """Base exception for all Glyphdraw errors."""

    pass


class FontError(GlyphDrawError):
    """Errors related to font loading."""

    pass


class FontLoadError(FontError):
    """Error loading a font file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load font '{path}': {reason}")


class GlyphError(GlyphDrawError):
    """Errors related to glyph outlines."""

    pass


class GlyphLoadError(GlyphError):
    """The font backend could not produce an outline for a glyph."""

    def __init__(self, index: int, reason: str) -> None:
        self.index = index
        self.reason = reason
        super().__init__(f"Failed to load glyph {index}: {reason}")


class DocumentError(GlyphDrawError):
    """Errors raised by the document writer."""

    pass


class DocumentSaveError(DocumentError):
    """Error writing the document to disk."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save document '{path}': {reason}")
