"""External collaborators of the rendering core.

This module holds the two collaborators the core drives: the font backend
that supplies glyph outlines and metrics, and the document writer that
receives drawing commands.

Key classes:
- FontBackend: Protocol for glyph indices, metrics and outlines
- TrueTypeFont: fontTools implementation of FontBackend
- DocumentWriter: Protocol for page-based document writers
- RecordingDocument: In-memory writer recording every call
- FpdfDocument: fpdf2 implementation of DocumentWriter
"""

from glyphdraw.io.document import DocumentWriter, FontDescriptor, RecordingDocument
from glyphdraw.io.font import FontBackend, TrueTypeFont, scale_funits
from glyphdraw.io.fpdf_document import FpdfDocument, new_pdf

__all__ = [
    "DocumentWriter",
    "FontBackend",
    "FontDescriptor",
    "FpdfDocument",
    "RecordingDocument",
    "TrueTypeFont",
    "new_pdf",
    "scale_funits",
]
