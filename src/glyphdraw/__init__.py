"""Glyphdraw - Render vector drawings and glyph outlines into PDF documents.

Glyphdraw is a 2-D graphics backend that turns an abstract drawing model
(paths, fills, strokes, transforms, nested save/restore scopes and text)
into commands for a page-based document writer. Text is drawn as filled
glyph outlines reconstructed from TrueType quadratic contours.

Example:
    $ glyphdraw text DejaVuSans.ttf "Hello" -o hello.pdf

This will create hello.pdf with the string drawn as vector outlines.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
