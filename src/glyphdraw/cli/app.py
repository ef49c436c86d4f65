"""CLI application entry point for glyphdraw.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer

from glyphdraw import __version__
from glyphdraw.cli.output import (
    console,
    print_error,
    print_font_info,
    print_header,
    print_render_summary,
    print_step,
    print_success,
)
from glyphdraw.config import (
    FontConfig,
    GlyphDrawSettings,
    LoggingConfig,
    PageConfig,
    RenderConfig,
)
from glyphdraw.core import PdfGraphicContext
from glyphdraw.domain import Color, FillRule
from glyphdraw.exceptions import DocumentSaveError, FontLoadError
from glyphdraw.io import TrueTypeFont, new_pdf
from glyphdraw.utils import RenderLogger, configure_logging

# Create the Typer app
app = typer.Typer(
    name="glyphdraw",
    help="Render text as vector glyph outlines into PDF documents.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Glyphdraw[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def root(
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Render text as vector glyph outlines into PDF documents."""


def _load_font(font_path: Path) -> TrueTypeFont:
    try:
        return TrueTypeFont.from_path(font_path)
    except FontLoadError as e:
        print_error(str(e), details=e.reason)
        raise typer.Exit(code=1) from e


@app.command()
def text(
    font_file: Annotated[
        Path,
        typer.Argument(help="Path to a TrueType font file", show_default=False),
    ],
    content: Annotated[
        str,
        typer.Argument(help="Text to draw", show_default=False),
    ],
    output: Annotated[
        Path,
        typer.Option("--output", "-o", help="Output PDF path"),
    ] = Path("glyphdraw.pdf"),
    size: Annotated[
        float,
        typer.Option("--size", "-s", help="Font size in points", min=0.1, max=1000.0),
    ] = 24.0,
    x: Annotated[
        float,
        typer.Option("--x", help="Pen start X in points"),
    ] = 36.0,
    y: Annotated[
        float,
        typer.Option("--y", help="Baseline Y in points, from the top of the page"),
    ] = 72.0,
    fill: Annotated[
        str,
        typer.Option("--fill", "-f", help="Fill color as #rrggbb or #rrggbbaa"),
    ] = "#000000",
    nonzero: Annotated[
        bool,
        typer.Option("--nonzero", help="Use the nonzero winding fill rule"),
    ] = False,
    dpi: Annotated[
        int,
        typer.Option("--dpi", help="Resolution used to derive the glyph scale", min=1),
    ] = 72,
    page_size: Annotated[
        str,
        typer.Option("--page", help="Page format (A4, letter, ...)"),
    ] = "A4",
    log_file: Annotated[
        Path | None,
        typer.Option("--log-file", help="Write detailed logs to file"),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option("--log-level", help="Logging level (DEBUG|INFO|WARNING|ERROR)"),
    ] = "WARNING",
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Minimal console output"),
    ] = False,
) -> None:
    """Draw a string as filled glyph outlines on a new PDF page.

    Example:
        glyphdraw text DejaVuSans.ttf "Hello" -o hello.pdf --size 36
    """
    try:
        fill_color = Color.from_hex(fill)
    except ValueError as e:
        print_error(f"Invalid fill color: {fill}", details="Expected #rrggbb or #rrggbbaa")
        raise typer.Exit(code=1) from e

    settings = GlyphDrawSettings(
        page=PageConfig(size=page_size),
        font=FontConfig(size=size),
        render=RenderConfig(dpi=dpi),
        logging=LoggingConfig(log_file=log_file, log_level=log_level),
    )
    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )

    if not quiet:
        print_header(__version__)
        print_step(f"Loading {font_file.name}")

    font = _load_font(font_file)

    document = new_pdf(
        settings.page.orientation.value,
        settings.page.unit.value,
        settings.page.size,
        settings.font.folder,
    )
    gc = PdfGraphicContext(
        document,
        font=font,
        dpi=settings.render.dpi,
        render_logger=RenderLogger(logger),
    )
    gc.set_font_size(settings.font.size)
    gc.set_fill_color(fill_color)
    if nonzero:
        gc.set_fill_rule(FillRule.NON_ZERO_WINDING)

    if not quiet:
        print_step(f"Drawing {len(content)} characters")
    advance = gc.fill_string_at(content, x, y)

    try:
        document.output(output)
    except DocumentSaveError as e:
        print_error(str(e), details=e.reason)
        raise typer.Exit(code=1) from e
    finally:
        font.close()

    if not quiet:
        print_render_summary(gc.stats, advance)
        print_success(str(output))

    if gc.stats.glyph_failures:
        raise typer.Exit(code=2)


@app.command()
def info(
    font_file: Annotated[
        Path,
        typer.Argument(help="Path to a TrueType font file", show_default=False),
    ],
) -> None:
    """Show the metrics glyphdraw uses from a font."""
    with _load_font(font_file) as font:
        print_font_info(
            str(font_file),
            font.family_name,
            font.glyph_count,
            font.units_per_em,
            font.has_kerning,
        )


def cli() -> None:
    """Entry point for the CLI."""
    app()


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
