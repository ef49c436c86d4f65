"""Rich console output helpers for the CLI.

This module provides user-friendly console output using the Rich library
with tables and formatted messages.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from glyphdraw.utils.logging import RenderStats

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Glyphdraw[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def print_font_info(
    font_path: str,
    family: str,
    glyph_count: int,
    upm: int,
    has_kerning: bool,
) -> None:
    """Print font information as a table.

    Args:
        font_path: Path to the font file
        family: Family name from the name table
        glyph_count: Total number of glyphs in font
        upm: Units per em value
        has_kerning: Whether the font has a usable kern table
    """
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column(style="dim")
    table.add_column()
    # Use Text to safely handle paths with special characters
    table.add_row("File", Text(font_path))
    table.add_row("Family", Text(family))
    table.add_row("Glyphs", f"{glyph_count:,}")
    table.add_row("Units per em", f"{upm:,}")
    table.add_row("Kerning", "yes" if has_kerning else "no")
    console.print(table)


def print_render_summary(stats: RenderStats, advance: float) -> None:
    """Print a summary of a render run.

    Args:
        stats: Statistics collected by the render logger
        advance: Advance width of the rendered string
    """
    console.print(
        f"  {stats.glyphs_drawn} glyphs {SYM_DOT} {stats.draw_calls} draw calls "
        f"{SYM_DOT} advance {advance:.2f}"
    )
    for text, error in stats.errors:
        line = Text(f"  {SYM_ERR} ", style="red")
        line.append(f"{text!r}: {error}")
        console.print(line)


def print_success(output_path: str) -> None:
    """Print success message with the output path."""
    line = Text(f"\n{SYM_OK} Saved: ", style="green")
    line.append(output_path)
    console.print(line)


def print_error(message: str, details: str | None = None) -> None:
    """Print an error message.

    Args:
        message: Main error message
        details: Optional details shown dimmed below the message
    """
    console.print(f"[red]{SYM_ERR} Error:[/red] {message}")
    if details:
        console.print(f"  [dim]{details}[/dim]")
