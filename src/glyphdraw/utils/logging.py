"""Logging utilities for Glyphdraw."""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

import structlog


@dataclass
class RenderStats:
    """Statistics collected while rendering."""

    strings_laid_out: int = 0
    glyphs_drawn: int = 0
    glyph_failures: int = 0
    draw_calls: int = 0
    images: int = 0
    errors: list[tuple[str, str]] = field(default_factory=list)


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "INFO",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (auto-generated if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger
    """
    if log_file is None:
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = Path(f"glyphdraw_{timestamp}.log")

    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(getattr(logging, file_level.upper()))
    file_handler.setFormatter(
        logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    root_logger.addHandler(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("glyphdraw")
    logger.info("Logging initialized", log_file=str(log_file), level=file_level)

    return logger


class RenderLogger:
    """Logger for rendering events that also keeps RenderStats."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None) -> None:
        self._logger = logger if logger is not None else structlog.get_logger("glyphdraw")
        self._stats = RenderStats()

    def log_layout(self, text: str, glyph_count: int, advance: float) -> None:
        """Log a completed string layout."""
        self._logger.debug(
            "String laid out",
            text=text,
            glyphs=glyph_count,
            advance=round(advance, 3),
        )
        self._stats.strings_laid_out += 1
        self._stats.glyphs_drawn += glyph_count

    def log_glyph_error(self, text: str, error: Exception, glyph_count: int) -> None:
        """Log a glyph that could not be loaded during layout."""
        self._logger.error(
            "Glyph load failed",
            text=text,
            error=str(error),
            error_type=type(error).__name__,
            glyphs_drawn=glyph_count,
        )
        self._stats.glyph_failures += 1
        self._stats.glyphs_drawn += glyph_count
        self._stats.errors.append((text, str(error)))

    def log_missing_font(self, text: str) -> None:
        """Log a text operation issued before any font was set."""
        self._logger.error("No font set for text operation", text=text)
        self._stats.errors.append((text, "no font set"))

    def log_draw(self, style: str, alpha: float) -> None:
        """Log a paint operation."""
        self._logger.debug("Path drawn", style=style, alpha=round(alpha, 3))
        self._stats.draw_calls += 1

    def log_image(self, name: str, width: int, height: int) -> None:
        """Log a registered and placed image."""
        self._logger.debug("Image drawn", name=name, width=width, height=height)
        self._stats.images += 1

    @property
    def stats(self) -> RenderStats:
        """Get current render statistics."""
        return self._stats
