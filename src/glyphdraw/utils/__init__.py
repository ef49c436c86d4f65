"""Utility functions for glyphdraw.

This module provides logging setup and the render logger that collects
rendering statistics.
"""

from glyphdraw.utils.logging import (
    RenderLogger,
    RenderStats,
    configure_logging,
)

__all__ = [
    "RenderLogger",
    "RenderStats",
    "configure_logging",
]
