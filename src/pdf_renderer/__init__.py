"""PDF renderer collaborators for the markdown-to-pdf converter."""

from .renderer import (DEFAULT_MARGIN, DEFAULT_PAPER_SIZE, Renderer,
                       RenderOptions, create_renderer)

__all__ = [
    "DEFAULT_MARGIN",
    "DEFAULT_PAPER_SIZE",
    "RenderOptions",
    "Renderer",
    "create_renderer",
]
