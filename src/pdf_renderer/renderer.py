"""Renderer abstraction and factory."""

from abc import ABC, abstractmethod
from dataclasses import dataclass

DEFAULT_PAPER_SIZE = "A4"
DEFAULT_MARGIN = "0.4in"


@dataclass(frozen=True)
class RenderOptions:
    """Options handed to a renderer. The assembly pipeline only fills these in."""

    dark_mode: bool = False
    paper_size: str = DEFAULT_PAPER_SIZE
    margin: str = DEFAULT_MARGIN


class Renderer(ABC):
    """Abstract base class for markdown-to-PDF renderers."""

    @abstractmethod
    def render(self, markdown: str, options: RenderOptions) -> bytes:
        """Render a complete markdown document to PDF bytes."""


def create_renderer(renderer_type: str = "browser", **config) -> Renderer:
    """Factory function to create a renderer of the given type."""

    if renderer_type == "browser":
        from .browser_renderer import BrowserRenderer

        return BrowserRenderer(**config)

    else:
        raise ValueError(f"Unknown renderer type: {renderer_type}")
