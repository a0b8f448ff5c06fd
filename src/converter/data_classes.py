"""Data classes for the conversion orchestrator."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from src.pdf_renderer.renderer import RenderOptions

DIRECTORY_MODE = "directory"
FILE_MODE = "file"


@dataclass(frozen=True)
class AssemblyRequest:
    """One conversion request, built once from external input."""

    input_path: Path
    output_path: Optional[Path] = None
    title: Optional[str] = None
    dark_mode: bool = False
    fail_on_empty: bool = False

    def render_options(self) -> RenderOptions:
        return RenderOptions(dark_mode=self.dark_mode)


@dataclass
class AssembledDocument:
    """Markdown produced by the assembly half of a conversion."""

    markdown: str
    mode: str  # "directory" or "file"
    file_count: int
    directory_count: int = 0


@dataclass
class ConversionResult:
    """Outcome of a successful conversion run."""

    pdf_bytes: bytes
    markdown: str
    mode: str
    file_count: int
    directory_count: int
    output_path: Optional[Path] = None
