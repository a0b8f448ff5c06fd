"""Single-file path: sanitize one markdown file without synthesizing structure."""

from pathlib import Path
from typing import Union

from .sanitizer import sanitize
from .source_tree import read_markdown


def assemble_single(path: Union[str, Path]) -> str:
    """
    Read one markdown file and strip its fenced code blocks.

    No title is injected and no headings are shifted; the file's own
    structure is preserved as-is.
    """
    return sanitize(read_markdown(path))
