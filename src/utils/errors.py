"""Error types raised by the conversion pipeline."""

from pathlib import Path
from typing import Optional, Union


class ConversionError(Exception):
    """Base class for all terminal conversion failures."""

    kind = "ConversionError"

    def __init__(self, message: str, path: Optional[Union[str, Path]] = None):
        super().__init__(message)
        self.message = message
        self.path = Path(path) if path is not None else None

    def __str__(self) -> str:
        return f"{self.kind}: {self.message}"


class InputNotFoundError(ConversionError):
    """Input path does not exist."""

    kind = "InputNotFound"


class InputUnreadableError(ConversionError):
    """Permission, encoding or OS failure while listing or reading input."""

    kind = "InputUnreadable"


class UnsupportedInputError(ConversionError):
    """Input is neither a markdown file nor a directory."""

    kind = "UnsupportedInput"


class EmptyInputError(ConversionError):
    """No markdown content was found and the strict empty-input policy is on."""

    kind = "EmptyInput"


class RenderUnavailableError(ConversionError):
    """The browser engine used for rendering could not be launched."""

    kind = "RenderUnavailable"


class RenderFailedError(ConversionError):
    """The renderer returned an error or timed out."""

    kind = "RenderFailed"


class OutputWriteFailedError(ConversionError):
    """Output bytes could not be written to the destination."""

    kind = "OutputWriteFailed"
