"""Heading shifter for re-rooting markdown fragments inside a larger document."""

import re

from .sanitizer import split_lines

MAX_HEADING_LEVEL = 6

# ATX heading: up to 3 spaces of indent, 1-6 hashes, then whitespace or end of line
ATX_HEADING = re.compile(r"^( {0,3})(#{1,6})(?=\s|$)")


class HeadingShifter:
    """Rewrites ATX heading levels by a fixed offset, clamped to a ceiling."""

    def __init__(self, max_level: int = MAX_HEADING_LEVEL):
        _validate_max_level(max_level)
        self.max_level = max_level

    def shift(self, text: str, offset: int) -> str:
        """
        Shift every ATX heading in text by offset levels.

        Args:
            text: Markdown fragment
            offset: Non-negative number of levels to add

        Returns:
            Fragment with heading levels set to min(level + offset, max_level)
        """
        if offset < 0:
            raise ValueError(f"Heading offset must be non-negative, got {offset}")

        return "".join(self._shift_line(line, offset) for line in split_lines(text))

    def _shift_line(self, line: str, offset: int) -> str:
        match = ATX_HEADING.match(line)
        if not match:
            return line

        indent, hashes = match.group(1), match.group(2)
        new_level = min(len(hashes) + offset, self.max_level)
        return indent + "#" * new_level + line[match.end():]


def _validate_max_level(max_level: int):
    if not 1 <= max_level <= MAX_HEADING_LEVEL:
        raise ValueError(f"max_level must be between 1 and {MAX_HEADING_LEVEL}, got {max_level}")


def shift(text: str, offset: int, max_level: int = MAX_HEADING_LEVEL) -> str:
    """Shift heading levels of text by offset, never exceeding max_level."""
    return HeadingShifter(max_level).shift(text, offset)


def heading_line(level: int, text: str) -> str:
    """Build a single ATX heading line, clamping level into 1..6."""
    level = max(1, min(level, MAX_HEADING_LEVEL))
    return f"{'#' * level} {text}"
