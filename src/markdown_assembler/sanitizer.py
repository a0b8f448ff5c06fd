"""Content sanitizer that strips fenced code blocks from markdown."""

import re
from typing import Iterator, List, Tuple

# A markdown line ends only at \r\n, \r or \n; the last line may have no ending
LINE = re.compile(r"[^\r\n]*(?:\r\n|\r|\n)|[^\r\n]+\Z")

# Opening fence: optional indent, 3+ backticks, optional info string without backticks
OPENING_FENCE = re.compile(r"^\s*`{3,}[^`]*$")
# Closing fence: optional indent, 3+ backticks, nothing else
CLOSING_FENCE = re.compile(r"^\s*`{3,}\s*$")


class ContentSanitizer:
    """Removes fenced code blocks while leaving every other line untouched."""

    def sanitize(self, text: str) -> str:
        """
        Remove all fenced code blocks from markdown text.

        Fence lines and everything between them are dropped. An unterminated
        fence removes everything from the opening fence to the end of input.

        Args:
            text: Raw markdown content

        Returns:
            Markdown content without fenced code blocks
        """
        kept: List[str] = []
        for line, in_block in self._classify_lines(text):
            if not in_block:
                kept.append(line)
        return "".join(kept)

    def count_fenced_blocks(self, text: str) -> int:
        """Count the fenced blocks (closed or not) that sanitize() would remove."""
        count = 0
        in_block = False
        for line in split_lines(text):
            line = line.rstrip("\r\n")
            if not in_block and OPENING_FENCE.match(line):
                in_block = True
                count += 1
            elif in_block and CLOSING_FENCE.match(line):
                in_block = False
        return count

    def _classify_lines(self, text: str) -> Iterator[Tuple[str, bool]]:
        """Yield each line (with its line ending) and whether it belongs to a fenced block."""
        in_block = False
        for line in split_lines(text):
            if in_block:
                if CLOSING_FENCE.match(line.rstrip("\r\n")):
                    in_block = False
                yield line, True
            elif OPENING_FENCE.match(line.rstrip("\r\n")):
                in_block = True
                yield line, True
            else:
                yield line, False


def split_lines(text: str) -> List[str]:
    """Split text into lines with their endings, breaking only on \\r\\n, \\r and \\n."""
    return LINE.findall(text)


_default_sanitizer = ContentSanitizer()


def sanitize(text: str) -> str:
    """Strip fenced code blocks using the shared sanitizer."""
    return _default_sanitizer.sanitize(text)
