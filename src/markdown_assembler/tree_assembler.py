"""Tree assembler that turns a SourceNode tree into one markdown document."""

import logging
from dataclasses import dataclass
from typing import List

from .heading_shifter import MAX_HEADING_LEVEL, HeadingShifter, heading_line
from .sanitizer import ContentSanitizer
from .source_tree import DirectoryNode, FileNode

logger = logging.getLogger(__name__)

FILE_SEPARATOR = "---"


@dataclass
class AssemblyStats:
    """Counters collected while assembling a tree."""

    file_count: int = 0
    directory_count: int = 0
    fenced_blocks_removed: int = 0


class TreeAssembler:
    """
    Assembles a directory tree into a single markdown document.

    Heading layout:
        - level 1: the document title, top-level directories
        - level 2: files directly in the root, entries inside top-level directories
        - each nesting level below adds one, saturating at level 6
        - file bodies are shifted by their file heading's level
    """

    def __init__(self, insert_separators: bool = True, max_level: int = MAX_HEADING_LEVEL):
        self.insert_separators = insert_separators
        self.sanitizer = ContentSanitizer()
        self.shifter = HeadingShifter(max_level)
        self.stats = AssemblyStats()

    def assemble(self, root: DirectoryNode, base_title: str) -> str:
        """
        Assemble the tree under root into one markdown string.

        Args:
            root: Root directory node
            base_title: Title emitted once as the level-1 heading at the top

        Returns:
            Normalized markdown: blocks separated by blank lines, ending in a newline
        """
        self.stats = AssemblyStats()
        blocks: List[str] = [heading_line(1, base_title)]

        after_directory = False
        anchored = False
        for child in root.children:
            if isinstance(child, DirectoryNode):
                blocks.append(heading_line(1, child.name))
                self._assemble_children(child, 2, blocks)
                self.stats.directory_count += 1
                after_directory = True
            else:
                # Re-anchor root files that would otherwise read as part of the previous directory
                if after_directory and not anchored:
                    blocks.append(heading_line(1, root.name))
                    anchored = True
                self._assemble_file(child, 2, blocks)

        logger.debug(
            f"Assembled {self.stats.file_count} files from {self.stats.directory_count} directories, "
            f"removed {self.stats.fenced_blocks_removed} fenced blocks"
        )
        return "\n\n".join(blocks) + "\n"

    def _assemble_children(self, directory: DirectoryNode, level: int, blocks: List[str]):
        for child in directory.children:
            if isinstance(child, DirectoryNode):
                blocks.append(heading_line(level, child.name))
                self._assemble_children(child, level + 1, blocks)
                self.stats.directory_count += 1
            else:
                self._assemble_file(child, level, blocks)

    def _assemble_file(self, file_node: FileNode, level: int, blocks: List[str]):
        level = min(level, self.shifter.max_level)
        blocks.append(heading_line(level, file_node.name))

        self.stats.fenced_blocks_removed += self.sanitizer.count_fenced_blocks(file_node.content)
        body = self.sanitizer.sanitize(file_node.content)
        body = self.shifter.shift(body, level).strip("\r\n")
        if body.strip():
            blocks.append(body)

        if self.insert_separators:
            blocks.append(FILE_SEPARATOR)
        self.stats.file_count += 1


def assemble(root: DirectoryNode, base_title: str, insert_separators: bool = True) -> str:
    """Assemble a SourceNode tree into one markdown document."""
    return TreeAssembler(insert_separators=insert_separators).assemble(root, base_title)
