"""Markdown assembler for combining markdown files into a single document."""

from .heading_shifter import MAX_HEADING_LEVEL, HeadingShifter, heading_line, shift
from .sanitizer import ContentSanitizer, sanitize
from .single_file import assemble_single
from .source_tree import (DirectoryNode, FileNode, SourceTreeBuilder,
                          TreeBuilderConfig)
from .tree_assembler import AssemblyStats, TreeAssembler, assemble

__all__ = [
    "AssemblyStats",
    "ContentSanitizer",
    "DirectoryNode",
    "FileNode",
    "HeadingShifter",
    "MAX_HEADING_LEVEL",
    "SourceTreeBuilder",
    "TreeAssembler",
    "TreeBuilderConfig",
    "assemble",
    "assemble_single",
    "heading_line",
    "sanitize",
    "shift",
]
