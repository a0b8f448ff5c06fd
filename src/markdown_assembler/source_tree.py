"""Filesystem walker that builds the SourceNode tree for assembly."""

import errno
import logging
import stat
from dataclasses import dataclass, field
from pathlib import Path
from typing import FrozenSet, List, Optional, Union

from src.utils.errors import (InputNotFoundError, InputUnreadableError,
                              UnsupportedInputError)

logger = logging.getLogger(__name__)

MARKDOWN_SUFFIX = ".md"


@dataclass(frozen=True)
class FileNode:
    """A markdown file: display name without suffix plus its raw content."""

    name: str
    content: str
    path: Path = None


@dataclass(frozen=True)
class DirectoryNode:
    """A directory with children sorted by display name."""

    name: str
    children: List[Union["DirectoryNode", FileNode]] = field(default_factory=list)
    path: Path = None

    def iter_files(self):
        """Yield every FileNode below this directory in pre-order."""
        for child in self.children:
            if isinstance(child, FileNode):
                yield child
            else:
                yield from child.iter_files()

    @property
    def file_count(self) -> int:
        return sum(1 for _ in self.iter_files())


SourceNode = Union[DirectoryNode, FileNode]


def sort_key(node: SourceNode):
    """Ordinal, case-sensitive sort by display name; directories win ties."""
    return (node.name, isinstance(node, FileNode))


@dataclass
class TreeBuilderConfig:
    """Configuration for the source tree builder."""

    suffix: str = MARKDOWN_SUFFIX


class SourceTreeBuilder:
    """Walks a directory once and snapshots its markdown files into a tree."""

    def __init__(self, config: TreeBuilderConfig = None):
        self.config = config or TreeBuilderConfig()

    def build(self, root_dir: Union[str, Path]) -> DirectoryNode:
        """
        Build the SourceNode tree for a directory.

        Args:
            root_dir: Root directory path to walk

        Returns:
            DirectoryNode named after the resolved root directory
        """
        root_path = Path(root_dir)

        try:
            mode = root_path.stat().st_mode
        except (FileNotFoundError, NotADirectoryError) as e:
            raise InputNotFoundError(f"Directory not found: {root_dir}", root_path) from e
        except OSError as e:
            raise InputUnreadableError(f"Cannot access directory {root_dir}: {e}", root_path) from e

        if not stat.S_ISDIR(mode):
            raise UnsupportedInputError(f"Path is not a directory: {root_dir}", root_path)

        resolved = root_path.resolve()
        name = resolved.name or str(resolved)
        return self._build_directory(root_path, name, frozenset([resolved]))

    def _build_directory(self, path: Path, name: str, ancestors: FrozenSet[Path]) -> DirectoryNode:
        children: List[SourceNode] = []

        try:
            entries = list(path.iterdir())
        except OSError as e:
            raise InputUnreadableError(f"Cannot list directory {path}: {e}", path) from e

        for item in entries:
            if item.name.startswith("."):
                continue

            mode = self._stat_entry(item)
            if mode is None:
                continue

            if stat.S_ISDIR(mode):
                child = self._build_subdirectory(item, ancestors)
                if child is not None:
                    children.append(child)
            elif stat.S_ISREG(mode) and self._is_markdown_file(item):
                children.append(self._build_file(item))

        children.sort(key=sort_key)
        return DirectoryNode(name=name, children=children, path=path)

    def _stat_entry(self, item: Path) -> Optional[int]:
        """Return the mode of an entry, following symlinks, or None for a dangling link."""
        try:
            return item.stat().st_mode
        except FileNotFoundError as e:
            if item.is_symlink():
                logger.warning(f"Skipping broken symlink: {item}")
                return None
            raise InputUnreadableError(f"Entry disappeared during traversal: {item}", item) from e
        except OSError as e:
            if e.errno == errno.ELOOP:
                logger.warning(f"Skipping symlink loop: {item}")
                return None
            raise InputUnreadableError(f"Cannot stat {item}: {e}", item) from e

    def _build_subdirectory(self, item: Path, ancestors: FrozenSet[Path]) -> Optional[DirectoryNode]:
        resolved = item.resolve()
        if resolved in ancestors:
            logger.warning(f"Skipping symlink loop: {item} -> {resolved}")
            return None
        return self._build_directory(item, item.name, ancestors | {resolved})

    def _build_file(self, item: Path) -> FileNode:
        return FileNode(
            name=item.name[: -len(self.config.suffix)],
            content=read_markdown(item),
            path=item,
        )

    def _is_markdown_file(self, file_path: Path) -> bool:
        return file_path.name.endswith(self.config.suffix)


def read_markdown(file_path: Union[str, Path]) -> str:
    """Read a whole markdown file as UTF-8, keeping its line endings."""
    file_path = Path(file_path)
    try:
        with open(file_path, "r", encoding="utf-8", newline="") as f:
            return f.read()
    except FileNotFoundError as e:
        raise InputNotFoundError(f"File not found: {file_path}", file_path) from e
    except UnicodeDecodeError as e:
        raise InputUnreadableError(f"Unable to read file as UTF-8: {file_path}: {e}", file_path) from e
    except OSError as e:
        raise InputUnreadableError(f"Cannot read file {file_path}: {e}", file_path) from e
