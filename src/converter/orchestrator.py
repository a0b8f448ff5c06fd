"""Main orchestration for converting markdown input into a PDF."""

import logging
import stat
from pathlib import Path
from typing import Optional, Union

from src.markdown_assembler.single_file import assemble_single
from src.markdown_assembler.source_tree import (DirectoryNode, FileNode,
                                                SourceTreeBuilder)
from src.markdown_assembler.tree_assembler import TreeAssembler
from src.pdf_renderer.renderer import Renderer, create_renderer
from src.utils.errors import (EmptyInputError, InputNotFoundError,
                              InputUnreadableError, OutputWriteFailedError,
                              UnsupportedInputError)

from .data_classes import (DIRECTORY_MODE, FILE_MODE, AssembledDocument,
                           AssemblyRequest, ConversionResult)

logger = logging.getLogger(__name__)


class AssemblyOrchestrator:
    """Chooses directory or single-file mode, assembles markdown and hands it to the renderer."""

    def __init__(
        self,
        renderer: Optional[Renderer] = None,
        tree_builder: Optional[SourceTreeBuilder] = None,
        insert_separators: bool = True,
    ):
        """
        Initialize the orchestrator.

        Args:
            renderer: PDF renderer; a browser renderer is created on first use if omitted
            tree_builder: Filesystem walker for directory mode
            insert_separators: Whether to put a thematic break after each file
        """
        self._renderer = renderer
        self.tree_builder = tree_builder or SourceTreeBuilder()
        self.insert_separators = insert_separators

    @property
    def renderer(self) -> Renderer:
        if self._renderer is None:
            self._renderer = create_renderer("browser")
        return self._renderer

    def build_markdown(self, request: AssemblyRequest) -> AssembledDocument:
        """
        Produce the final markdown for a request without rendering it.

        Args:
            request: Conversion request

        Returns:
            AssembledDocument with the markdown and what it was built from
        """
        input_path = Path(request.input_path)

        try:
            mode = input_path.stat().st_mode
        except (FileNotFoundError, NotADirectoryError) as e:
            raise InputNotFoundError(f"Input path does not exist: {input_path}", input_path) from e
        except OSError as e:
            raise InputUnreadableError(f"Cannot access input path {input_path}: {e}", input_path) from e

        if stat.S_ISDIR(mode):
            document = self._build_from_directory(input_path, request.title)
        elif stat.S_ISREG(mode):
            document = self._build_from_file(input_path, request.title)
        else:
            raise UnsupportedInputError(
                f"Input path is neither file nor directory: {input_path}", input_path
            )

        if request.fail_on_empty and self._is_empty(document):
            raise EmptyInputError(f"No markdown content found in: {input_path}", input_path)

        return document

    def run(self, request: AssemblyRequest) -> ConversionResult:
        """
        Convert the request's input into a PDF written to its output path.

        Args:
            request: Conversion request with an output path

        Returns:
            ConversionResult describing the produced PDF
        """
        return self.render(self.build_markdown(request), request)

    def render(self, document: AssembledDocument, request: AssemblyRequest) -> ConversionResult:
        """Render an already assembled document and write the PDF to the request's output path."""
        if request.output_path is None:
            raise ValueError("AssemblyRequest.output_path is required to render a PDF")

        pdf_bytes = self.renderer.render(document.markdown, request.render_options())

        output_path = Path(request.output_path)
        logger.info(f"Generating PDF: {output_path}")
        write_output(output_path, pdf_bytes)
        logger.info(f"✅ PDF successfully created: {output_path}")

        return ConversionResult(
            pdf_bytes=pdf_bytes,
            markdown=document.markdown,
            mode=document.mode,
            file_count=document.file_count,
            directory_count=document.directory_count,
            output_path=output_path,
        )

    def _build_from_directory(self, input_path: Path, title: Optional[str]) -> AssembledDocument:
        logger.info(f"Scanning for markdown files in: {input_path}")
        root = self.tree_builder.build(input_path)

        base_title = title.strip() if title and title.strip() else root.name
        assembler = TreeAssembler(insert_separators=self.insert_separators)

        logger.info("Combining all files into single document...")
        markdown = assembler.assemble(root, base_title)

        stats = assembler.stats
        logger.info(f"Found {stats.file_count} markdown files in {stats.directory_count + 1} directories")
        _log_tree(root)
        if stats.file_count == 0:
            logger.warning(f"⚠️ No .md files found in directory: {input_path}")

        return AssembledDocument(
            markdown=markdown,
            mode=DIRECTORY_MODE,
            file_count=stats.file_count,
            directory_count=stats.directory_count,
        )

    def _build_from_file(self, input_path: Path, title: Optional[str]) -> AssembledDocument:
        if input_path.suffix != ".md":
            raise UnsupportedInputError(f"File must have .md extension: {input_path}", input_path)

        if title:
            logger.debug(f"Ignoring title {title!r}: titles only apply to directory input")

        logger.info(f"Reading markdown file: {input_path}")
        markdown = assemble_single(input_path)
        return AssembledDocument(markdown=markdown, mode=FILE_MODE, file_count=1)

    def _is_empty(self, document: AssembledDocument) -> bool:
        if document.mode == DIRECTORY_MODE:
            return document.file_count == 0
        return not document.markdown.strip()


def write_output(output_path: Union[str, Path], data: Union[bytes, str]):
    """Write bytes (or UTF-8 text) to output_path, raising OutputWriteFailedError on failure."""
    output_path = Path(output_path)
    try:
        if isinstance(data, bytes):
            output_path.write_bytes(data)
        else:
            output_path.write_text(data, encoding="utf-8")
    except OSError as e:
        raise OutputWriteFailedError(f"Failed to save {output_path}: {e}", output_path) from e


def _log_tree(directory: DirectoryNode, prefix: str = ""):
    """Log the traversed tree at debug level."""
    for child in directory.children:
        if isinstance(child, FileNode):
            logger.debug(f"  {prefix}📄 {child.name}")
        else:
            logger.debug(f"  {prefix}📁 {child.name}: {child.file_count} files")
            _log_tree(child, prefix + "  ")


def run(request: AssemblyRequest, renderer: Optional[Renderer] = None) -> ConversionResult:
    """Run one conversion with a fresh orchestrator."""
    return AssemblyOrchestrator(renderer=renderer).run(request)
