"""Convert command - assembles markdown input and renders it to PDF."""

import logging
import sys
from pathlib import Path
from typing import Optional

from src.cli.config import Config
from src.converter.data_classes import AssemblyRequest
from src.converter.orchestrator import AssemblyOrchestrator, write_output
from src.markdown_assembler.source_tree import SourceTreeBuilder
from src.pdf_renderer.renderer import Renderer, create_renderer
from src.utils.errors import ConversionError

logger = logging.getLogger(__name__)


def build_orchestrator(config: Config, renderer: Optional[Renderer] = None) -> AssemblyOrchestrator:
    """Wire an orchestrator from configuration."""
    if renderer is None:
        renderer = create_renderer(
            "browser",
            executable_path=config.chromium_executable_path,
            timeout_ms=config.render_timeout_ms,
        )
    return AssemblyOrchestrator(
        renderer=renderer,
        tree_builder=SourceTreeBuilder(),
        insert_separators=config.insert_file_separators,
    )


def convert_command(
    config: Config,
    input_path: str,
    output_path: Optional[str] = None,
    title: Optional[str] = None,
    dark_mode: bool = False,
    emit_markdown: Optional[str] = None,
    fail_on_empty: bool = False,
    renderer: Optional[Renderer] = None,
):
    """Convert a markdown file or directory to PDF, optionally emitting the assembled markdown."""
    request = AssemblyRequest(
        input_path=Path(input_path),
        output_path=Path(output_path) if output_path else None,
        title=title,
        dark_mode=dark_mode or config.dark_mode,
        fail_on_empty=fail_on_empty or config.fail_on_empty_input,
    )

    try:
        orchestrator = build_orchestrator(config, renderer)

        document = orchestrator.build_markdown(request)

        if emit_markdown:
            write_output(emit_markdown, document.markdown)
            logger.info(f"📝 Markdown written to: {emit_markdown}")

        if request.output_path is not None:
            orchestrator.render(document, request)

    except ConversionError as e:
        logger.error(f"❌ {e}")
        sys.exit(1)
