"""Tests for the conversion orchestrator."""

import os
from pathlib import Path

import pytest

from src.converter.data_classes import AssemblyRequest
from src.converter.orchestrator import AssemblyOrchestrator
from src.pdf_renderer.renderer import Renderer, RenderOptions
from src.utils.errors import (EmptyInputError, InputNotFoundError,
                              OutputWriteFailedError, RenderFailedError,
                              UnsupportedInputError)

FAKE_PDF = b"%PDF-1.4 fake"


class FakeRenderer(Renderer):
    """Records what it was asked to render."""

    def __init__(self, error: Exception = None):
        self.calls = []
        self.error = error

    def render(self, markdown: str, options: RenderOptions) -> bytes:
        self.calls.append((markdown, options))
        if self.error:
            raise self.error
        return FAKE_PDF


@pytest.fixture
def docs_dir(tmp_path) -> Path:
    docs = tmp_path / "docs"
    (docs / "characters").mkdir(parents=True)
    (docs / "plot.md").write_text("# Some text\n")
    (docs / "characters" / "alice.md").write_text("# Alice's story\n")
    (docs / "characters" / "bob.md").write_text("# Bob's story\n")
    (docs / "image.png").write_bytes(b"\x89PNG")
    return docs


class TestAssemblyOrchestrator:
    """Test the AssemblyOrchestrator component."""

    def test_directory_mode_renders_and_writes(self, docs_dir, tmp_path):
        """Test a directory is assembled, rendered and written."""
        renderer = FakeRenderer()
        output = tmp_path / "out.pdf"
        request = AssemblyRequest(input_path=docs_dir, output_path=output, title="Documentation")

        result = AssemblyOrchestrator(renderer=renderer).run(request)

        assert output.read_bytes() == FAKE_PDF
        assert result.pdf_bytes == FAKE_PDF
        assert result.mode == "directory"
        assert result.file_count == 3
        assert result.directory_count == 1
        markdown, options = renderer.calls[0]
        assert markdown == result.markdown
        assert markdown.startswith("# Documentation\n")
        assert options == RenderOptions(dark_mode=False, paper_size="A4", margin="0.4in")

    def test_title_defaults_to_directory_name(self, docs_dir):
        """Test the base title falls back to the directory's own name."""
        orchestrator = AssemblyOrchestrator(renderer=FakeRenderer())

        document = orchestrator.build_markdown(AssemblyRequest(input_path=docs_dir))

        assert document.markdown.startswith("# docs\n")

    def test_blank_title_ignored(self, docs_dir):
        """Test a whitespace-only title is treated as absent."""
        orchestrator = AssemblyOrchestrator(renderer=FakeRenderer())

        document = orchestrator.build_markdown(AssemblyRequest(input_path=docs_dir, title="   "))

        assert document.markdown.startswith("# docs\n")

    def test_relative_dot_uses_real_directory_name(self, docs_dir, monkeypatch):
        """Test '.' resolves to the directory's actual name."""
        monkeypatch.chdir(docs_dir)
        orchestrator = AssemblyOrchestrator(renderer=FakeRenderer())

        document = orchestrator.build_markdown(AssemblyRequest(input_path=Path(".")))

        assert document.markdown.startswith("# docs\n")

    def test_single_file_mode_ignores_title(self, tmp_path):
        """Test single-file mode returns sanitized content with no synthesized heading."""
        path = tmp_path / "readme.md"
        path.write_text("Intro\n```\ncode\n```\nOutro\n")
        renderer = FakeRenderer()
        request = AssemblyRequest(input_path=path, output_path=tmp_path / "r.pdf", title="Ignored", dark_mode=True)

        result = AssemblyOrchestrator(renderer=renderer).run(request)

        assert result.mode == "file"
        assert result.markdown == "Intro\nOutro\n"
        assert "Ignored" not in result.markdown
        assert renderer.calls[0][1].dark_mode is True

    def test_missing_input(self, tmp_path):
        """Test a missing input path raises InputNotFoundError."""
        orchestrator = AssemblyOrchestrator(renderer=FakeRenderer())

        with pytest.raises(InputNotFoundError):
            orchestrator.run(AssemblyRequest(input_path=tmp_path / "missing", output_path=tmp_path / "o.pdf"))

    def test_non_markdown_file_rejected(self, tmp_path):
        """Test files without the .md suffix are refused."""
        path = tmp_path / "notes.txt"
        path.write_text("hello")
        orchestrator = AssemblyOrchestrator(renderer=FakeRenderer())

        with pytest.raises(UnsupportedInputError):
            orchestrator.build_markdown(AssemblyRequest(input_path=path))

    @pytest.mark.skipif(not hasattr(os, "mkfifo"), reason="requires named pipes")
    def test_special_file_rejected(self, tmp_path):
        """Test paths that are neither file nor directory are refused."""
        fifo = tmp_path / "pipe.md"
        os.mkfifo(fifo)
        orchestrator = AssemblyOrchestrator(renderer=FakeRenderer())

        with pytest.raises(UnsupportedInputError):
            orchestrator.build_markdown(AssemblyRequest(input_path=fifo))

    def test_empty_directory_is_valid_by_default(self, tmp_path):
        """Test a tree without markdown files still renders scaffolding."""
        empty = tmp_path / "empty"
        (empty / "sub").mkdir(parents=True)
        renderer = FakeRenderer()

        result = AssemblyOrchestrator(renderer=renderer).run(
            AssemblyRequest(input_path=empty, output_path=tmp_path / "e.pdf")
        )

        assert result.file_count == 0
        assert result.markdown == "# empty\n\n# sub\n"

    def test_empty_directory_fails_when_strict(self, tmp_path):
        """Test the strict empty-input policy in directory mode."""
        empty = tmp_path / "empty"
        empty.mkdir()
        renderer = FakeRenderer()

        with pytest.raises(EmptyInputError):
            AssemblyOrchestrator(renderer=renderer).run(
                AssemblyRequest(input_path=empty, output_path=tmp_path / "e.pdf", fail_on_empty=True)
            )
        assert renderer.calls == []

    def test_empty_single_file_fails_when_strict(self, tmp_path):
        """Test the strict empty-input policy applies to single files too."""
        path = tmp_path / "only_code.md"
        path.write_text("```\ncode\n```\n")
        orchestrator = AssemblyOrchestrator(renderer=FakeRenderer())

        assert orchestrator.build_markdown(AssemblyRequest(input_path=path)).markdown == ""
        with pytest.raises(EmptyInputError):
            orchestrator.build_markdown(AssemblyRequest(input_path=path, fail_on_empty=True))

    def test_render_failure_propagates(self, docs_dir, tmp_path):
        """Test renderer errors surface unchanged and nothing is written."""
        output = tmp_path / "out.pdf"
        renderer = FakeRenderer(error=RenderFailedError("boom"))

        with pytest.raises(RenderFailedError):
            AssemblyOrchestrator(renderer=renderer).run(AssemblyRequest(input_path=docs_dir, output_path=output))
        assert not output.exists()

    def test_output_write_failure(self, docs_dir, tmp_path):
        """Test an unwritable destination raises OutputWriteFailedError."""
        output = tmp_path / "missing_dir" / "out.pdf"

        with pytest.raises(OutputWriteFailedError):
            AssemblyOrchestrator(renderer=FakeRenderer()).run(AssemblyRequest(input_path=docs_dir, output_path=output))

    def test_run_requires_output_path(self, docs_dir):
        """Test run() refuses a request without an output path."""
        with pytest.raises(ValueError):
            AssemblyOrchestrator(renderer=FakeRenderer()).run(AssemblyRequest(input_path=docs_dir))

    def test_separators_can_be_disabled(self, docs_dir):
        """Test the orchestrator passes the separator setting to the assembler."""
        orchestrator = AssemblyOrchestrator(renderer=FakeRenderer(), insert_separators=False)

        document = orchestrator.build_markdown(AssemblyRequest(input_path=docs_dir))

        assert "---" not in document.markdown
