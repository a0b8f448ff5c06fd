"""Main CLI entry point for markdown-to-pdf."""

import argparse

from src.cli.commands.convert import convert_command
from src.cli.config import Config
from src.utils.logging_config import setup_logging


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="markdown-to-pdf",
        description="Convert Markdown files or directories to PDF",
    )

    parser.add_argument("-i", "--input", required=True, help="Input Markdown file or directory path")
    parser.add_argument("-o", "--output", help="Output PDF file path")
    parser.add_argument("--dark-mode", action="store_true", help="Enable dark mode theme")
    parser.add_argument("--title", default=None, help="Document title for directories (default: directory name)")
    parser.add_argument("--emit-markdown", help="Also write the assembled Markdown to this path")
    parser.add_argument(
        "--fail-on-empty",
        action="store_true",
        help="Fail instead of producing an empty document when no Markdown content is found",
    )
    parser.add_argument("--config", help="Path to .env configuration file", default=None)
    parser.add_argument("-v", "--verbose", action="store_true", help="Show progress messages")

    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.output and not args.emit_markdown:
        parser.error("one of --output or --emit-markdown is required")

    setup_logging(verbose=args.verbose)

    config = Config(args.config)

    convert_command(
        config=config,
        input_path=args.input,
        output_path=args.output,
        title=args.title,
        dark_mode=args.dark_mode,
        emit_markdown=args.emit_markdown,
        fail_on_empty=args.fail_on_empty,
    )


if __name__ == "__main__":
    main()
