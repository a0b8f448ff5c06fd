"""Headless Chromium renderer: markdown -> HTML -> print-to-PDF."""

import logging
from typing import Optional

from markdown_it import MarkdownIt
from mdit_py_plugins.footnote import footnote_plugin
from mdit_py_plugins.tasklists import tasklists_plugin
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError
from playwright.sync_api import sync_playwright

from src.utils.errors import RenderFailedError, RenderUnavailableError

from .html_template import render_page
from .renderer import Renderer, RenderOptions

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_MS = 30000


def build_markdown_parser() -> MarkdownIt:
    """CommonMark parser with GitHub-style tables, strikethrough, footnotes and task lists."""
    md = MarkdownIt("commonmark").enable(["table", "strikethrough"])
    md.use(footnote_plugin)
    md.use(tasklists_plugin)
    return md


class BrowserRenderer(Renderer):
    """Renders markdown to PDF through a headless Chromium driven by Playwright."""

    def __init__(self, executable_path: Optional[str] = None, timeout_ms: int = DEFAULT_TIMEOUT_MS):
        """
        Initialize the browser renderer.

        Args:
            executable_path: Custom Chromium binary, or None for Playwright's bundled one
            timeout_ms: Timeout applied by Playwright to page operations
        """
        self.executable_path = executable_path
        self.timeout_ms = timeout_ms
        self.parser = build_markdown_parser()

    def markdown_to_html(self, markdown: str, options: RenderOptions) -> str:
        """Convert markdown into a complete, themed HTML page."""
        body = self.parser.render(markdown)
        return render_page(body, dark_mode=options.dark_mode, paper_size=options.paper_size)

    def render(self, markdown: str, options: RenderOptions) -> bytes:
        """
        Render markdown to PDF bytes.

        Args:
            markdown: Complete markdown document
            options: Theme, paper size and margins

        Returns:
            PDF file contents
        """
        logger.info("Converting markdown to HTML...")
        html = self.markdown_to_html(markdown, options)

        logger.info("Starting Chrome for PDF generation...")
        try:
            playwright = sync_playwright().start()
        except PlaywrightError as e:
            raise RenderUnavailableError(f"Failed to start Playwright: {e}") from e

        try:
            browser = self._launch_browser(playwright)
            try:
                return self._print_to_pdf(browser, html, options)
            finally:
                browser.close()
        finally:
            playwright.stop()

    def _launch_browser(self, playwright):
        try:
            return playwright.chromium.launch(headless=True, executable_path=self.executable_path)
        except PlaywrightError as e:
            raise RenderUnavailableError(
                "Failed to start Chrome. Make sure Chromium is installed "
                f"(run: playwright install chromium): {e}"
            ) from e

    def _print_to_pdf(self, browser, html: str, options: RenderOptions) -> bytes:
        try:
            page = browser.new_page()
            page.set_default_timeout(self.timeout_ms)

            logger.info("Loading HTML content...")
            page.set_content(html, wait_until="load")

            return page.pdf(
                format=options.paper_size,
                print_background=True,
                margin={
                    "top": options.margin,
                    "right": options.margin,
                    "bottom": options.margin,
                    "left": options.margin,
                },
            )
        except PlaywrightTimeoutError as e:
            raise RenderFailedError(f"Page rendering timed out after {self.timeout_ms} ms: {e}") from e
        except PlaywrightError as e:
            raise RenderFailedError(f"Failed to generate PDF: {e}") from e
