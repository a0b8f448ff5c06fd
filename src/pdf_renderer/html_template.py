"""HTML page template used to print markdown through the browser."""

from jinja2 import Template

LIGHT_THEME = {
    "background": "white",
    "text": "black",
    "code_background": "#f5f5f5",
    "header_background": "#f9f9f9",
    "border": "#eee",
    "quote": "#666",
}

DARK_THEME = {
    "background": "#1a1a1a",
    "text": "#e0e0e0",
    "code_background": "#2d2d2d",
    "header_background": "#3a3a3a",
    "border": "#444",
    "quote": "#aaa",
}

PAGE_TEMPLATE = Template(
    """<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8">
    <title>{{ title }}</title>
    <style>
        @page { size: {{ paper_size }}; }
        html { background-color: {{ theme.background }}; }
        body {
            font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif;
            line-height: 1.6;
            max-width: 800px;
            margin: 0 auto;
            padding: 20px;
            background-color: {{ theme.background }};
            color: {{ theme.text }};
            -webkit-print-color-adjust: exact;
            print-color-adjust: exact;
        }
        h1, h2, h3, h4, h5, h6 { margin-top: 1.5em; margin-bottom: 0.5em; page-break-after: avoid; }
        h1 { font-size: 2em; border-bottom: 2px solid {{ theme.border }}; padding-bottom: 0.3em; }
        h2 { font-size: 1.5em; border-bottom: 1px solid {{ theme.border }}; padding-bottom: 0.3em; }
        code {
            background-color: {{ theme.code_background }};
            padding: 2px 4px;
            border-radius: 3px;
            font-family: 'Courier New', monospace;
        }
        pre { background-color: {{ theme.code_background }}; padding: 15px; border-radius: 5px; overflow-x: auto; }
        pre code { background-color: transparent; padding: 0; }
        blockquote { border-left: 4px solid #ddd; margin: 0; padding-left: 20px; color: {{ theme.quote }}; }
        table { border-collapse: collapse; width: 100%; margin: 1em 0; }
        th, td { border: 1px solid #ddd; padding: 8px 12px; text-align: left; }
        th { background-color: {{ theme.header_background }}; font-weight: bold; }
        hr { border: 0; border-top: 1px solid {{ theme.border }}; margin: 2em 0; }
        img { max-width: 100%; height: auto; }
        ul, ol { margin: 1em 0; padding-left: 2em; }
        li { margin: 0.5em 0; }
    </style>
</head>
<body>
{{ body }}
</body>
</html>"""
)


def render_page(body: str, dark_mode: bool = False, paper_size: str = "A4", title: str = "Markdown to PDF") -> str:
    """Wrap an HTML body fragment in the themed page."""
    theme = DARK_THEME if dark_mode else LIGHT_THEME
    return PAGE_TEMPLATE.render(body=body, theme=theme, paper_size=paper_size, title=title)
