"""HTML exporter that embeds the SVG drawing in a minimal themed page."""

from html import escape
from typing import Optional

from flowdiagram.backend.options import RenderOptions
from flowdiagram.backend.svg import SvgExporter
from flowdiagram.core.ir import FlowDiagram


class HtmlExporter:
    """Exports a FlowDiagram to a standalone HTML page.

    The page carries the diagram title as a heading above the inline SVG and
    follows the render theme for its background and text colours.
    """

    @staticmethod
    def to_html(diagram: FlowDiagram, options: Optional[RenderOptions] = None) -> str:
        """Returns the complete standalone HTML string."""
        options = options or RenderOptions()
        palette = options.palette
        svg = SvgExporter.to_svg(diagram, options)
        title = escape(diagram.title)
        background = options.background(diagram.options.background_color)

        html = f'''<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{title}</title>
    <style>
        body {{
            margin: 0;
            padding: 20px;
            background-color: {escape(background)};
            font-family: Arial, sans-serif;
        }}
        .diagram-container {{
            display: flex;
            justify-content: center;
            align-items: center;
            min-height: 100vh;
        }}
        .diagram-title {{
            text-align: center;
            color: {palette.text};
            margin-bottom: 20px;
        }}
    </style>
</head>
<body>
    <div class="diagram-container">
        <div>
            <h1 class="diagram-title">{title}</h1>
{svg}
        </div>
    </div>
</body>
</html>'''

        return html
