"""
Command-line interface for flowdiagram.

Usage:
    flowdiagram ./diagram.json -o ./build/
    flowdiagram ./diagram.json -o ./build/ --format mermaid
    flowdiagram ./summary.txt -o ./build/ --format svg --layout circular --theme dark
    flowdiagram ./diagram.json -o ./build/ --format text --layout none
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from flowdiagram.backend.options import OutputFormat, Orientation, RenderOptions, Theme
from flowdiagram.backend.renderer import render
from flowdiagram.backend.text import TextExporter
from flowdiagram.core.analysis import validate
from flowdiagram.core.errors import FlowDiagramError
from flowdiagram.core.ir import FlowDiagram
from flowdiagram.core.serialization import JsonSerializer
from flowdiagram.frontend.parser import load_diagram, parse_diagram_data
from flowdiagram.layout import LayoutAlgorithm

logger = logging.getLogger(__name__)

_EXTENSIONS = {
    "svg": ".svg",
    "html": ".html",
    "json": ".json",
    "mermaid": ".mmd",
    "dot": ".dot",
    "text": ".txt",
}


def load_input(filepath: Path) -> FlowDiagram:
    """
    Read a diagram from a file.

    A snapshot (JSON object with ``options``, ``nodes`` and ``edges``) is
    loaded verbatim, keeping its ids and positions. Anything else goes
    through ``parse_diagram_data`` and gets fresh ids.
    """
    content = filepath.read_text(encoding="utf-8")
    try:
        data = json.loads(content)
    except json.JSONDecodeError:
        data = None

    if isinstance(data, dict) and "options" in data and "nodes" in data and "edges" in data:
        return JsonSerializer.from_dict(data)
    return load_diagram(parse_diagram_data(content))


def export_diagram(diagram: FlowDiagram, output_path: Path, format: str, options: RenderOptions) -> Path:
    """Render a diagram and write it into ``output_path``."""
    if format == "text":
        content = TextExporter.to_text(diagram)
    else:
        content = render(diagram, options)

    # Sanitize the diagram title for use as filename
    safe_name = diagram.title.lower().replace(" ", "_").replace("/", "_")
    safe_name = "".join(c for c in safe_name if c.isalnum() or c == "_") or "diagram"

    output_file = output_path / f"{safe_name}{_EXTENSIONS[format]}"
    output_file.write_text(content, encoding="utf-8")
    return output_file


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entrypoint."""
    parser = argparse.ArgumentParser(
        prog="flowdiagram",
        description="Lay out and render flow diagrams.",
        epilog="Example: flowdiagram ./diagram.json -o ./build/ -f svg",
    )

    parser.add_argument(
        "input",
        type=Path,
        help="Snapshot JSON or text summary describing the diagram",
    )

    parser.add_argument(
        "-o", "--output",
        type=Path,
        default=Path("."),
        help="Output directory (default: current directory)",
    )

    parser.add_argument(
        "-f", "--format",
        choices=[f.value for f in OutputFormat] + ["text"],
        default="svg",
        help="Output format (default: svg)",
    )

    parser.add_argument(
        "--layout",
        choices=[a.value for a in LayoutAlgorithm] + ["none"],
        default="hierarchical",
        help="Layout algorithm, or 'none' to keep stored positions (default: hierarchical)",
    )

    parser.add_argument(
        "--theme",
        choices=[t.value for t in Theme],
        default="light",
        help="Colour theme (default: light)",
    )

    parser.add_argument(
        "--orientation",
        choices=[o.value for o in Orientation],
        default="vertical",
        help="Flow direction for svg/html/dot (default: vertical)",
    )

    parser.add_argument(
        "--no-labels",
        action="store_true",
        help="Leave node and edge labels out of svg/html output",
    )

    parser.add_argument(
        "--grid",
        action="store_true",
        help="Draw background grid lines in svg/html output",
    )

    parser.add_argument(
        "-t", "--title",
        type=str,
        help="Override the diagram title",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Verbose output",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # Validate input file
    if not args.input.exists():
        print(f"Error: File not found: {args.input}", file=sys.stderr)
        return 1

    if not args.input.is_file():
        print(f"Error: Not a file: {args.input}", file=sys.stderr)
        return 1

    try:
        diagram = load_input(args.input)
    except (FlowDiagramError, OSError, KeyError, UnicodeDecodeError) as e:
        print(f"Error loading file: {e}", file=sys.stderr)
        return 1

    if args.title:
        diagram.options.title = args.title

    report = validate(diagram)
    for finding in report.errors:
        logger.warning(finding)

    if args.layout != "none":
        diagram.auto_layout(args.layout)

    options = RenderOptions(
        format=args.format if args.format != "text" else OutputFormat.SVG,
        theme=args.theme,
        orientation=args.orientation,
        show_labels=not args.no_labels,
        show_grid=args.grid,
    )

    # Create output directory
    args.output.mkdir(parents=True, exist_ok=True)

    try:
        output_file = export_diagram(diagram, args.output, args.format, options)
    except (FlowDiagramError, OSError) as e:
        print(f"Error exporting {diagram.title}: {e}", file=sys.stderr)
        return 1

    if args.verbose:
        print(f"Exported '{diagram.title}' -> {output_file}")
    else:
        print(f"{output_file}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
