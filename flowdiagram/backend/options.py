"""Render option bundle and the closed sets of formats, themes and orientations."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from flowdiagram.core.errors import UnsupportedFormatError


class OutputFormat(str, Enum):
    SVG = "svg"
    HTML = "html"
    JSON = "json"
    MERMAID = "mermaid"
    DOT = "dot"

    @classmethod
    def parse(cls, value: Union[str, "OutputFormat"]) -> "OutputFormat":
        try:
            return cls(value)
        except ValueError:
            choices = ", ".join(f.value for f in cls)
            raise UnsupportedFormatError(f"Unsupported visualization format: {value}. Use: {choices}") from None


class Theme(str, Enum):
    LIGHT = "light"
    DARK = "dark"


class Orientation(str, Enum):
    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"


@dataclass(frozen=True)
class Palette:
    background: str
    text: str
    node: str
    edge: str
    grid: str


PALETTES = {
    Theme.LIGHT: Palette(background="#ffffff", text="#000000", node="#f0f0f0", edge="#333333", grid="#dddddd"),
    Theme.DARK: Palette(background="#1a1a1a", text="#ffffff", node="#2d2d2d", edge="#666666", grid="#333333"),
}


@dataclass
class RenderOptions:
    """
    Presentation options for a single render call.

    String values are accepted for the enum fields. An unknown format raises
    ``UnsupportedFormatError``; an unknown theme or orientation raises
    ``ValueError``.
    """

    format: Union[OutputFormat, str] = OutputFormat.SVG
    theme: Union[Theme, str] = Theme.LIGHT
    orientation: Union[Orientation, str] = Orientation.VERTICAL
    show_labels: bool = True
    show_grid: bool = False

    def __post_init__(self):
        self.format = OutputFormat.parse(self.format)
        self.theme = Theme(self.theme)
        self.orientation = Orientation(self.orientation)

    @property
    def palette(self) -> Palette:
        return PALETTES[self.theme]

    def background(self, diagram_background: Optional[str] = None) -> str:
        """Page colour: the diagram's own background on light, the palette on dark."""
        if self.theme == Theme.LIGHT and diagram_background:
            return diagram_background
        return self.palette.background

    @property
    def horizontal(self) -> bool:
        return self.orientation == Orientation.HORIZONTAL
