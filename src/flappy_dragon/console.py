"""
console.py: The drawing surface the game core renders onto.

Coordinates are console cells, (0, 0) at the top-left. The core never
touches a window directly; the host hands it something satisfying Console.
"""

from typing import Protocol, Tuple

Color = Tuple[int, int, int]


class Console(Protocol):

    def cls(self) -> None:
        """Clear every cell."""

    def cls_bg(self, color: Color) -> None:
        """Clear and fill the background with one colour."""

    def set(self, x: int, y: int, fg: Color, bg: Color, glyph: str) -> None:
        """Draw one glyph into a single cell."""

    def set_fancy(
        self,
        x: float,
        y: float,
        rotation: float,
        scale: float,
        fg: Color,
        bg: Color,
        glyph: str
    ) -> None:
        """Draw a sprite at a fractional position with rotation (degrees) and scale."""

    def print(self, x: int, y: int, text: str) -> None:
        """Left-aligned text starting at a cell."""

    def print_centered(self, y: int, text: str) -> None:
        """Text horizontally centred on a row."""
