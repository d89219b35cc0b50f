from __future__ import annotations

from dataclasses import dataclass

import numpy as np

WHITE = (255, 255, 255)


@dataclass(frozen=True)
class ColoredChar:
    char: str
    colour: tuple[int, int, int]

    @property
    def css(self) -> str:
        r, g, b = self.colour
        return f"rgb({r}, {g}, {b})"


@dataclass
class CellGrid:
    chars: list[str]  # one string per row
    colours: np.ndarray  # (rows, cols, 3) uint8
    grayscale: bool = True

    @property
    def rows(self) -> int:
        return len(self.chars)

    @property
    def cols(self) -> int:
        return len(self.chars[0]) if self.chars else 0

    @property
    def text(self) -> str:
        """Rows joined by newlines, with a trailing newline after the last row."""
        return "".join(line + "\n" for line in self.chars)

    @property
    def grid(self) -> list[list[ColoredChar]]:
        return [
            [ColoredChar(char, tuple(int(v) for v in self.colours[r, c])) for c, char in enumerate(line)]
            for r, line in enumerate(self.chars)
        ]
