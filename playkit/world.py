"""Grid worlds where '.' marks an empty cell and anything else a wall."""

from __future__ import annotations

from dataclasses import dataclass, field

_DEFAULT_MAP = """
    ++++++++++
    +.+....+.+
    +.+....+.+
    +.+++..+.+
    +.+....+.+
    +.+....+.+
    +........+
    +.+++.++++
    +.+......+
    ++++++++++
"""


@dataclass
class World:
    """A grid of cells, one string per row."""

    rows: list[str] = field(default_factory=list)
    cols: int = 0

    @classmethod
    def parse(cls, text: str) -> World:
        """Build a world from text, ignoring blank lines and surrounding spaces."""
        rows = [line.strip() for line in text.splitlines()]
        rows = [row for row in rows if row]
        return cls(rows=rows, cols=max((len(row) for row in rows), default=0))

    def dims(self) -> tuple[int, int]:
        """Return (rows, cols)."""
        return len(self.rows), self.cols

    def empty_at(self, row: int, col: int) -> bool:
        """Report whether a cell is empty; cells outside the grid are walls."""
        if not 0 <= row < len(self.rows):
            return False
        line = self.rows[row]
        if not 0 <= col < len(line):
            return False
        return line[col] == "."


def default_world() -> World:
    """Return the built-in 10x10 maze."""
    return World.parse(_DEFAULT_MAP)