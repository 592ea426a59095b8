"""GridRect component.

Rectangular cell region expressed as grid lines numbered from 1, the same way
a CSS grid places items: a single cell at row ``r`` and column ``c`` spans
``r..r+1`` and ``c..c+1``.
"""

from dataclasses import dataclass
from typing import Any, Mapping, Tuple


@dataclass(frozen=True)
class GridRect:
    """Grid region.

    Attributes:
        row_start: First row line.
        col_start: First column line.
        row_end: Last row line (exclusive cell boundary).
        col_end: Last column line (exclusive cell boundary).
    """

    row_start: int
    col_start: int
    row_end: int
    col_end: int

    def __post_init__(self) -> None:
        if self.row_start > self.row_end or self.col_start > self.col_end:
            raise ValueError(f"Inverted grid region: {self}")

    @classmethod
    def cell(cls, row: int, col: int) -> "GridRect":
        """Unit cell whose leading corner is ``(row, col)``."""
        return cls(row, col, row + 1, col + 1)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "GridRect":
        """Build from ``row_start``/``column_start``/``row_end``/``column_end`` keys.

        ``col_start``/``col_end`` are accepted as aliases. When the end lines
        are omitted a unit cell is assumed.
        """
        try:
            row_start = int(data["row_start"])
            col_start = int(data.get("column_start", data.get("col_start")))  # type: ignore[arg-type]
        except (KeyError, TypeError) as exc:
            raise ValueError(f"Grid position needs row_start and column_start: {data!r}") from exc
        row_end = int(data.get("row_end", row_start + 1))
        col_end = int(data.get("column_end", data.get("col_end", col_start + 1)))
        return cls(row_start, col_start, row_end, col_end)

    @property
    def leading_corner(self) -> Tuple[int, int]:
        return (self.row_start, self.col_start)

    @property
    def is_unit(self) -> bool:
        """True if the region covers exactly one cell."""
        return self.row_end == self.row_start + 1 and self.col_end == self.col_start + 1

    def shifted(self, d_row: int, d_col: int) -> "GridRect":
        """Translate start and end lines by the same amount."""
        return GridRect(
            self.row_start + d_row,
            self.col_start + d_col,
            self.row_end + d_row,
            self.col_end + d_col,
        )
