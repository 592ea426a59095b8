"""Map / view extents measured in whole cells."""

from dataclasses import dataclass

from burnout.components.grid_rect import GridRect


@dataclass(frozen=True)
class GridExtent:
    """Number of rows and columns of a grid.

    Attributes:
        rows: Row count.
        cols: Column count.
    """

    rows: int
    cols: int

    def __post_init__(self) -> None:
        if self.rows <= 0 or self.cols <= 0:
            raise ValueError(f"Grid extent must be positive, got {self.rows}x{self.cols}")

    def contains(self, rect: GridRect) -> bool:
        """Return True if ``rect`` lies fully inside lines ``1..rows+1`` / ``1..cols+1``."""
        return (
            1 <= rect.row_start
            and rect.row_end <= self.rows + 1
            and 1 <= rect.col_start
            and rect.col_end <= self.cols + 1
        )
