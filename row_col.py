from dataclasses import dataclass, field
from typing import List


@dataclass
class RowCol:
    """
    Rows and columns of a matrix that survive in a minor, in ascending order.
    """
    dimension: int = 0
    rows: List[int] = field(default_factory=list)
    cols: List[int] = field(default_factory=list)

    def __init__(self, dimension: int = 0):
        self.dimension = dimension
        self.rows = [0] * dimension
        self.cols = [0] * dimension

    def init(self) -> "RowCol":
        for i in range(self.dimension):
            self.rows[i] = i
            self.cols[i] = i
        return self

    def without(self, row_pos: int, col_pos: int) -> "RowCol":
        """
        Selection with the row at rows[row_pos] and the column at cols[col_pos] removed.
        """
        rc = RowCol(self.dimension - 1)
        rc.rows = self.rows[:row_pos] + self.rows[row_pos + 1:]
        rc.cols = self.cols[:col_pos] + self.cols[col_pos + 1:]
        return rc
