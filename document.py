from dataclasses import dataclass, field
from typing import Dict, List, Union

StyleValue = Union[str, int, float, bool]


@dataclass
class Cell:
    value: str = ""
    style: Dict[str, StyleValue] = field(default_factory=dict)


@dataclass(frozen=True)
class Column:
    id: int
    name: str
    width: int


class Sheet:
    def __init__(self, sheet_id, name):
        self.id = sheet_id
        self.name = name
        self.data: List[Dict[int, Cell]] = []   # [{column_id: Cell}]

    @property
    def row_count(self):
        return len(self.data)

    def cell(self, row, column_id):
        if row < 0:
            raise IndexError(row)
        return self.data[row][column_id]

    def fill(self, columns, row_count, label):
        """Replace every row with freshly generated cells.

        Row ``r`` gets one cell per column, valued ``label`` formatted with
        the column name and the 1-based row number.
        """
        self.data = [
            {
                col.id: Cell(value=label.format(column=col.name, row=row + 1))
                for col in columns
            }
            for row in range(row_count)
        ]

    def __repr__(self):
        return f"Sheet(id={self.id!r}, name={self.name!r}, rows={self.row_count})"
