from typing import List, Optional

from PySide6.QtCore import QObject, Signal

import config
from document import Column, Sheet
from logger import get_logger

log = get_logger(__name__)


class GridStore(QObject):
    """In-memory state for every sheet of the grid editor.

    Sheets, columns and the active sheet id are live attributes that any
    consumer may read or mutate. Mutations made through the store methods
    emit signals; direct mutation of the lists does not, and callers doing
    that should follow up with ``notify_reset()``.
    """

    data_reset = Signal()
    cell_changed = Signal(int, int, int)       # sheet_id, row, column_id
    active_sheet_changed = Signal(int)

    def __init__(self, sheet_names=None, columns=None, row_count=None, parent=None):
        super().__init__(parent)

        if sheet_names is None:
            sheet_names = config.get_value("sheet_names")
        if not sheet_names:
            raise ValueError("a grid store needs at least one sheet")

        self.sheets: List[Sheet] = [
            Sheet(index + 1, name) for index, name in enumerate(sheet_names)
        ]
        self.columns: List[Column] = (
            list(columns) if columns is not None else config.default_columns()
        )
        self.row_count = config.get_value("row_count") if row_count is None else row_count

        ids = [col.id for col in self.columns]
        if len(ids) != len(set(ids)):
            raise ValueError(f"duplicate column ids: {ids}")

        self._active_sheet_id = self.sheets[0].id

        self.initialize()

    # ---------- SEEDING ----------

    def initialize(self):
        """Regenerate every sheet's rows from the current columns.

        Existing cell data is discarded, not merged.
        """
        label = config.get_value("cell_label")
        for sheet in self.sheets:
            sheet.fill(self.columns, self.row_count, label)

        log.debug(
            "seeded %d sheets with %d rows x %d columns",
            len(self.sheets), self.row_count, len(self.columns),
        )
        self.data_reset.emit()

    def notify_reset(self):
        self.data_reset.emit()

    # ---------- LOOKUP ----------

    @property
    def active_sheet_id(self):
        return self._active_sheet_id

    @property
    def active_sheet(self):
        return self.sheet(self._active_sheet_id)

    def sheet(self, sheet_id) -> Sheet:
        for sheet in self.sheets:
            if sheet.id == sheet_id:
                return sheet
        raise KeyError(sheet_id)

    def column(self, column_id) -> Column:
        for col in self.columns:
            if col.id == column_id:
                return col
        raise KeyError(column_id)

    def cell(self, sheet_id, row, column_id):
        return self.sheet(sheet_id).cell(row, column_id)

    # ---------- MUTATION ----------

    def set_active_sheet(self, sheet_id):
        self.sheet(sheet_id)
        if sheet_id == self._active_sheet_id:
            return
        self._active_sheet_id = sheet_id
        self.active_sheet_changed.emit(sheet_id)

    def set_cell_value(self, sheet_id, row, column_id, value) -> bool:
        cell = self.cell(sheet_id, row, column_id)
        value = "" if value is None else str(value)
        if cell.value == value:
            return False

        cell.value = value
        self.cell_changed.emit(sheet_id, row, column_id)
        return True

    def set_cell_style(self, sheet_id, row, column_id, style: Optional[dict]):
        cell = self.cell(sheet_id, row, column_id)
        cell.style = dict(style or {})
        self.cell_changed.emit(sheet_id, row, column_id)
