from PySide6.QtCore import Qt, QAbstractTableModel, QModelIndex, QSize


class TableModel(QAbstractTableModel):
    ROW_HEIGHT = 24

    def __init__(self, store, parent=None):
        super().__init__(parent)
        self.store = store

        store.data_reset.connect(self._reset)
        store.active_sheet_changed.connect(self._reset)
        store.cell_changed.connect(self._on_cell_changed)

    @property
    def sheet(self):
        return self.store.active_sheet

    def column_id(self, section):
        return self.store.columns[section].id

    # ---------- REQUIRED OVERRIDES ----------

    def rowCount(self, parent=QModelIndex()):
        if parent.isValid():
            return 0
        return self.sheet.row_count

    def columnCount(self, parent=QModelIndex()):
        if parent.isValid():
            return 0
        return len(self.store.columns)

    def flags(self, index):
        if not self._has_cell(index):
            # column added after seeding, no cell to write into
            return Qt.ItemIsSelectable | Qt.ItemIsEnabled
        return Qt.ItemIsSelectable | Qt.ItemIsEditable | Qt.ItemIsEnabled

    def _has_cell(self, index):
        if not index.isValid():
            return False
        row = self.sheet.data[index.row()]
        return self.column_id(index.column()) in row

    # ---------- HEADERS ----------

    def headerData(self, section, orientation, role=Qt.DisplayRole):
        if orientation == Qt.Horizontal:
            if not 0 <= section < len(self.store.columns):
                return None
            col = self.store.columns[section]
            if role == Qt.DisplayRole:
                return col.name
            if role == Qt.SizeHintRole:
                return QSize(col.width, self.ROW_HEIGHT)
            return None

        if role == Qt.DisplayRole:
            return str(section + 1)
        return None

    def data(self, index, role=Qt.DisplayRole):
        if not index.isValid():
            return None

        if role in (Qt.DisplayRole, Qt.EditRole):
            row = self.sheet.data[index.row()]
            cell = row.get(self.column_id(index.column()))
            return "" if cell is None else cell.value
        return None

    def setData(self, index, value, role=Qt.EditRole):
        if role != Qt.EditRole or not self._has_cell(index):
            return False

        # the store's cell_changed signal emits dataChanged for us
        return self.store.set_cell_value(
            self.store.active_sheet_id,
            index.row(),
            self.column_id(index.column()),
            value,
        )

    # ---------- STORE NOTIFICATIONS ----------

    def _reset(self, *args):
        self.beginResetModel()
        self.endResetModel()

    def _on_cell_changed(self, sheet_id, row, column_id):
        if sheet_id != self.store.active_sheet_id:
            return

        for section, col in enumerate(self.store.columns):
            if col.id == column_id:
                index = self.index(row, section)
                self.dataChanged.emit(index, index)
                return
