from document import Column

con_dict = {
    # seeding
    "row_count": 20,
    "sheet_names": ["Sheet1", "Sheet2"],
    "cell_label": "Cell {column}{row}",

    # (id, name, width)
    "columns": [
        (1, "A", 100),
        (2, "B", 150),
        (3, "C", 200),
    ],
}


def get_value(key):
    return con_dict[key]


def set_value(key, value):
    if key not in con_dict:
        raise KeyError(key)
    ty = type(con_dict[key])
    if ty is list and isinstance(value, str):
        raise TypeError(f"{key} needs a list, got {value!r}")
    # naive cast
    con_dict[key] = ty(value)


def get_all():
    return con_dict


def default_columns():
    return [Column(id=cid, name=name, width=width) for cid, name, width in con_dict["columns"]]


def column_name(index):
    """Spreadsheet letter for a 0-based column index (0 -> A, 26 -> AA)."""
    name = ""
    while index >= 0:
        name = chr(index % 26 + 65) + name
        index = index // 26 - 1
    return name


def letter_columns(count, width=100):
    return [Column(id=index + 1, name=column_name(index), width=width) for index in range(count)]
