from __future__ import annotations

from collections.abc import Callable

from rich.text import Text
from textual.widgets import DataTable

from cpdl.core.records import Record
from cpdl.ui.palette import PALETTE

COLUMNS = ("#", "Offset", "Type ID", "Type", "X", "Y", "Z")


class RecordTable(DataTable):
    """Decoded records, one row each."""

    def __init__(self, records: tuple[Record, ...], type_name: Callable[[int], str]) -> None:
        super().__init__(zebra_stripes=True, cursor_type="row")
        self._records = records
        self._type_name = type_name

    def on_mount(self) -> None:
        self.add_columns(*COLUMNS)
        for i, rec in enumerate(self._records):
            self.add_row(*self.row_cells(i, rec), key=str(rec.offset))

    def row_cells(self, index: int, rec: Record) -> tuple[Text, ...]:
        return (
            Text(str(index), style=PALETTE.parsed_index),
            Text(f"0x{rec.offset:06x}", style=PALETTE.parsed_offset),
            Text(str(rec.type_tag), style=PALETTE.parsed_value),
            Text(self._type_name(rec.type_tag), style=PALETTE.parsed_type),
            Text(f"{rec.x:.2f}", justify="right"),
            Text(f"{rec.y:.2f}", justify="right"),
            Text(f"{rec.z:.2f}", justify="right"),
        )
