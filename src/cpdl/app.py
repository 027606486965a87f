from __future__ import annotations

import os
from collections.abc import Callable

from textual.app import App, ComposeResult
from textual.containers import Horizontal
from textual.widgets import Footer, Header

from cpdl.core.records import SearchResult
from cpdl.ui.palette import PALETTE
from cpdl.widgets.record_table import RecordTable
from cpdl.widgets.summary import SearchSummary
from cpdl.widgets.type_frequencies import TypeFrequencies


class CpdlApp(App):
    """Textual viewer for a finished format search."""

    CSS = f"""
    SearchSummary {{
        height: auto;
        padding: 0 1;
        border-bottom: solid {PALETTE.panel_border};
    }}
    Horizontal {{
        height: 1fr;
    }}
    RecordTable {{
        width: 3fr;
    }}
    TypeFrequencies {{
        width: 1fr;
        padding: 0 1;
        border-left: solid {PALETTE.panel_border};
    }}
    """

    BINDINGS = [
        ("q", "quit", "Quit"),
        ("g", "goto_first", "First"),
        ("G", "goto_last", "Last"),
    ]

    def __init__(self, result: SearchResult, type_name: Callable[[int], str], source: str) -> None:
        super().__init__()
        self._result = result
        self._type_name = type_name
        self._source = source
        self.title = f"cpdl - {os.path.basename(source)}"
        self.table: RecordTable | None = None

    def compose(self) -> ComposeResult:  # noqa: D401 - Textual API
        self.table = RecordTable(self._result.records, self._type_name)
        yield Header(show_clock=False)
        yield SearchSummary(self._result, self._source)
        with Horizontal():
            yield self.table
            yield TypeFrequencies(self._result.records, self._type_name)
        yield Footer()

    def on_mount(self) -> None:
        if self.table is not None:
            self.set_focus(self.table)

    def action_goto_first(self) -> None:
        if self.table is not None and self.table.row_count:
            self.table.move_cursor(row=0)

    def action_goto_last(self) -> None:
        if self.table is not None and self.table.row_count:
            self.table.move_cursor(row=self.table.row_count - 1)
