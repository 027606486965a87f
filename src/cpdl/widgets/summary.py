from __future__ import annotations

from rich.text import Text
from textual.widgets import Static

from cpdl.core.records import SearchResult
from cpdl.ui.palette import PALETTE


class SearchSummary(Static):
    """One-line summary of the winning format hypothesis."""

    def __init__(self, result: SearchResult, source: str) -> None:
        super().__init__()
        self._result = result
        self._source = source

    def on_mount(self) -> None:
        self.update(self.summary_text())

    def summary_text(self) -> Text:
        r = self._result
        text = Text()
        pairs = [
            ("file", self._source),
            ("record size", f"{r.record_size} bytes"),
            ("header skip", str(r.header_skip)),
            ("byte order", r.byte_order),
            ("objects", str(len(r.records))),
            ("hypotheses", str(r.hypotheses)),
        ]
        if r.decrypted:
            pairs.append(("cipher", "AES-128/ECB"))
        for i, (label, value) in enumerate(pairs):
            if i:
                text.append("  ")
            text.append(f"{label}: ", style=PALETTE.summary_label)
            text.append(value, style=f"bold {PALETTE.summary_value}")
        if not r.records:
            text.append("  no plausible records", style=PALETTE.parsed_error)
        return text
