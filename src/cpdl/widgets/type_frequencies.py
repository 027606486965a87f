from __future__ import annotations

from collections.abc import Callable

from rich.text import Text
from textual.widgets import Static

from cpdl.core.records import Record
from cpdl.core.report import type_frequencies
from cpdl.ui.palette import PALETTE

BAR_WIDTH = 20


class TypeFrequencies(Static):
    """Per-tag record counts with a proportional bar."""

    def __init__(self, records: tuple[Record, ...], type_name: Callable[[int], str]) -> None:
        super().__init__()
        self._records = records
        self._type_name = type_name

    def on_mount(self) -> None:
        self.update(self.frequency_text())

    def frequency_text(self) -> Text:
        text = Text("Type frequencies\n", style=f"bold {PALETTE.accent}")
        freqs = type_frequencies(self._records)
        if not freqs:
            text.append("(none)", style=PALETTE.parsed_punct)
            return text
        top = max(count for _, count in freqs)
        for tag, count in freqs:
            filled = max(1, round(count / top * BAR_WIDTH))
            text.append(f"{tag:>10} ", style=PALETTE.parsed_value)
            text.append(f"{self._type_name(tag):<8} ", style=PALETTE.parsed_type)
            text.append("█" * filled, style=PALETTE.freq_bar)
            text.append(f" {count}\n", style=PALETTE.accent_dim)
        return text
