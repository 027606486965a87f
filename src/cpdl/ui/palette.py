from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Palette:
    accent: str
    accent_dim: str
    panel_border: str
    parsed_value: str
    parsed_index: str
    parsed_offset: str
    parsed_type: str
    parsed_punct: str
    parsed_error: str
    summary_label: str
    summary_value: str
    freq_bar: str


DEFAULT = Palette(
    accent="#5ea1ff",
    accent_dim="#4c75c6",
    panel_border="#3b4252",
    parsed_value="#ffffff",
    parsed_index="#5ea1ff",
    parsed_offset="#8892a0",
    parsed_type="#4c75c6",
    parsed_punct="#6b7280",
    parsed_error="#ff5555",
    summary_label="#8892a0",
    summary_value="#ffffff",
    freq_bar="#10b981",
)

# Selected palette for now
PALETTE = DEFAULT
