"""Decoded records and format hypotheses.

A record is the fixed shape this tool knows how to read: one 32-bit type tag
followed by three 32-bit float coordinates. Everything past byte 16 of a
record window is ignored.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from cpdl.core.endian import Endian

# Field positions inside a record window
TYPE_OFFSET = 0
X_OFFSET = 4
Y_OFFSET = 8
Z_OFFSET = 12

# Smallest window that holds the full record shape
RECORD_SHAPE_SIZE = 16


@dataclass(frozen=True)
class Record:
    """One decoded record.

    Attributes:
        type_tag: Unsigned 32-bit type identifier
        x: First coordinate
        y: Second coordinate
        z: Third coordinate
        offset: Absolute buffer position where the record starts
    """
    type_tag: int
    x: float
    y: float
    z: float
    offset: int

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dict."""
        return {
            "type_tag": self.type_tag,
            "x": self.x,
            "y": self.y,
            "z": self.z,
            "offset": self.offset,
        }


@dataclass(frozen=True)
class FormatCandidate:
    """A (record size, header skip, byte order) hypothesis and the run it yields."""
    record_size: int
    header_skip: int
    byte_order: Endian
    records: tuple[Record, ...] = ()

    @property
    def count(self) -> int:
        return len(self.records)

    def beats(self, other: FormatCandidate | None) -> bool:
        """Strictly longer run wins; equal runs keep the earlier candidate."""
        return other is None or self.count > other.count


@dataclass(frozen=True)
class SearchResult:
    """Best hypothesis retained after an exhaustive format search.

    Attributes:
        best: Winning candidate (may hold zero records)
        hypotheses: Number of (size, order, skip) combinations probed
        decrypted: Whether the buffer was decrypted before searching
    """
    best: FormatCandidate
    hypotheses: int = 0
    decrypted: bool = False

    @property
    def record_size(self) -> int:
        return self.best.record_size

    @property
    def header_skip(self) -> int:
        return self.best.header_skip

    @property
    def byte_order(self) -> Endian:
        return self.best.byte_order

    @property
    def records(self) -> tuple[Record, ...]:
        return self.best.records

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dict."""
        return {
            "record_size": self.record_size,
            "header_skip": self.header_skip,
            "byte_order": self.byte_order,
            "hypotheses": self.hypotheses,
            "decrypted": self.decrypted,
            "records": [r.to_dict() for r in self.records],
        }
