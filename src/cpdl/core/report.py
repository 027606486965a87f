"""Report sinks for search results: console report and flat export file."""

from __future__ import annotations

from collections import Counter
from collections.abc import Callable, Iterable

from rich.text import Text

from cpdl.core.records import Record, SearchResult
from cpdl.ui.palette import PALETTE

TypeNamer = Callable[[int], str]

CONSOLE_PRECISION = 2
EXPORT_PRECISION = 6
EXPORT_HEADER = "# type_id type_name x y z"


def type_frequencies(records: Iterable[Record]) -> list[tuple[int, int]]:
    """Count records per type tag, ascending by tag."""
    counts = Counter(r.type_tag for r in records)
    return sorted(counts.items())


def format_position(record: Record, precision: int = CONSOLE_PRECISION) -> str:
    return f"({record.x:.{precision}f}, {record.y:.{precision}f}, {record.z:.{precision}f})"


def build_console_report(result: SearchResult, type_name: TypeNamer) -> Text:
    """Render the human-readable report as styled rich Text."""
    out = Text()
    out.append(f"[cpdl] Detected record size: {result.record_size} bytes\n")
    out.append(f"[cpdl] Skipped header bytes: {result.header_skip}\n")
    out.append(f"[cpdl] Byte order: {result.byte_order}-endian\n")
    out.append(f"[cpdl] Parsed {len(result.records)} objects:\n\n")

    for i, rec in enumerate(result.records):
        out.append(f"{i:3d}", style=PALETTE.parsed_index)
        out.append(". Offset: ", style=PALETTE.parsed_punct)
        out.append(f"0x{rec.offset:6x}", style=PALETTE.parsed_offset)
        out.append(" | Type ID: ", style=PALETTE.parsed_punct)
        out.append(str(rec.type_tag), style=PALETTE.parsed_value)
        out.append(f" ({type_name(rec.type_tag)})", style=PALETTE.parsed_type)
        out.append(" | Pos: ", style=PALETTE.parsed_punct)
        out.append(format_position(rec), style=PALETTE.parsed_value)
        out.append("\n")

    out.append("\n[cpdl] Type Frequencies:\n")
    for tag, count in type_frequencies(result.records):
        out.append(f"  Type {tag} ({type_name(tag)}): {count} objects\n")
    return out


def format_console_report(result: SearchResult, type_name: TypeNamer) -> str:
    return build_console_report(result, type_name).plain


def format_export(records: Iterable[Record], type_name: TypeNamer) -> str:
    """Flat export: a comment header, then `type_id type_name x y z` per record."""
    lines = [EXPORT_HEADER]
    p = EXPORT_PRECISION
    for rec in records:
        lines.append(
            f"{rec.type_tag} {type_name(rec.type_tag)} {rec.x:.{p}f} {rec.y:.{p}f} {rec.z:.{p}f}"
        )
    return "\n".join(lines) + "\n"
