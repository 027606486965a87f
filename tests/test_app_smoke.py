from __future__ import annotations

import pytest

textual = pytest.importorskip("textual")
from cpdl.core.records import FormatCandidate, Record, SearchResult  # noqa: E402
from cpdl.core.type_names import BUILTIN_TABLES  # noqa: E402
from cpdl.widgets.record_table import RecordTable  # noqa: E402
from cpdl.widgets.summary import SearchSummary  # noqa: E402
from cpdl.widgets.type_frequencies import TypeFrequencies  # noqa: E402

NAMES = BUILTIN_TABLES["plain"]

RECORDS = (
    Record(3437124069, 1.0, 2.0, 3.0, 0),
    Record(3437124069, 4.0, 5.0, 6.0, 16),
    Record(1462988517, 7.0, 8.0, 9.0, 32),
)


def make_result(records: tuple[Record, ...] = RECORDS, decrypted: bool = False) -> SearchResult:
    best = FormatCandidate(record_size=16, header_skip=0, byte_order="little", records=records)
    return SearchResult(best=best, hypotheses=64, decrypted=decrypted)


def test_app_constructs() -> None:
    # Import here to avoid E402 when textual is absent
    from cpdl.app import CpdlApp

    app = CpdlApp(make_result(), NAMES, "/tmp/map.pdl")
    # Do not run the app; just ensure construction doesn't crash
    assert app is not None
    assert "map.pdl" in app.title


def test_summary_text() -> None:
    text = SearchSummary(make_result(decrypted=True), "map.pdl").summary_text().plain
    assert "record size: 16 bytes" in text
    assert "byte order: little" in text
    assert "objects: 3" in text
    assert "AES-128/ECB" in text

    empty = SearchSummary(make_result(()), "map.pdl").summary_text().plain
    assert "no plausible records" in empty


def test_record_table_cells() -> None:
    table = RecordTable(RECORDS, NAMES)
    cells = [c.plain for c in table.row_cells(2, RECORDS[2])]
    assert cells == ["2", "0x000020", "1462988517", "Road", "7.00", "8.00", "9.00"]


def test_type_frequency_panel() -> None:
    text = TypeFrequencies(RECORDS, NAMES).frequency_text().plain
    assert "Vehicle" in text and "Road" in text
    assert text.index("1462988517") < text.index("3437124069")
    assert "(none)" in TypeFrequencies((), NAMES).frequency_text().plain
