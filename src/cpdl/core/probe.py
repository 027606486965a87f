"""Run probing for a single format hypothesis.

A correct (record size, header skip, byte order) guess decodes long unbroken
runs of plausible coordinates; a wrong one quickly hits noise. Run length is
therefore the fitness signal used by the format search.
"""

from __future__ import annotations

from cpdl.core.endian import Endian, read_f32, read_u32
from cpdl.core.plausibility import PLAUSIBILITY_LIMIT, coords_plausible
from cpdl.core.records import (
    RECORD_SHAPE_SIZE,
    TYPE_OFFSET,
    X_OFFSET,
    Y_OFFSET,
    Z_OFFSET,
    FormatCandidate,
    Record,
)

# Header skips tried: 0, 4, ..., 60
HEADER_LIMIT = 64
HEADER_STRIDE = 4


def decode_record(buffer: bytes, offset: int, endian: Endian) -> Record:
    """Decode the record shape at `offset` without any plausibility check."""
    return Record(
        type_tag=read_u32(buffer, offset + TYPE_OFFSET, endian),
        x=read_f32(buffer, offset + X_OFFSET, endian),
        y=read_f32(buffer, offset + Y_OFFSET, endian),
        z=read_f32(buffer, offset + Z_OFFSET, endian),
        offset=offset,
    )


def probe_run(
    buffer: bytes,
    record_size: int,
    header_skip: int,
    endian: Endian,
    *,
    limit: float = PLAUSIBILITY_LIMIT,
) -> tuple[Record, ...]:
    """Decode consecutive records from `header_skip` until the first implausible one.

    The implausible record itself is not included. Returns an empty tuple when
    the first window already fails or does not fit.

    Raises:
        ValueError: If `record_size` cannot hold the record shape or
            `header_skip` is negative
    """
    if record_size < RECORD_SHAPE_SIZE:
        raise ValueError(f"record_size must be >= {RECORD_SHAPE_SIZE}, got {record_size}")
    if header_skip < 0:
        raise ValueError("header_skip must be >= 0")

    run: list[Record] = []
    offset = header_skip
    while offset + record_size <= len(buffer):
        record = decode_record(buffer, offset, endian)
        if not coords_plausible(record.x, record.y, record.z, limit):
            break
        run.append(record)
        offset += record_size
    return tuple(run)


def header_skips(header_limit: int = HEADER_LIMIT, header_stride: int = HEADER_STRIDE) -> range:
    return range(0, header_limit, header_stride)


def scan_header_offsets(
    buffer: bytes,
    record_size: int,
    endian: Endian,
    *,
    header_limit: int = HEADER_LIMIT,
    header_stride: int = HEADER_STRIDE,
    limit: float = PLAUSIBILITY_LIMIT,
) -> FormatCandidate:
    """Probe every header skip for one (record size, byte order) pair.

    Keeps the strictly longest run; on ties the lowest skip wins.
    """
    best: FormatCandidate | None = None
    for skip in header_skips(header_limit, header_stride):
        candidate = FormatCandidate(
            record_size=record_size,
            header_skip=skip,
            byte_order=endian,
            records=probe_run(buffer, record_size, skip, endian, limit=limit),
        )
        if candidate.beats(best):
            best = candidate

    if best is None:
        # Empty skip range: report skip 0 with no records
        best = FormatCandidate(record_size=record_size, header_skip=0, byte_order=endian)
    return best
