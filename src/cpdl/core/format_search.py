from __future__ import annotations

from cpdl.core.config import ConfigError, SearchProfile
from cpdl.core.probe import scan_header_offsets
from cpdl.core.records import FormatCandidate, SearchResult


def search_format(
    buffer: bytes,
    profile: SearchProfile | None = None,
    *,
    decrypted: bool = False,
) -> SearchResult:
    """Find the (record size, header skip, byte order) that decodes the longest run.

    Record sizes are tried in profile order and, within each size, byte
    orders in profile order. Only a strictly longer run replaces the current
    best, so the earliest combination wins ties. When nothing decodes, the
    first iterated combination is reported with zero records.
    """
    profile = profile or SearchProfile()

    best: FormatCandidate | None = None
    for record_size in profile.record_sizes:
        for endian in profile.byte_orders:
            candidate = scan_header_offsets(
                buffer,
                record_size,
                endian,
                header_limit=profile.header_limit,
                header_stride=profile.header_stride,
                limit=profile.plausibility_limit,
            )
            if candidate.beats(best):
                best = candidate

    if best is None:
        raise ConfigError("search profile has no record sizes or byte orders to try")
    return SearchResult(best=best, hypotheses=profile.hypothesis_count, decrypted=decrypted)
