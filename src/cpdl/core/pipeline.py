from __future__ import annotations

from cpdl.core.cipher import decrypt_buffer
from cpdl.core.config import RunProfile
from cpdl.core.format_search import search_format
from cpdl.core.io import load_buffer
from cpdl.core.records import SearchResult


def analyze_buffer(buffer: bytes, profile: RunProfile) -> SearchResult:
    """Optionally decrypt `buffer`, then run the format search on it.

    The input buffer is never modified; decryption yields a new one.
    """
    profile.validate()
    key = profile.key
    if profile.decrypt and key is not None:
        buffer = decrypt_buffer(buffer, key)
    return search_format(buffer, profile.search, decrypted=profile.decrypt)


def analyze_file(profile: RunProfile) -> SearchResult:
    """Validate the profile, then load and analyze its input file."""
    profile.validate()
    return analyze_buffer(load_buffer(profile.input_path), profile)
