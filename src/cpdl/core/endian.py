"""Byte order support for cpdl: types, normalization, and 4-byte decoding."""

from __future__ import annotations

import struct
from typing import Literal

# Type alias for byte order
Endian = Literal["little", "big"]

# Both orders in search order: big before little
BOTH_ENDIANS: tuple[Endian, ...] = ("big", "little")

WORD_SIZE = 4


class OutOfBounds(IndexError):
    """Raised when fewer than 4 bytes are available at the requested offset."""


def normalize_endian(value: str | None) -> Endian | None:
    """Normalize an endian value from config or the command line.

    Args:
        value: String value (or None)

    Returns:
        Normalized Endian value, or None if input was None

    Raises:
        ValueError: If value is not the string 'little' or 'big'
    """
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValueError(f"Invalid endian {value!r}. Expected 'little' or 'big'.")

    value_lower = value.lower()
    if value_lower not in ("little", "big"):
        raise ValueError(f"Invalid endian '{value}'. Expected 'little' or 'big'.")

    return value_lower  # type: ignore[return-value]


def normalize_endians(value: str | list[str] | tuple[str, ...]) -> tuple[Endian, ...]:
    """Expand 'both' or a list of names into an ordered tuple of byte orders.

    Duplicates are dropped. The result is always in search order (big before
    little), whatever order the names were given in.
    """
    if isinstance(value, str):
        if value.lower() == "both":
            return BOTH_ENDIANS
        value = [value]
    if not isinstance(value, (list, tuple)):
        raise ValueError(f"Invalid byte orders {value!r}. Expected a name or a list of names.")

    seen = {normalize_endian(item) for item in value}
    result = tuple(e for e in BOTH_ENDIANS if e in seen)
    if not result:
        raise ValueError("At least one byte order is required.")
    return result


def _word(data: bytes, offset: int) -> bytes:
    if offset < 0 or offset + WORD_SIZE > len(data):
        raise OutOfBounds(
            f"need {WORD_SIZE} bytes at offset {offset}, buffer has {len(data)}"
        )
    return data[offset : offset + WORD_SIZE]


def read_u32(data: bytes, offset: int, endian: Endian) -> int:
    """Decode an unsigned 32-bit integer at `offset`.

    Args:
        data: Buffer to read from
        offset: Absolute position of the first byte
        endian: Byte order ('little' or 'big')

    Returns:
        Decoded integer value

    Raises:
        OutOfBounds: If fewer than 4 bytes remain at `offset`
    """
    return int.from_bytes(_word(data, offset), byteorder=endian, signed=False)


def read_f32(data: bytes, offset: int, endian: Endian) -> float:
    """Decode an IEEE-754 32-bit float at `offset`.

    NaN and infinity bit patterns are returned as-is.

    Raises:
        OutOfBounds: If fewer than 4 bytes remain at `offset`
    """
    format_char = "<f" if endian == "little" else ">f"
    return struct.unpack(format_char, _word(data, offset))[0]
