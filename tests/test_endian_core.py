from __future__ import annotations

import math
import struct

import pytest

from cpdl.core.endian import (
    BOTH_ENDIANS,
    OutOfBounds,
    normalize_endian,
    normalize_endians,
    read_f32,
    read_u32,
)


def test_read_u32_endianness() -> None:
    data = bytes([0x78, 0x56, 0x34, 0x12])
    assert read_u32(data, 0, "little") == 0x12345678
    assert read_u32(data, 0, "big") == 0x78563412


def test_read_u32_is_unsigned() -> None:
    assert read_u32(b"\xff\xff\xff\xff", 0, "little") == 0xFFFFFFFF


def test_read_f32_endianness_and_offset() -> None:
    data = b"\x00\x00" + struct.pack("<f", 1.5) + struct.pack(">f", -2.25)
    assert read_f32(data, 2, "little") == 1.5
    assert read_f32(data, 6, "big") == -2.25


def test_read_f32_passes_nan_and_inf_through() -> None:
    assert math.isnan(read_f32(b"\x7f\xc0\x00\x00", 0, "big"))
    assert read_f32(b"\x00\x00\x80\x7f", 0, "little") == math.inf


@pytest.mark.parametrize("offset", [-1, 1, 4])
def test_out_of_bounds(offset: int) -> None:
    with pytest.raises(OutOfBounds):
        read_u32(b"\x00\x00\x00\x00", offset, "little")
    with pytest.raises(IndexError):
        read_f32(b"\x00\x00\x00\x00", offset, "big")


def test_normalize_endian() -> None:
    assert normalize_endian("BIG") == "big"
    assert normalize_endian(None) is None
    with pytest.raises(ValueError):
        normalize_endian("middle")


def test_normalize_endians() -> None:
    assert normalize_endians("both") == BOTH_ENDIANS == ("big", "little")
    assert normalize_endians("little") == ("little",)
    # Search order is canonical regardless of the order given
    assert normalize_endians(["little", "big", "little"]) == ("big", "little")
    assert normalize_endians(("little", "big")) == BOTH_ENDIANS
    assert normalize_endians(["BIG"]) == ("big",)
    with pytest.raises(ValueError):
        normalize_endians([])


@pytest.mark.parametrize("value", [5, [5], ["little", 1.5], {"big": 1}, [None]])
def test_normalize_endians_rejects_non_strings(value: object) -> None:
    with pytest.raises(ValueError):
        normalize_endians(value)  # type: ignore[arg-type]
