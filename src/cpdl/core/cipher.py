"""Whole-buffer block cipher stage (AES-128, ECB).

Every 16-byte block is processed independently with the same key. There is
no padding scheme: a trailing partial block is dropped from the output.
"""

from __future__ import annotations

from Crypto.Cipher import AES

BLOCK_SIZE = AES.block_size
KEY_SIZE = 16


class KeyMaterialError(ValueError):
    """Raised when the supplied key cannot fill the cipher key block."""


def make_key_block(key: bytes | str) -> bytes:
    """Copy `key` into a 16-byte block, right-padded with zero bytes.

    Raises:
        KeyMaterialError: If the key is longer than 16 bytes
    """
    if isinstance(key, str):
        key = key.encode("utf-8")
    if len(key) > KEY_SIZE:
        raise KeyMaterialError(
            f"key is {len(key)} bytes but the key block holds only {KEY_SIZE} bytes"
        )
    return bytes(key).ljust(KEY_SIZE, b"\x00")


def whole_blocks(buffer: bytes) -> bytes:
    return buffer[: len(buffer) - len(buffer) % BLOCK_SIZE]


def decrypt_buffer(buffer: bytes, key: bytes | str) -> bytes:
    """Decrypt all whole blocks of `buffer`; returns a new buffer."""
    key_block = make_key_block(key)
    data = whole_blocks(buffer)
    if not data:
        return b""
    return AES.new(key_block, AES.MODE_ECB).decrypt(data)


def encrypt_buffer(buffer: bytes, key: bytes | str) -> bytes:
    """Encrypt all whole blocks of `buffer`; inverse of decrypt_buffer."""
    key_block = make_key_block(key)
    data = whole_blocks(buffer)
    if not data:
        return b""
    return AES.new(key_block, AES.MODE_ECB).encrypt(data)
