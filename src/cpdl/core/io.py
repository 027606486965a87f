from __future__ import annotations

from pathlib import Path


def load_buffer(path: str | Path) -> bytes:
    """Read a whole file into an immutable buffer.

    Missing or unreadable files raise; an empty buffer is only returned for
    an empty file.
    """
    p = Path(path)
    try:
        return p.read_bytes()
    except FileNotFoundError:
        # Provide a clear exception for the driver.
        raise FileNotFoundError(f"File not found: {path}") from None
    except IsADirectoryError:
        raise IsADirectoryError(f"Not a file: {path}") from None


def write_text(path: str | Path, text: str) -> None:
    """Write `text` to `path`, replacing any existing file."""
    Path(path).write_text(text, encoding="utf-8")
