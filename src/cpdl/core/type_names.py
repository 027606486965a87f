"""Type tag labels.

Tag values differ between data epochs (the encrypted files use different
tags), so tables are configuration supplied by the caller. The search engine
never looks at them.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

import yaml

FALLBACK_LABEL = "Object"


class TypeTableError(ValueError):
    """Raised when a type table file is malformed."""


@dataclass(frozen=True)
class TypeNameTable:
    """Read-only mapping of type tags to display labels."""

    name: str
    labels: Mapping[int, str] = field(default_factory=dict)
    fallback: str = FALLBACK_LABEL

    def lookup(self, type_tag: int) -> str:
        return self.labels.get(type_tag, self.fallback)

    def __call__(self, type_tag: int) -> str:
        return self.lookup(type_tag)


BUILTIN_TABLES: dict[str, TypeNameTable] = {
    "plain": TypeNameTable(
        name="plain",
        labels={3437124069: "Vehicle", 1462988517: "Road"},
    ),
    "encrypted": TypeNameTable(
        name="encrypted",
        labels={3274399645: "Vehicle"},
    ),
}


def parse_type_table(data: object, name: str) -> TypeNameTable:
    """Build a table from decoded YAML.

    Expected shape::

        fallback: Object        # optional
        type_names:
          3437124069: Vehicle
          0xCCDE5A65: Vehicle   # hex strings are accepted too
    """
    if not isinstance(data, dict):
        raise TypeTableError(f"Type table '{name}' must be a mapping")
    raw = data.get("type_names", {}) or {}
    if not isinstance(raw, dict):
        raise TypeTableError(f"'type_names' in '{name}' must be a mapping")

    labels: dict[int, str] = {}
    for key, label in raw.items():
        try:
            tag = int(key, 0) if isinstance(key, str) else int(key)
        except (TypeError, ValueError):
            raise TypeTableError(f"Invalid type tag '{key}' in '{name}'") from None
        if not 0 <= tag <= 0xFFFFFFFF:
            raise TypeTableError(f"Type tag {tag} in '{name}' is not a 32-bit value")
        labels[tag] = str(label)

    fallback = str(data.get("fallback", FALLBACK_LABEL))
    return TypeNameTable(name=name, labels=labels, fallback=fallback)


def load_type_table(path: str | Path) -> TypeNameTable:
    """Load a type table from a YAML file."""
    p = Path(path)
    try:
        data = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise TypeTableError(f"Invalid YAML in {p}: {e}") from e
    return parse_type_table(data, p.stem)


def get_type_table(name_or_path: str) -> TypeNameTable:
    """Resolve a built-in table name, or load a YAML table from a path."""
    if name_or_path in BUILTIN_TABLES:
        return BUILTIN_TABLES[name_or_path]
    return load_type_table(name_or_path)
