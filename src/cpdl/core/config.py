"""Run profiles and search configuration.

One pipeline serves plain and encrypted files in single or dual byte order
modes. A profile selects which byte orders to try and whether a decryption
stage runs first.

Profiles only configure execution parameters, NOT search semantics.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any

import yaml

from cpdl.core.endian import BOTH_ENDIANS, Endian, normalize_endians
from cpdl.core.plausibility import PLAUSIBILITY_LIMIT
from cpdl.core.probe import HEADER_LIMIT, HEADER_STRIDE
from cpdl.core.records import RECORD_SHAPE_SIZE

RECORD_SIZES: tuple[int, ...] = (16, 20, 24, 32)

DEFAULT_INPUT = "map.pdl"
DEFAULT_OUTPUT = "map_objects.txt"


class ConfigError(ValueError):
    """Raised when a profile or config file holds invalid values."""


@dataclass(frozen=True)
class SearchProfile:
    """Heuristic constants for the format search.

    Attributes:
        record_sizes: Candidate record sizes, tried in this order
        byte_orders: Byte orders tried for every size, big before little
        header_limit: Exclusive upper bound of header skips
        header_stride: Step between header skips
        plausibility_limit: Coordinates must be strictly below this magnitude
    """

    record_sizes: tuple[int, ...] = RECORD_SIZES
    byte_orders: tuple[Endian, ...] = ("little",)
    header_limit: int = HEADER_LIMIT
    header_stride: int = HEADER_STRIDE
    plausibility_limit: float = PLAUSIBILITY_LIMIT

    def __post_init__(self) -> None:
        if not self.record_sizes:
            raise ConfigError("record_sizes must not be empty")
        for size in self.record_sizes:
            if size < RECORD_SHAPE_SIZE:
                raise ConfigError(
                    f"record size {size} is smaller than the {RECORD_SHAPE_SIZE}-byte record"
                )
        try:
            byte_orders = normalize_endians(self.byte_orders)
        except ValueError as e:
            raise ConfigError(str(e)) from None
        # Search order is fixed: big before little
        object.__setattr__(self, "byte_orders", byte_orders)
        if self.header_limit < 1:
            raise ConfigError("header_limit must be positive")
        if self.header_stride < 1:
            raise ConfigError("header_stride must be positive")
        if not self.plausibility_limit > 0:
            raise ConfigError("plausibility_limit must be positive")

    @property
    def hypothesis_count(self) -> int:
        skips = len(range(0, self.header_limit, self.header_stride))
        return len(self.record_sizes) * len(self.byte_orders) * skips


@dataclass
class RunProfile:
    """Everything one run of the driver needs.

    Attributes:
        name: Profile identifier
        input_path: File to analyze
        output_path: Export file (None disables the export)
        decrypt: Whether the buffer is decrypted before searching
        key: Decryption key, required when `decrypt` is set
        type_table: Built-in table name or path to a YAML table
        search: Heuristic constants
    """

    name: str
    input_path: str = DEFAULT_INPUT
    output_path: str | None = DEFAULT_OUTPUT
    decrypt: bool = False
    key: bytes | None = None
    type_table: str = "plain"
    search: SearchProfile = field(default_factory=SearchProfile)

    def validate(self) -> None:
        if self.decrypt and self.key is None:
            raise ConfigError(f"profile '{self.name}' decrypts its input but no key was given")


# ============================================================================
# PROFILE DEFINITIONS
# ============================================================================

PLAIN_PROFILE = RunProfile(name="plain")

DUAL_PROFILE = RunProfile(
    name="dual",
    search=SearchProfile(byte_orders=BOTH_ENDIANS),
)

ENCRYPTED_PROFILE = RunProfile(
    name="encrypted",
    decrypt=True,
    type_table="encrypted",
)

ENCRYPTED_DUAL_PROFILE = RunProfile(
    name="encrypted-dual",
    decrypt=True,
    type_table="encrypted",
    search=SearchProfile(byte_orders=BOTH_ENDIANS),
)


# ============================================================================
# PROFILE REGISTRY
# ============================================================================

PROFILES = {
    "plain": PLAIN_PROFILE,
    "dual": DUAL_PROFILE,
    "encrypted": ENCRYPTED_PROFILE,
    "encrypted-dual": ENCRYPTED_DUAL_PROFILE,
}


def get_profile(name: str) -> RunProfile:
    """Get a fresh copy of a run profile by name.

    Raises:
        KeyError: If profile name not found
    """
    return replace(PROFILES[name])


# ============================================================================
# CONFIG FILES
# ============================================================================

def _as_key(value: Any) -> bytes:
    if isinstance(value, bytes):
        return value
    if isinstance(value, str):
        return value.encode("utf-8")
    raise ConfigError(f"key must be a string, got {type(value).__name__}")


def _as_int(value: Any, name: str) -> int:
    # bool is an int subclass
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"{name} must be an integer, got {value!r}")
    return value


def apply_overrides(base: RunProfile, data: dict[str, Any]) -> RunProfile:
    """Return a copy of `base` with config keys applied.

    Recognized keys: input, output, decrypt, key, key_hex, endian,
    record_sizes, header_limit, header_stride, plausibility_limit, type_names.
    """
    unknown = set(data) - {
        "input",
        "output",
        "decrypt",
        "key",
        "key_hex",
        "endian",
        "record_sizes",
        "header_limit",
        "header_stride",
        "plausibility_limit",
        "type_names",
    }
    if unknown:
        raise ConfigError(f"Unknown config keys: {', '.join(sorted(map(str, unknown)))}")

    run = replace(base)
    search_changes: dict[str, Any] = {}
    try:
        if "input" in data:
            run.input_path = str(data["input"])
        if "output" in data:
            run.output_path = None if data["output"] is None else str(data["output"])
        if "decrypt" in data:
            run.decrypt = bool(data["decrypt"])
        if "key" in data:
            run.key = _as_key(data["key"])
        if "key_hex" in data:
            run.key = bytes.fromhex(str(data["key_hex"]))
        if "type_names" in data:
            run.type_table = str(data["type_names"])
        if "endian" in data:
            search_changes["byte_orders"] = normalize_endians(data["endian"])
        if "record_sizes" in data:
            search_changes["record_sizes"] = tuple(
                _as_int(s, "record_sizes") for s in data["record_sizes"]
            )
        if "header_limit" in data:
            search_changes["header_limit"] = _as_int(data["header_limit"], "header_limit")
        if "header_stride" in data:
            search_changes["header_stride"] = _as_int(data["header_stride"], "header_stride")
        if "plausibility_limit" in data:
            search_changes["plausibility_limit"] = float(data["plausibility_limit"])
    except ConfigError:
        raise
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid config value: {e}") from e

    if search_changes:
        run.search = replace(run.search, **search_changes)
    return run


def load_run_config(path: str | Path, base: RunProfile | None = None) -> RunProfile:
    """Load a YAML config file on top of `base` (default: the plain profile).

    A `profile:` key selects the base profile by name.

    Raises:
        ConfigError: If the file is not a YAML mapping or holds invalid values
        OSError: If the file cannot be read
    """
    text = Path(path).read_text(encoding="utf-8")
    try:
        data = yaml.safe_load(text) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"Config root must be a mapping: {path}")

    profile_name = data.pop("profile", None)
    if profile_name is not None:
        try:
            base = get_profile(str(profile_name))
        except KeyError:
            raise ConfigError(f"Unknown profile '{profile_name}'") from None
    return apply_overrides(base or get_profile("plain"), data)
