from __future__ import annotations

import argparse
import sys
from dataclasses import replace

from rich.console import Console

from cpdl.app import CpdlApp
from cpdl.core.config import PROFILES, RunProfile, get_profile, load_run_config
from cpdl.core.endian import normalize_endians
from cpdl.core.io import write_text
from cpdl.core.pipeline import analyze_file
from cpdl.core.report import build_console_report, format_export
from cpdl.core.type_names import get_type_table


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cpdl", description="Recover the record layout of .pdl map files"
    )
    parser.add_argument("--profile", choices=sorted(PROFILES), default="plain")
    parser.add_argument("--config", help="YAML config applied on top of the profile")
    parser.add_argument("-i", "--input", help="Input .pdl file")
    parser.add_argument("-o", "--output", help="Export file for decoded objects")
    parser.add_argument("--no-export", action="store_true", help="Skip writing the export file")
    key = parser.add_mutually_exclusive_group()
    key.add_argument("--key", help="Decryption key (at most 16 bytes, zero-padded)")
    key.add_argument("--key-hex", help="Decryption key as hex")
    parser.add_argument("--endian", choices=["little", "big", "both"])
    parser.add_argument("--type-names", help="Built-in table name or YAML table path")
    parser.add_argument("--tui", action="store_true", help="Browse results interactively")
    return parser


def resolve_profile(args: argparse.Namespace) -> RunProfile:
    profile = get_profile(args.profile)
    if args.config:
        profile = load_run_config(args.config, profile)
    if args.input:
        profile.input_path = args.input
    if args.output:
        profile.output_path = args.output
    if args.no_export:
        profile.output_path = None
    if args.key is not None:
        profile.key = args.key.encode("utf-8")
        profile.decrypt = True
    if args.key_hex is not None:
        profile.key = bytes.fromhex(args.key_hex)
        profile.decrypt = True
    if args.endian:
        profile.search = replace(profile.search, byte_orders=normalize_endians(args.endian))
    if args.type_names:
        profile.type_table = args.type_names
    return profile


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    console = Console(highlight=False)

    try:
        profile = resolve_profile(args)
        table = get_type_table(profile.type_table)
        result = analyze_file(profile)

        if args.tui:
            CpdlApp(result, table, profile.input_path).run()
        else:
            console.print(build_console_report(result, table), end="", soft_wrap=True)

        if profile.output_path is not None:
            write_text(profile.output_path, format_export(result.records, table))
            print(
                f"[cpdl] Exported {len(result.records)} objects to {profile.output_path}",
                file=sys.stderr,
            )
    except (OSError, ValueError) as e:
        print(f"[cpdl] Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
