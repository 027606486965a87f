from __future__ import annotations

import struct
from pathlib import Path

import pytest

from cpdl.cli import main
from cpdl.core.cipher import encrypt_buffer

VEHICLE = 3437124069


def write_map(path: Path, prefix: bytes = b"") -> Path:
    body = struct.pack("<Ifff", VEHICLE, 1.0, 2.0, 3.0) * 3
    body += struct.pack("<Ifff", VEHICLE, 500000.0, 2.0, 3.0)
    path.write_bytes(prefix + body)
    return path


def test_no_arguments_uses_defaults(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.chdir(tmp_path)
    write_map(tmp_path / "map.pdl")
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "[cpdl] Detected record size: 16 bytes" in out
    assert "[cpdl] Parsed 3 objects:" in out
    assert "Type 3437124069 (Vehicle): 3 objects" in out
    export = (tmp_path / "map_objects.txt").read_text(encoding="utf-8").splitlines()
    assert export[0] == "# type_id type_name x y z"
    assert export[1:] == ["3437124069 Vehicle 1.000000 2.000000 3.000000"] * 3


def test_explicit_paths_and_header(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    src = write_map(tmp_path / "level.pdl", prefix=b"\xde\xad\xbe\xef\x01\x00\x00\x00")
    out_file = tmp_path / "objs.txt"
    assert main(["-i", str(src), "-o", str(out_file)]) == 0
    captured = capsys.readouterr()
    assert "[cpdl] Skipped header bytes: 8" in captured.out
    assert "Exported 3 objects" in captured.err
    assert len(out_file.read_text(encoding="utf-8").splitlines()) == 4


def test_no_export(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    write_map(tmp_path / "map.pdl")
    assert main(["--no-export"]) == 0
    assert not (tmp_path / "map_objects.txt").exists()


def test_encrypted_input(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    plain = write_map(tmp_path / "plain.pdl").read_bytes()
    src = tmp_path / "enc.pdl"
    src.write_bytes(encrypt_buffer(plain, b"k3y"))
    code = main(["--profile", "encrypted", "--key", "k3y", "-i", str(src), "--no-export"])
    assert code == 0
    out = capsys.readouterr().out
    assert "[cpdl] Parsed 3 objects:" in out
    # Encrypted epoch table does not know the plain Vehicle tag
    assert "(Object)" in out


def test_missing_input_is_fatal(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code = main(["-i", str(tmp_path / "nope.pdl"), "--no-export"])
    assert code == 1
    assert capsys.readouterr().err.startswith("[cpdl] Error:")


def test_long_key_is_fatal(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    src = write_map(tmp_path / "map.pdl")
    code = main(["-i", str(src), "--key", "x" * 17, "--no-export"])
    assert code == 1
    err = capsys.readouterr().err
    assert err.startswith("[cpdl] Error:")
    assert "16 bytes" in err


def test_encrypted_profile_without_key_is_fatal(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    src = write_map(tmp_path / "map.pdl")
    assert main(["--profile", "encrypted", "-i", str(src), "--no-export"]) == 1
    assert "no key" in capsys.readouterr().err


def test_unwritable_output_is_fatal(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    src = write_map(tmp_path / "map.pdl")
    code = main(["-i", str(src), "-o", str(tmp_path / "missing_dir" / "out.txt")])
    assert code == 1
    assert capsys.readouterr().err.startswith("[cpdl] Error:")


def test_empty_file_reports_zero_objects(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    src = tmp_path / "empty.pdl"
    src.write_bytes(b"")
    assert main(["-i", str(src), "--endian", "both", "--no-export"]) == 0
    out = capsys.readouterr().out
    assert "[cpdl] Parsed 0 objects:" in out
    assert "[cpdl] Byte order: big-endian" in out


@pytest.mark.parametrize("text", ["endian: [5]\n", "record_sizes: [16.5]\n", "2: x\nbogus: 1\n"])
def test_malformed_config_is_fatal(
    tmp_path: Path, capsys: pytest.CaptureFixture[str], text: str
) -> None:
    src = write_map(tmp_path / "map.pdl")
    cfg = tmp_path / "run.yaml"
    cfg.write_text(text, encoding="utf-8")
    assert main(["--config", str(cfg), "-i", str(src), "--no-export"]) == 1
    assert capsys.readouterr().err.startswith("[cpdl] Error:")


def test_endian_flag_both_reports_big_on_tie(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    src = tmp_path / "zeros.pdl"
    src.write_bytes(b"\x00" * 64)
    assert main(["-i", str(src), "--endian", "both", "--no-export"]) == 0
    assert "[cpdl] Byte order: big-endian" in capsys.readouterr().out
