import errno
import io
import re
import sys

import pytest

from cli import main
from conf import settings


@pytest.fixture(autouse=True)
def _in_tmp_path(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)


def _body_lines(header):
    body = header.split("= {\n", 1)[1].split("\n};", 1)[0]
    return [line.strip() for line in body.split("\n")] if body else []


def _decode(header):
    body = header.split("= {", 1)[1]
    return bytes(int(token, 16) for token in re.findall(r"0x([0-9a-f]{2})", body))


def test_sixteen_bytes_in_two_rows(tmp_path):
    (tmp_path / "input.bin").write_bytes(bytes(range(16)))

    assert main(["-C", "8", "-S", "test", "-o", "test.h", "input.bin"]) == 0

    header = (tmp_path / "test.h").read_text()
    assert "unsigned long long test_size = 16;" in header
    assert "unsigned char test[16] = {" in header
    assert _body_lines(header) == [
        "0x00, 0x01, 0x02, 0x03, 0x04, 0x05, 0x06, 0x07,",
        "0x08, 0x09, 0x0a, 0x0b, 0x0c, 0x0d, 0x0e, 0x0f",
    ]


def test_names_are_derived_from_input(tmp_path):
    (tmp_path / "archive.bin").write_bytes(b"\x01\x02")

    assert main(["archive.bin"]) == 0

    header = (tmp_path / "bin.h").read_text()
    assert "unsigned long long bin_size = 2;" in header


def test_directories_are_not_part_of_derived_names(tmp_path):
    (tmp_path / "assets").mkdir()
    (tmp_path / "assets" / "logo").write_bytes(b"\x01")

    assert main(["--input", "assets/logo"]) == 0

    assert "unsigned char logo[1]" in (tmp_path / "logo.h").read_text()


def test_input_option_wins_over_positional(tmp_path):
    (tmp_path / "first.dat").write_bytes(b"\x01")
    (tmp_path / "second.dat").write_bytes(b"\x01\x02\x03")

    assert main(["-i", "second.dat", "-S", "chosen", "-o", "out.h", "first.dat"]) == 0

    assert "chosen_size = 3;" in (tmp_path / "out.h").read_text()


def test_empty_input(tmp_path):
    (tmp_path / "empty.bin").write_bytes(b"")

    assert main(["-S", "empty", "empty.bin"]) == 0

    header = (tmp_path / "bin.h").read_text()
    assert "unsigned long long empty_size = 0;" in header
    assert "unsigned char empty[0] = {\n};" in header


def test_large_input_round_trips(tmp_path):
    data = (bytes(range(256)) * 41)[: 10 * 1024 + 3]
    (tmp_path / "big.bin").write_bytes(data)

    assert main(["-C", "16", "-o", "big.h", "big.bin"]) == 0

    header = (tmp_path / "big.h").read_text()
    assert _decode(header) == data
    assert f"bin_size = {len(data)};" in header


def test_skip_and_count_accept_prefixed_numbers(tmp_path):
    (tmp_path / "input.bin").write_bytes(bytes(range(16)))

    assert main(["-s", "0x4", "-c", "4", "-o", "out.h", "input.bin"]) == 0

    header = (tmp_path / "out.h").read_text()
    assert "bin_size = 4;" in header
    assert _decode(header) == bytes([4, 5, 6, 7])


def test_skip_past_end_converts_nothing(tmp_path):
    (tmp_path / "input.bin").write_bytes(bytes(range(16)))

    assert main(["-s", "64", "-o", "out.h", "input.bin"]) == 0

    assert "bin_size = 0;" in (tmp_path / "out.h").read_text()


def test_odd_column_size_fails_before_output_is_created(tmp_path, capsys):
    (tmp_path / "input.bin").write_bytes(bytes(range(16)))

    assert main(["-C", "3", "-o", "out.h", "input.bin"]) == 1

    assert not (tmp_path / "out.h").exists()
    assert "column size" in capsys.readouterr().err


def test_missing_input_fails(tmp_path, capsys):
    assert main(["-o", "out.h", "missing.bin"]) == 1

    assert not (tmp_path / "out.h").exists()
    assert "Couldn't open the input file: missing.bin" in capsys.readouterr().err


def test_unwritable_output_fails(tmp_path, capsys):
    (tmp_path / "input.bin").write_bytes(b"\x01")

    assert main(["-o", "no/such/dir/out.h", "input.bin"]) == 1

    assert "Couldn't create/overwrite the output file" in capsys.readouterr().err


def test_standard_input_defaults(tmp_path, monkeypatch):
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(b"\x01\x02\x03")))

    assert main(["-s", "1"]) == 0

    header = (tmp_path / "out.h").read_text()
    assert "unsigned long long stdin_size = 3;" in header


def test_standard_input_unavailable(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr(settings, "stdin_available", False)

    assert main([]) == 1

    assert not (tmp_path / "out.h").exists()
    assert "input filename" in capsys.readouterr().err


def test_skip_accepts_leading_zero_octal(tmp_path):
    (tmp_path / "input.bin").write_bytes(bytes(range(16)))

    assert main(["-s", "010", "-o", "out.h", "input.bin"]) == 0

    header = (tmp_path / "out.h").read_text()
    assert "bin_size = 8;" in header
    assert _decode(header) == bytes(range(8, 16))


class _FailingInput(io.BytesIO):
    def readinto(self, buffer):
        raise OSError(errno.EIO, "Input/output error")


def test_read_failure_leaves_output_untouched(tmp_path, monkeypatch, capsys):
    (tmp_path / "input.bin").write_bytes(bytes(range(16)))
    (tmp_path / "out.h").write_text("previous\n")
    real_open = open

    def fake_open(path, mode="r", *args, **kwargs):
        if "b" in mode:
            return _FailingInput()
        return real_open(path, mode, *args, **kwargs)

    monkeypatch.setattr("cli.open", fake_open, raising=False)

    assert main(["-o", "out.h", "input.bin"]) == 1

    assert (tmp_path / "out.h").read_text() == "previous\n"
    assert "Couldn't read the input" in capsys.readouterr().err


def test_explicit_stdin_path_ignores_skip(tmp_path, monkeypatch):
    (tmp_path / "input.bin").write_bytes(bytes(range(16)))
    monkeypatch.setattr(settings, "stdin_path", "input.bin")

    assert main(["-s", "4", "-o", "out.h", "-i", "input.bin"]) == 0

    assert "bin_size = 16;" in (tmp_path / "out.h").read_text()


def test_empty_input_option_fails(tmp_path, capsys):
    assert main(["-i", "", "-o", "out.h"]) == 1

    assert not (tmp_path / "out.h").exists()
    assert "Couldn't open the input file: empty filename" in capsys.readouterr().err


def test_version(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["--version"])
    assert exc_info.value.code == 0
    assert capsys.readouterr().out.strip() == f"Version: {settings.program_version}"


def test_help(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["-h"])
    assert exc_info.value.code == 0
    out = capsys.readouterr().out
    for option in ("--input", "--output", "--symbol-name", "--column-size", "--skip", "--count"):
        assert option in out
