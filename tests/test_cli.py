from __future__ import annotations

import io
import json
import os
import subprocess
import sys
from pathlib import Path

import pytest

from termqr.cli import build_parser, main


def _utf8_env() -> dict[str, str]:
    return {**os.environ, "PYTHONIOENCODING": "utf-8"}


def _stdin(monkeypatch: pytest.MonkeyPatch, data: bytes) -> None:
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(data)))


def test_parser_defaults() -> None:
    nbsp = build_parser().parse_args([])

    assert nbsp.data == []
    assert nbsp.invert is None
    assert nbsp.border is None
    assert nbsp.version is None


def test_parser_upper_cases_error_correction() -> None:
    assert build_parser().parse_args(["-e", "q"]).error_correction == "Q"


def test_render_from_arguments(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--qr-version", "1", "hello"]) == 0

    lines = capsys.readouterr().out.splitlines()
    # 21 modules plus the default four module border on each side
    assert len(lines) == 15
    assert all(len(line) == 29 for line in lines)
    assert set(lines[0]) == {" "}


def test_arguments_and_stdin_render_the_same(
    capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch
) -> None:
    assert main(["hi", "there"]) == 0
    from_args = capsys.readouterr().out

    _stdin(monkeypatch, b"hi there")
    assert main([]) == 0
    from_stdin = capsys.readouterr().out

    assert from_args == from_stdin


def test_empty_stdin(capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch) -> None:
    _stdin(monkeypatch, b"")

    assert main([]) == 1

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "empty data" in captured.err


def test_config_file(capsys: pytest.CaptureFixture[str], tmp_path: Path) -> None:
    path = tmp_path / "termqr.json"
    path.write_text(json.dumps({"border": 3, "version": 1}), "utf-8")

    assert main(["-c", str(path), "hello"]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert len(lines[0]) == 27
    assert set(lines[0]) == {" "}


def test_flags_override_environment(capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TERMQR_BORDER", "4")

    assert main(["-b", "2", "--invert", "hello"]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert set(lines[0]) == {"█"}
    assert len(lines[0]) == 21 + 4


def test_invalid_config(capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TERMQR_BORDER", "wide")

    assert main(["hello"]) == 1
    assert "ERROR" in capsys.readouterr().err


def test_overflow(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--qr-version", "1", "-e", "H", "x" * 200]) == 1
    assert capsys.readouterr().out == ""


def test_verbose_logs_debug(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["-v", "hello"]) == 0

    assert "DEBUG" in capsys.readouterr().err


def test_module_entry_point_reads_stdin() -> None:
    result = subprocess.run(
        [sys.executable, "-m", "termqr", "--qr-version", "1"],
        input=b"hello",
        capture_output=True,
        check=False,
        env=_utf8_env(),
    )

    assert result.returncode == 0
    lines = result.stdout.decode("utf-8").splitlines()
    assert len(lines) == 15
    assert all(len(line) == 29 for line in lines)


def test_module_entry_point_empty_stdin() -> None:
    result = subprocess.run(
        [sys.executable, "-m", "termqr"], input=b"", capture_output=True, check=False, env=_utf8_env()
    )

    assert result.returncode == 1
    assert result.stdout == b""
    assert b"empty data" in result.stderr
