"""Tests for the polar-lut command line."""

from __future__ import annotations

from pathlib import Path

import pytest

from polar_lut.main import main, parse_args

from conftest import polar_text


def test_prints_column_pairs(polar_file: Path, capsys) -> None:
    assert main([str(polar_file), "--format", "xflr5", "--column", "CL"]) == 0
    lines = capsys.readouterr().out.strip().splitlines()
    assert len(lines) == 2
    assert lines[0].split() == ["0.0", "0.5"]
    assert float(lines[1].split()[0]) == pytest.approx(0.0872665, abs=1e-6)


def test_query_single_value(polar_file: Path, capsys) -> None:
    assert main([str(polar_file), "--format", "xflr5", "--column", "CL", "--alpha", "2.5"]) == 0
    assert float(capsys.readouterr().out) == pytest.approx(0.65)


def test_query_linear(polar_file: Path, capsys) -> None:
    assert main([str(polar_file), "--format", "xflr5", "--column", "CL", "--alpha", "1.0", "--method", "linear"]) == 0
    assert float(capsys.readouterr().out) == pytest.approx(0.56)


def test_print_table(polar_file: Path, capsys) -> None:
    assert main([str(polar_file), "--format", "xflr5", "--table"]) == 0
    out = capsys.readouterr().out
    header = out.splitlines()[0].split()
    assert header == ["alpha", "CD", "CL"]


def test_sweep(polar_file: Path, capsys) -> None:
    assert main([str(polar_file), "--format", "xflr5", "--column", "CD", "--sweep", "-5", "10", "5"]) == 0
    lines = capsys.readouterr().out.strip().splitlines()
    assert [l.split() for l in lines] == [["-5", "0.01"], ["0", "0.01"], ["5", "0.02"], ["10", "0.02"]]


def test_fixed_columns_option(tmp_path: Path, capsys) -> None:
    path = tmp_path / "polar.txt"
    path.write_text(polar_text("alpha a b", ["0 1 2", "4 3 4"]), encoding="utf-8")
    assert main([str(path), "--skip", "11", "--columns", "Lift", "Drag", "--column", "Drag", "--alpha", "2"]) == 0
    assert float(capsys.readouterr().out) == 3.0


def test_unknown_column_exit_code(polar_file: Path, capsys) -> None:
    assert main([str(polar_file), "--format", "xflr5", "--column", "Cm", "--alpha", "0"]) == 1
    assert "Cm" in capsys.readouterr().err


def test_missing_file_exit_code(tmp_path: Path, capsys) -> None:
    assert main([str(tmp_path / "missing.txt")]) == 1
    assert "missing.txt" in capsys.readouterr().err


def test_malformed_row_exit_code(tmp_path: Path, capsys) -> None:
    path = tmp_path / "polar.txt"
    path.write_text(polar_text("alpha CL CD", ["0 0.1"]), encoding="utf-8")
    assert main([str(path), "--format", "xflr5", "--column", "CL"]) == 1
    assert "line 12" in capsys.readouterr().err
    assert main([str(path), "--format", "xflr5", "--column", "CL", "--lenient"]) == 0


def test_defaults() -> None:
    args = parse_args(["polar.txt"])
    assert args.format == "xflr5-fixed"
    assert args.column == "Cpmin"
    assert args.method == "midpoint"
    assert args.skip is None


def test_real_export_with_defaults(xflr5_file: Path, capsys) -> None:
    assert main([str(xflr5_file)]) == 0
    lines = capsys.readouterr().out.strip().splitlines()
    assert [float(l.split()[1]) for l in lines] == [-0.5, -0.6]
    assert float(lines[0].split()[0]) == pytest.approx(-0.0174533, abs=1e-6)


def test_real_export_query(xflr5_file: Path, capsys) -> None:
    assert main([str(xflr5_file), "--column", "Bot_Xtr", "--alpha", "0"]) == 0
    assert float(capsys.readouterr().out) == pytest.approx(0.5)


def test_real_export_header_mode_rejected(xflr5_file: Path, capsys) -> None:
    assert main([str(xflr5_file), "--format", "xflr5"]) == 1
    assert "Xtr" in capsys.readouterr().err


def test_columns_without_skip_skip_header(tmp_path: Path, capsys) -> None:
    path = tmp_path / "polar.txt"
    path.write_text(polar_text("alpha a b", ["0 1 2", "4 3 4"]), encoding="utf-8")
    assert main([str(path), "--format", "xflr5", "--columns", "Lift", "Drag", "--column", "Lift", "--alpha", "4"]) == 0
    assert float(capsys.readouterr().out) == 3.0
