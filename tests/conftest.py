from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Ensure local package is importable when running pytest without installing.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

METADATA = [
    "",
    "xflr5 v6.47",
    "",
    " Calculated polar for: NACA 0012",
    "",
    " 1 1 Reynolds number fixed          Mach number fixed",
    "",
    " xtrf =   1.000 (top)        1.000 (bottom)",
    " Mach =   0.000     Re =     0.100 e 6     Ncrit =   9.000",
]


def polar_text(header: str | None, rows: list[str], trailer: list[str] | None = None) -> str:
    """Build an XFLR5-style export: 9 metadata lines, optional header + rule, rows, blank."""
    lines = list(METADATA)
    if header is not None:
        lines += [header, " " + "-" * 60]
    lines += rows
    lines.append("")
    lines += trailer or []
    return "\n".join(lines) + "\n"


@pytest.fixture
def scenario_text() -> str:
    return polar_text("alpha  CL  CD", ["0.0 0.5 0.01", "5.0 0.8 0.02"])


@pytest.fixture
def polar_file(tmp_path: Path, scenario_text: str) -> Path:
    path = tmp_path / "T1_Re0.100_M0.00_N9.0.txt"
    path.write_text(scenario_text, encoding="utf-8")
    return path


XFLR5_HEADER = "  alpha    CL        CD       CDp       Cm    Top Xtr  Bot Xtr   Cpmin    Chinge    XCp"
XFLR5_ROWS = [
    " -1.000  -0.1100   0.01200   0.00500  -0.0010   0.9000   0.1000  -0.5000   0.0000   0.2500",
    "  1.000   0.1100   0.01200   0.00500   0.0010   0.1000   0.9000  -0.6000   0.0000   0.2500",
]


@pytest.fixture
def xflr5_file(tmp_path: Path) -> Path:
    path = tmp_path / "T1_Re0.100_M0.00_N9.0"
    path.write_text(polar_text(XFLR5_HEADER, XFLR5_ROWS), encoding="utf-8")
    return path
