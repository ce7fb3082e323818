"""Make ``src`` and ``scripts`` importable during tests without installation."""

from __future__ import annotations

import sys
from pathlib import Path

import matplotlib
import pytest

matplotlib.use("Agg")

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

root_path = str(ROOT)
if root_path not in sys.path:
    sys.path.insert(0, root_path)

src_path = str(SRC)
if src_path not in sys.path:
    sys.path.insert(0, src_path)


SAMPLE_CSV = """\
,Base,Alt1
Fuel Demand Process,2.0,3.0
P-ASU,1.0,0.5
Emissions Impact (right y-axis),0.4,0.35
total energy,3.0,3.5
"""


@pytest.fixture
def sample_csv(tmp_path: Path) -> Path:
    path = tmp_path / "EnergyBreakdown.csv"
    path.write_text(SAMPLE_CSV, encoding="utf-8")
    return path
