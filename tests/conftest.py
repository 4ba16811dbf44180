"""
Shared pytest fixtures for the IEN Reader test suite.

All fixtures are synthetic, no real feed dumps required. The rows and their
expected records live in samples.py.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from samples import (
    DEVICE_DATA_ROWS,
    DEVICE_INVENTORY_ROWS,
    LAST_CYCLE_ROWS,
    PLANNED_PHASE_ROWS,
    SIGNAL_DATA_ROWS,
    SIGNAL_INVENTORY_ROWS,
    STATUS_HEADER,
    build_report,
)

# ---------------------------------------------------------------------------
# Report files
# ---------------------------------------------------------------------------

@pytest.fixture()
def valid_report_content() -> str:
    """All six sections, with a preamble that must be ignored."""
    return build_report(
        [
            ("Device Inventory list", DEVICE_INVENTORY_ROWS),
            ("Device Data", DEVICE_DATA_ROWS),
            ("Intersection Signal Inventory list", SIGNAL_INVENTORY_ROWS),
            ("Intersection Signal Data", SIGNAL_DATA_ROWS),
            ("Intersection Signal Planned Phases", PLANNED_PHASE_ROWS),
            ("Intersection Signal Last Cycle Phases", LAST_CYCLE_ROWS),
        ],
        preamble=["IEN Report,Generated 2024-01-01 12:15:00", ""],
    )


@pytest.fixture()
def valid_report_file(tmp_path: Path, valid_report_content: str) -> Path:
    """Write valid_report_content to a temp file and return the Path."""
    p = tmp_path / "IEN_20240101.txt"
    p.write_text(valid_report_content, encoding="utf-8")
    return p


@pytest.fixture()
def write_report(tmp_path: Path):
    """Factory: write arbitrary report text to a temp file and return the Path."""
    def _write(content: str, name: str = "report.txt") -> Path:
        p = tmp_path / name
        p.write_text(content, encoding="utf-8")
        return p
    return _write


# ---------------------------------------------------------------------------
# Status logs
# ---------------------------------------------------------------------------

@pytest.fixture()
def valid_status_file(tmp_path: Path) -> Path:
    """Two header lines then two status rows, one per organisation."""
    lines = STATUS_HEADER + [
        "2024-01-01,00:00:05,ien01,1.5,srv,0.25,Arcadia 5:1,200,118",
        "2024-01-01,00:00:10,ien01,2,srv,0.5,LA County,200,4210",
    ]
    p = tmp_path / "IEN_status.csv"
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return p


@pytest.fixture()
def write_status(tmp_path: Path):
    """Factory: write status rows (below the standard header) to a temp file."""
    def _write(rows: list[str], name: str = "status.csv") -> Path:
        p = tmp_path / name
        p.write_text("\n".join(STATUS_HEADER + rows) + "\n", encoding="utf-8")
        return p
    return _write
