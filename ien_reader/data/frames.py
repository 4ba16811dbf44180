"""
Conversion of normalised IEN records into pandas DataFrames.

The parsers return plain comma-joined strings so the output matches what the
downstream loaders already consume. For analysis it is handier to have one
DataFrame per section; this module does the split and names the columns.

Reconstruct sections have a named leading block followed by however many
passthrough columns the feed carries. Those are named field_1, field_2, ...
in order, since their meaning varies between feed versions.

Usage:

    from ien_reader.data.frames import report_to_frames

    frames = report_to_frames(result.report)
    frames[SectionKind.DEVICE_DATA].head()
"""

from __future__ import annotations

import re

import pandas as pd

from ien_reader.results import SectionReport
from ien_reader.sections import DescriptionStyle, SectionKind

_BASE_COLUMNS = ["org_id", "device_id", "timestamp", "date", "time"]

STATUS_COLUMNS = [
    "date",
    "time",
    "organization",
    "request_time",
    "process_time",
    "status",
    "detector_count",
]
_STATUS_DTYPES = {
    "request_time": float,
    "process_time": float,
    "status": int,
    "detector_count": int,
}


def leading_columns(kind: SectionKind) -> list[str]:
    """Names of the fixed leading columns of a section's records."""
    layout = kind.layout
    if layout.is_phase:
        extra = ["cycle_value", "phase"] if layout.has_cycle_value else ["phase"]
        return _BASE_COLUMNS + extra
    if layout.style is DescriptionStyle.SIGNAL_INVENTORY:
        return _BASE_COLUMNS + ["location", "description"]
    return _BASE_COLUMNS + ["description"]


def section_file_stem(kind: SectionKind) -> str:
    """File-name friendly name: "Device Inventory list" -> "device_inventory_list"."""
    return re.sub(r"\W+", "_", kind.header).strip("_").lower()


def records_to_frame(records: list[str], kind: SectionKind) -> pd.DataFrame:
    """
    Split one section's records into a DataFrame of strings.

    Rows shorter than the widest row are padded with missing values.
    """
    lead = leading_columns(kind)
    if not records:
        return pd.DataFrame(columns=lead)

    rows = [record.split(",") for record in records]
    width = max(len(lead), max(len(row) for row in rows))
    columns = lead + [f"field_{i}" for i in range(1, width - len(lead) + 1)]
    padded = [row + [None] * (width - len(row)) for row in rows]
    return pd.DataFrame(padded, columns=columns)


def report_to_frames(report: SectionReport) -> dict[SectionKind, pd.DataFrame]:
    """One DataFrame per section, keyed by kind, in fixed section order."""
    return {kind: records_to_frame(records, kind) for kind, records in report}


def status_to_frame(records: list[str]) -> pd.DataFrame:
    """
    Build a typed DataFrame from normalised status records.

    request_time and process_time come back as float64, status and
    detector_count as int64.
    """
    if not records:
        return pd.DataFrame(columns=STATUS_COLUMNS).astype(_STATUS_DTYPES)
    df = pd.DataFrame([record.split(",") for record in records], columns=STATUS_COLUMNS)
    return df.astype(_STATUS_DTYPES)
