"""
01_parse_reports.py — Parse every raw IEN report into per-section CSVs.

Each report is parsed on its own; a report that fails to parse is logged and
skipped without affecting the others.

Usage:
    python -m pipeline.01_parse_reports

Output:
    data/processed/ien_reports/<report stem>/<section>.csv
"""

from __future__ import annotations

import sys
from pathlib import Path

_PROJECT_ROOT = Path(__file__).parent.parent
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))

from ien_reader.config import load_config  # noqa: E402
from ien_reader.data.frames import report_to_frames, section_file_stem  # noqa: E402
from ien_reader.data.report import parse_section_report  # noqa: E402
from ien_reader.logging_utils import get_logger  # noqa: E402

logger = get_logger(__name__)

_cfg = load_config("ien")


def _write_report(report_path: Path, output_dir: Path) -> int | None:
    """
    Parse one report and write its non-empty sections.

    Returns the number of records written, or None if the parse failed.
    """
    result = parse_section_report(report_path)
    if not result.success:
        logger.info("Skipping %s: %s", report_path.name, result.failure)
        return None

    target = output_dir / report_path.stem
    target.mkdir(parents=True, exist_ok=True)

    written = 0
    for kind, df in report_to_frames(result.report).items():
        if df.empty:
            continue
        df.to_csv(target / f"{section_file_stem(kind)}.csv", index=False)
        written += len(df)
    return written


def main() -> None:
    raw_dir = Path(_cfg["data"]["raw_report_dir"])
    output_dir = Path(_cfg["output"]["report_dir"])

    report_files = sorted(raw_dir.rglob(_cfg["data"]["report_glob"]))
    logger.info("Found %d IEN reports in %s", len(report_files), raw_dir)

    parsed = failed = total_records = 0
    for i, report_path in enumerate(report_files, start=1):
        logger.info("[%d/%d] %s", i, len(report_files), report_path.name)
        written = _write_report(report_path, output_dir)
        if written is None:
            failed += 1
            continue
        parsed += 1
        total_records += written

    logger.info(
        "Done: %d reports parsed, %d failed, %d records -> %s",
        parsed,
        failed,
        total_records,
        output_dir,
    )


if __name__ == "__main__":
    main()
