"""
02_parse_status_logs.py — Parse every IEN status log into one CSV.

Usage:
    python -m pipeline.02_parse_status_logs

Output:
    data/processed/ien_status/status_records.csv
"""

from __future__ import annotations

import sys
from pathlib import Path

import pandas as pd

_PROJECT_ROOT = Path(__file__).parent.parent
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))

from ien_reader.config import load_config  # noqa: E402
from ien_reader.data.frames import status_to_frame  # noqa: E402
from ien_reader.data.status import parse_status_log  # noqa: E402
from ien_reader.logging_utils import get_logger  # noqa: E402

logger = get_logger(__name__)

_cfg = load_config("ien")
_status_cfg = _cfg["status_log"]


def main() -> None:
    raw_dir = Path(_cfg["data"]["raw_status_dir"])
    output_csv = Path(_cfg["output"]["status_csv"])

    log_files = sorted(raw_dir.rglob(_cfg["data"]["status_glob"]))
    logger.info("Found %d status logs in %s", len(log_files), raw_dir)

    frames: list[pd.DataFrame] = []
    for i, log_path in enumerate(log_files, start=1):
        logger.info("[%d/%d] %s", i, len(log_files), log_path.name)
        result = parse_status_log(
            log_path,
            organizations=_status_cfg["organizations"],
            default_organization=_status_cfg["default_organization"],
        )
        if not result.success:
            logger.info("Skipping %s: %s", log_path.name, result.failure)
            continue
        df = status_to_frame(result.records)
        df["source_file"] = log_path.name
        frames.append(df)

    if not frames:
        logger.error("No status records extracted. Check raw_status_dir in configs/ien.yaml.")
        return

    status_df = pd.concat(frames, ignore_index=True)
    output_csv.parent.mkdir(parents=True, exist_ok=True)
    status_df.to_csv(output_csv, index=False)

    logger.info("Status dataset complete: %d logs, %d rows -> %s", len(frames), len(status_df), output_csv)


if __name__ == "__main__":
    main()
