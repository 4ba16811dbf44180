"""
Parser for IEN connection/status logs.

The status log is a flat comma-separated file. The first two lines are a
header block; every following line describes one polling request:

    index  content
    0      date
    1      time
    3      request time (float, seconds)
    5      process time (float, seconds)
    6      organisation token, e.g. "Arcadia 5:1"
    7      status code (int)
    8      number of detectors reported (int)

Other columns are ignored. Each line becomes one record:

    date, time, organisation, request_time, process_time, status, detector_count

Usage:

    from ien_reader.data.status import parse_status_log

    result = parse_status_log("data/raw/status/IEN_status_20240101.csv")
"""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Iterable, Mapping
from decimal import Decimal
from pathlib import Path

from ien_reader.results import FailureKind, ParseFailure, RecordError, StatusResult

logger = logging.getLogger(__name__)

HEADER_LINES = 2
MIN_FIELDS = 9

DEFAULT_ORGANIZATIONS: Mapping[str, str] = {"Arcadia 5:1": "Arcadia"}
DEFAULT_ORGANIZATION = "LACO"


# Accepted number shapes: ASCII digits only, no underscores, no padding,
# no nan/inf spellings.
_INT_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def _to_float(value: str, column: str) -> float:
    if not _FLOAT_RE.fullmatch(value):
        raise RecordError(FailureKind.NUMBER_FORMAT, f"{column} is not a number: {value!r}")
    number = float(value)
    if not math.isfinite(number):
        raise RecordError(FailureKind.NUMBER_FORMAT, f"{column} is out of range: {value!r}")
    return number


def _to_int(value: str, column: str) -> int:
    if not _INT_RE.fullmatch(value):
        raise RecordError(FailureKind.NUMBER_FORMAT, f"{column} is not an integer: {value!r}")
    return int(value)


def format_seconds(value: float) -> str:
    """
    Render a finite request or process time for a status record.

    Magnitudes in [1e-3, 1e7) use plain decimal notation with at least one
    fractional digit: 2.0, 0.25, 1234567.0. Anything else uses a mantissa
    and an upper-case exponent: 1.0E-4, 1.2345678E7. Digits are the shortest
    that round-trip.
    """
    if value == 0:
        return "-0.0" if math.copysign(1.0, value) < 0 else "0.0"

    sign = "-" if value < 0 else ""
    magnitude = abs(value)
    if 1e-3 <= magnitude < 1e7:
        return sign + repr(magnitude)

    shortest = Decimal(repr(magnitude)).normalize()
    digits = "".join(str(d) for d in shortest.as_tuple().digits)
    return f"{sign}{digits[0]}.{digits[1:] or '0'}E{shortest.adjusted()}"


def normalise_status_line(
    line: str,
    organizations: Mapping[str, str] = DEFAULT_ORGANIZATIONS,
    default_organization: str = DEFAULT_ORGANIZATION,
) -> str:
    """
    Normalise one status log line.

    The organisation token is matched exactly (no trimming); unmatched tokens
    map to default_organization.

    Raises:
        RecordError: MALFORMED_RECORD if the line has fewer than 9 fields,
            NUMBER_FORMAT if a numeric column does not parse.
    """
    fields = line.split(",")
    if len(fields) < MIN_FIELDS:
        raise RecordError(
            FailureKind.MALFORMED_RECORD,
            f"expected at least {MIN_FIELDS} fields, got {len(fields)}",
        )

    request_time = _to_float(fields[3], "request time")
    process_time = _to_float(fields[5], "process time")
    status = _to_int(fields[7], "status")
    detector_count = _to_int(fields[8], "detector count")
    org = organizations.get(fields[6], default_organization)

    return ",".join(
        [
            fields[0],
            fields[1],
            org,
            format_seconds(request_time),
            format_seconds(process_time),
            str(status),
            str(detector_count),
        ]
    )


def parse_status_lines(
    lines: Iterable[str],
    source: str | None = None,
    organizations: Mapping[str, str] | None = None,
    default_organization: str = DEFAULT_ORGANIZATION,
) -> StatusResult:
    """Parse already-opened status log lines. See parse_status_log."""
    if organizations is None:
        organizations = DEFAULT_ORGANIZATIONS

    records: list[str] = []
    for line_num, raw_line in enumerate(lines, start=1):
        if line_num <= HEADER_LINES:
            continue
        line = raw_line.rstrip("\r\n")
        if not line:
            continue
        try:
            records.append(normalise_status_line(line, organizations, default_organization))
        except RecordError as exc:
            failure = ParseFailure(
                kind=exc.kind,
                reason=exc.reason,
                line=line_num,
                content=line,
                file_path=source,
            )
            logger.warning("Status log parse aborted: %s", failure)
            return StatusResult(failure=failure)

    return StatusResult(records=records)


def parse_status_log(
    path: Path | str,
    organizations: Mapping[str, str] | None = None,
    default_organization: str = DEFAULT_ORGANIZATION,
) -> StatusResult:
    """
    Parse an IEN status log into normalised status records.

    Args:
        path: Path to the status log.
        organizations: Exact-match map from raw organisation token to output
            name. Defaults to {"Arcadia 5:1": "Arcadia"}.
        default_organization: Name for tokens not in the map.

    Returns:
        StatusResult with .records set on success, or .failure set
        (FILE_NOT_FOUND, UNREADABLE_FILE, MALFORMED_RECORD or NUMBER_FORMAT).
    """
    path = Path(path)
    if not path.exists():
        failure = ParseFailure(
            kind=FailureKind.FILE_NOT_FOUND,
            reason=f"Status log not found: {path}",
            file_path=str(path),
        )
        logger.warning("%s", failure.reason)
        return StatusResult(failure=failure)

    try:
        with path.open(encoding="utf-8", errors="replace") as f:
            result = parse_status_lines(
                f,
                source=str(path),
                organizations=organizations,
                default_organization=default_organization,
            )
    except OSError as exc:
        failure = ParseFailure(
            kind=FailureKind.UNREADABLE_FILE,
            reason=f"Cannot read status log {path}: {exc.strerror or exc}",
            file_path=str(path),
        )
        logger.warning("%s", failure.reason)
        return StatusResult(failure=failure)

    if result.success:
        logger.info("%s: parsed %d status records", path.name, len(result.records))
    return result
