"""
Parser for multi-section IEN report files.

An IEN report interleaves up to six sections (see ien_reader.sections). Each
starts with a header line, then one column-title line, then data rows until a
blank line or end of file:

    Device Data,,,
    Org,Device,Date Time,Description,...
    LADOT, 101, 2024-01-01 12:00:00,Loop Detector,...
    LADOT, 102, 2024-01-01 12:00:00,Loop Detector,...
    <blank>
    Intersection Signal Planned Phases,,,
    ...

Lines outside a section are ignored. Every data row is normalised into a flat
comma-joined record; the six record lists come back in a SectionReport.

One malformed row fails the whole file: the caller gets a ParseFailure and no
records, never a partial report.

Usage:

    from ien_reader.data.report import parse_section_report

    result = parse_section_report("data/raw/ien/IEN_20240101.txt")
    if result.success:
        for kind, records in result.report:
            print(kind.header, len(records))
    else:
        print(result.failure)
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Iterator
from pathlib import Path

from ien_reader.data.reconstruct import (
    reconstruct_record,
    split_fields,
    split_timestamp,
    strip_spaces,
)
from ien_reader.results import (
    FailureKind,
    ParseFailure,
    RecordError,
    ReportResult,
    SectionReport,
)
from ien_reader.sections import SectionKind, SectionLayout, section_for_header

logger = logging.getLogger(__name__)

# Phase tokens look like "[2]"; the value is whatever sits inside the brackets.
_PHASE_RE = re.compile(r"\[([^\[\]]+)\]")

NumberedLine = tuple[int, str]


def extract_phase(token: str) -> str:
    """
    Return the bare value of a bracketed phase token: "[7]" -> "7".

    Raises:
        RecordError: If the token holds no non-empty bracketed value.
    """
    match = _PHASE_RE.search(token)
    if match is None:
        raise RecordError(
            FailureKind.MALFORMED_RECORD,
            f"expected a bracketed phase like '[2]', got {token!r}",
        )
    return match.group(1)


def normalise_phase_record(line: str, layout: SectionLayout) -> str:
    """
    Normalise one Planned Phases or Last Cycle Phases row.

    Planned rows have 4 fields and give
        org_id, device_id, timestamp, date, time, phase
    Last-cycle rows have 5 fields and carry one extra value before the phase:
        org_id, device_id, timestamp, date, time, cycle_value, phase

    Raises:
        RecordError: MALFORMED_RECORD on a field-count mismatch or a bad
            date-time or phase token.
    """
    fields = split_fields(line)
    if len(fields) != layout.default_width:
        raise RecordError(
            FailureKind.MALFORMED_RECORD,
            f"expected exactly {layout.default_width} fields, got {len(fields)}",
        )

    combined, date, time = split_timestamp(fields[2])
    tail = [strip_spaces(value) for value in fields[3:]]
    phase = extract_phase(tail[-1])

    out = [strip_spaces(fields[0]), strip_spaces(fields[1]), combined, date, time]
    out.extend(tail[:-1])
    out.append(phase)
    return ",".join(out)


def normalise_record(line: str, kind: SectionKind) -> str:
    """Normalise one data row of the given section kind."""
    layout = kind.layout
    if layout.is_phase:
        return normalise_phase_record(line, layout)
    return reconstruct_record(line, layout.default_width, layout.style)


def iter_sections(lines: Iterable[str]) -> Iterator[tuple[SectionKind, list[NumberedLine]]]:
    """
    Scan lines and yield (kind, rows) for every section found, in file order.

    rows holds (line_number, text) pairs with 1-based line numbers and the
    newline removed. The column-title line after each header is skipped.
    A zero-length line ends the section; a whitespace-only line does not.
    """
    numbered = enumerate((line.rstrip("\r\n") for line in lines), start=1)

    for _, text in numbered:
        kind = section_for_header(text.split(",", 1)[0])
        if kind is None:
            continue

        next(numbered, None)  # column titles

        rows: list[NumberedLine] = []
        for line_num, row in numbered:
            if not row:
                break
            rows.append((line_num, row))
        yield kind, rows


def parse_report_lines(lines: Iterable[str], source: str | None = None) -> ReportResult:
    """
    Parse already-opened report lines. See parse_section_report.

    Args:
        lines: Any iterable of text lines, e.g. an open file.
        source: Name used in failure messages and log lines.
    """
    report = SectionReport()

    for kind, rows in iter_sections(lines):
        logger.debug("%s: section %r with %d rows", source, kind.header, len(rows))
        records = report.records(kind)
        for line_num, row in rows:
            try:
                records.append(normalise_record(row, kind))
            except RecordError as exc:
                failure = ParseFailure(
                    kind=exc.kind,
                    reason=f"{kind.header}: {exc.reason}",
                    line=line_num,
                    content=row,
                    file_path=source,
                )
                logger.warning("Report parse aborted: %s", failure)
                return ReportResult(failure=failure)

    return ReportResult(report=report)


def parse_section_report(path: Path | str) -> ReportResult:
    """
    Parse an IEN report file into six lists of normalised records.

    Args:
        path: Path to the report file.

    Returns:
        ReportResult with .report set on success. On failure .report is None
        and .failure says why:
            FILE_NOT_FOUND          the path does not exist
            UNREADABLE_FILE         the path is a directory or cannot be opened
            MALFORMED_RECORD        a phase row has the wrong field count,
                                    or a date-time/phase token is malformed
            UNEXPECTED_FIELD_COUNT  a description row is too narrow or
                                    too wide to reconstruct
    """
    path = Path(path)
    if not path.exists():
        failure = ParseFailure(
            kind=FailureKind.FILE_NOT_FOUND,
            reason=f"IEN report not found: {path}",
            file_path=str(path),
        )
        logger.warning("%s", failure.reason)
        return ReportResult(failure=failure)

    try:
        with path.open(encoding="utf-8", errors="replace") as f:
            result = parse_report_lines(f, source=str(path))
    except OSError as exc:
        failure = ParseFailure(
            kind=FailureKind.UNREADABLE_FILE,
            reason=f"Cannot read IEN report {path}: {exc.strerror or exc}",
            file_path=str(path),
        )
        logger.warning("%s", failure.reason)
        return ReportResult(failure=failure)

    if result.success:
        logger.info(
            "%s: parsed %d records (%s)",
            path.name,
            result.report.record_count,
            ", ".join(f"{kind.name.lower()}={len(records)}" for kind, records in result.report),
        )
    return result
