"""
Result and error types shared by the IEN parsers.

Every parser entry point returns a tagged result: either the full parsed
output, or a ParseFailure describing why nothing was returned. There is no
partial-result mode: one bad record fails the whole call.

Inside the parsers, per-line helpers raise RecordError; the entry point catches
it once, attaches the line number and file path, and converts it into a
ParseFailure.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum

from ien_reader.sections import SECTION_ORDER, SectionKind


class FailureKind(Enum):
    """Why a parse produced no result."""

    FILE_NOT_FOUND = "file_not_found"
    UNREADABLE_FILE = "unreadable_file"
    MALFORMED_RECORD = "malformed_record"
    UNEXPECTED_FIELD_COUNT = "unexpected_field_count"
    NUMBER_FORMAT = "number_format"


class RecordError(Exception):
    """Raised when a single data line cannot be normalised."""

    def __init__(self, kind: FailureKind, reason: str) -> None:
        super().__init__(reason)
        self.kind = kind
        self.reason = reason


@dataclass(frozen=True)
class ParseFailure:
    """A terminal failure for one parser call."""

    kind: FailureKind
    reason: str
    line: int | None = None
    content: str | None = None
    file_path: str | None = None

    def __str__(self) -> str:
        where = f"{self.file_path or '<input>'}"
        if self.line is not None:
            where += f" line {self.line}"
        return f"{where}: {self.kind.value}: {self.reason}"


@dataclass
class SectionReport:
    """Normalised records of one IEN report, one list per section."""

    device_inventory: list[str] = field(default_factory=list)
    device_data: list[str] = field(default_factory=list)
    signal_inventory: list[str] = field(default_factory=list)
    signal_data: list[str] = field(default_factory=list)
    planned_phases: list[str] = field(default_factory=list)
    last_cycle_phases: list[str] = field(default_factory=list)

    def records(self, kind: SectionKind) -> list[str]:
        """The record list for one section kind."""
        return getattr(self, kind.name.lower())

    def as_lists(self) -> list[list[str]]:
        """The six record lists in fixed section order."""
        return [self.records(kind) for kind in SECTION_ORDER]

    def __iter__(self) -> Iterator[tuple[SectionKind, list[str]]]:
        for kind in SECTION_ORDER:
            yield kind, self.records(kind)

    @property
    def record_count(self) -> int:
        return sum(len(records) for records in self.as_lists())


@dataclass
class ReportResult:
    """Outcome of parse_section_report: a report or a failure, never both."""

    report: SectionReport | None = None
    failure: ParseFailure | None = None

    @property
    def success(self) -> bool:
        return self.report is not None


@dataclass
class StatusResult:
    """Outcome of parse_status_log: records or a failure, never both."""

    records: list[str] | None = None
    failure: ParseFailure | None = None

    @property
    def success(self) -> bool:
        return self.records is not None
