"""
Field reconstruction for IEN records with a free-text description column.

Device inventory, device data and intersection signal rows each carry one
description column. The feed does not quote it, so a description containing
commas arrives split across several raw fields. A row is therefore wider than
its section's default width by the number of embedded commas (0, 1 or 2 in
practice). This module puts the description back together, cleans it up, and
re-emits the row in a fixed shape:

    org_id, device_id, timestamp, date, time, [location,] description, rest...

Usage:

    from ien_reader.data.reconstruct import reconstruct_record
    from ien_reader.sections import DescriptionStyle

    reconstruct_record(line, 10, DescriptionStyle.PLAIN)
"""

from __future__ import annotations

from ien_reader.results import FailureKind, RecordError
from ien_reader.sections import DescriptionStyle

# The description may absorb at most this many extra raw fields.
MAX_EXTRA_FIELDS = 2

NA_TOKEN = "NA"

# Applied in order; the spaced variants must go before the bare ones.
_SEPARATOR_REPLACEMENTS = (
    (" / ", "&"),
    ("/", "&"),
    (" @ ", "&"),
    ("@", "&"),
)


def split_fields(line: str) -> list[str]:
    """
    Split a data line on commas, dropping empty trailing fields.

    "a,b,," gives ["a", "b"]. Interior empty fields and single-space fields
    are kept, since a lone space marks a missing value.
    """
    fields = line.split(",")
    while fields and fields[-1] == "":
        fields.pop()
    return fields


def strip_spaces(value: str) -> str:
    return value.replace(" ", "")


def split_timestamp(token: str) -> tuple[str, str, str]:
    """
    Split a raw date-time token into (combined, date, time).

    The token is "<date> <time>", usually with a leading space left over from
    the ", " delimiter. combined keeps the raw token with every space turned
    into '/', so " 2024-01-01 12:00:00" gives "/2024-01-01/12:00:00".

    Raises:
        RecordError: If the token does not hold exactly two parts.
    """
    parts = token.split()
    if len(parts) != 2:
        raise RecordError(
            FailureKind.MALFORMED_RECORD,
            f"expected '<date> <time>' in date-time field, got {token!r}",
        )
    return token.replace(" ", "/"), parts[0], parts[1]


def normalise_rest(fields: list[str]) -> list[str]:
    """Trailing passthrough fields: a lone space means missing, else drop spaces."""
    return [NA_TOKEN if value == " " else strip_spaces(value) for value in fields]


def _clean_description(text: str, style: DescriptionStyle) -> str:
    if style is DescriptionStyle.PLAIN:
        return strip_spaces(text)

    for old, new in _SEPARATOR_REPLACEMENTS:
        text = text.replace(old, new)

    if style is DescriptionStyle.DEVICE_INVENTORY:
        return text.replace(" ", "/")
    return strip_spaces(text)


def reconstruct_record(line: str, default_width: int, style: DescriptionStyle) -> str:
    """
    Normalise one description-bearing data line.

    Args:
        line: Raw data line (no trailing newline).
        default_width: Raw field count when the description has no embedded commas.
        style: Which section-specific clean-up rules apply.

    Returns:
        The comma-joined output record.

    Raises:
        RecordError: UNEXPECTED_FIELD_COUNT if the row is narrower than
            default_width or more than MAX_EXTRA_FIELDS wider; MALFORMED_RECORD
            if the identifier or date-time columns are missing or malformed.
    """
    fields = split_fields(line)
    if len(fields) < 3:
        raise RecordError(
            FailureKind.MALFORMED_RECORD,
            f"expected at least 3 fields, got {len(fields)}",
        )

    extra = len(fields) - default_width
    if not 0 <= extra <= MAX_EXTRA_FIELDS:
        raise RecordError(
            FailureKind.UNEXPECTED_FIELD_COUNT,
            f"got {len(fields)} fields, expected {default_width} to "
            f"{default_width + MAX_EXTRA_FIELDS}",
        )

    combined, date, time = split_timestamp(fields[2])
    out = [strip_spaces(fields[0]), strip_spaces(fields[1]), combined, date, time]

    start = 4 if style is DescriptionStyle.SIGNAL_INVENTORY else 3
    end = start + extra + 1
    description = _clean_description("&".join(fields[start:end]), style)

    if style is DescriptionStyle.SIGNAL_INVENTORY:
        out.append(fields[3].replace(" ", "/"))
    out.append(description)
    out.extend(normalise_rest(fields[end:]))

    return ",".join(out)
