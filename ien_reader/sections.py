"""
Section kinds recognised in an IEN report file.

An IEN report is a plain-text dump with up to six blocks, each introduced by a
header line whose first comma-separated field is one of the literal names
below. The header is followed by one column-title line and then data lines
until a blank line or end of file.

Each section kind carries a SectionLayout that tells the report parser how to
normalise its records:

  reconstruct sections: free-text description column that may have been split
                        by embedded commas (see data.reconstruct)
  phase sections:       fixed-width rows carrying a bracketed phase token

Usage:

    from ien_reader.sections import SectionKind, section_for_header

    kind = section_for_header("Device Data")   # SectionKind.DEVICE_DATA
    kind.layout.default_width                  # 10
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class DescriptionStyle(Enum):
    """How the reconstructed description column is cleaned up."""

    DEVICE_INVENTORY = "DetInv"   # slash/@ -> '&', spaces -> '/'
    SIGNAL_INVENTORY = "SigInv"   # slash/@ -> '&', spaces removed, location prepended
    PLAIN = "other"               # spaces removed


@dataclass(frozen=True)
class SectionLayout:
    """
    Normalisation rules for one section.

    For reconstruct sections, default_width is the raw field count of a row
    whose description contains no embedded commas. For phase sections it is
    the exact field count every row must have.
    """

    default_width: int
    style: DescriptionStyle | None = None
    has_cycle_value: bool = False

    @property
    def is_phase(self) -> bool:
        return self.style is None


class SectionKind(Enum):
    """The six section headers, in the order the parser returns them."""

    DEVICE_INVENTORY = "Device Inventory list"
    DEVICE_DATA = "Device Data"
    SIGNAL_INVENTORY = "Intersection Signal Inventory list"
    SIGNAL_DATA = "Intersection Signal Data"
    PLANNED_PHASES = "Intersection Signal Planned Phases"
    LAST_CYCLE_PHASES = "Intersection Signal Last Cycle Phases"

    @property
    def header(self) -> str:
        return self.value

    @property
    def layout(self) -> SectionLayout:
        return _LAYOUTS[self]


_LAYOUTS: dict[SectionKind, SectionLayout] = {
    SectionKind.DEVICE_INVENTORY: SectionLayout(11, DescriptionStyle.DEVICE_INVENTORY),
    SectionKind.DEVICE_DATA: SectionLayout(10, DescriptionStyle.PLAIN),
    SectionKind.SIGNAL_INVENTORY: SectionLayout(9, DescriptionStyle.SIGNAL_INVENTORY),
    SectionKind.SIGNAL_DATA: SectionLayout(10, DescriptionStyle.PLAIN),
    SectionKind.PLANNED_PHASES: SectionLayout(4),
    SectionKind.LAST_CYCLE_PHASES: SectionLayout(5, has_cycle_value=True),
}

_BY_HEADER: dict[str, SectionKind] = {kind.value: kind for kind in SectionKind}

# Fixed output order. Enum iteration order follows definition order.
SECTION_ORDER: tuple[SectionKind, ...] = tuple(SectionKind)


def section_for_header(field: str) -> SectionKind | None:
    """
    Return the section kind whose header exactly equals `field`, else None.

    Matching is case- and whitespace-exact: " Device Data" is not a header.
    """
    return _BY_HEADER.get(field)
