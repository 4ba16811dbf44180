"""
IEN Reader: parsers for IEN traffic-signal and detector feed dumps.

Contains the core logic for turning raw IEN files into flat records:
  - ien_reader.data.report       : multi-section IEN report parsing
  - ien_reader.data.reconstruct  : description field reconstruction
  - ien_reader.data.status       : connection/status log parsing
  - ien_reader.data.frames       : record lists to pandas DataFrames
  - ien_reader.sections          : section kinds and their layouts
  - ien_reader.results           : tagged results and failure kinds
  - ien_reader.config            : YAML config loading
  - ien_reader.logging_utils     : project-wide logger factory
"""

from ien_reader.data.report import parse_section_report
from ien_reader.data.status import parse_status_log

__all__ = ["parse_section_report", "parse_status_log"]
