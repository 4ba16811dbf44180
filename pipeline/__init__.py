# pipeline/ — batch scripts for IEN Reader.
#
# Run scripts in order:
#   01_parse_reports      → every raw IEN report → per-section CSVs
#   02_parse_status_logs  → every status log → one status CSV
