# ABOUTME: Export module for writing the prospect collection to delimited text.
# ABOUTME: Provides CSV export with embedded JSON history fields and parsers to read them back.

from prospect_crm.export.csv_exporter import (
    CSVExporter,
    default_export_filename,
    escape_field,
    parse_education,
    parse_experience,
    parse_requests,
)

__all__ = [
    "CSVExporter",
    "default_export_filename",
    "escape_field",
    "parse_education",
    "parse_experience",
    "parse_requests",
]
