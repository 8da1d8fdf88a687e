"""Parsers turning CSV text into work history entries."""

from work_history.parsers.csv_reader import read_rows
from work_history.parsers.date_parser import format_month_year, parse_date
from work_history.parsers.location import extract_location
from work_history.parsers.record_decoder import REQUIRED_FIELDS, decode_row, decode_rows

__all__ = [
    "REQUIRED_FIELDS",
    "decode_row",
    "decode_rows",
    "extract_location",
    "format_month_year",
    "parse_date",
    "read_rows",
]
