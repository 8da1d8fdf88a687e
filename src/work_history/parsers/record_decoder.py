"""Decode raw CSV rows into WorkHistoryEntry objects."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from work_history.errors import MalformedRecordError
from work_history.models.entry import WorkHistoryEntry, WorkHistoryRow
from work_history.parsers.date_parser import parse_date
from work_history.parsers.location import extract_location

logger = logging.getLogger(__name__)

# Company through Description; Reason may be missing.
REQUIRED_FIELDS = 7


def decode_row(fields: Sequence[str], row_number: int) -> WorkHistoryEntry:
    """Decode one data row. ``row_number`` is 1-based, header excluded."""
    if len(fields) < REQUIRED_FIELDS:
        raise MalformedRecordError(row_number, len(fields), REQUIRED_FIELDS)

    row = WorkHistoryRow.from_fields(fields)
    entry = WorkHistoryEntry(
        company=row.company,
        position=row.position,
        start_date=parse_date(row.start_date, role="start", row_number=row_number),
        end_date=parse_date(row.end_date, role="end", row_number=row_number),
        location=extract_location(row.address),
        responsibilities=row.description,
    )
    logger.debug("Decoded row %d: %s (%s)", row_number, entry.company, entry.location)
    return entry


def decode_rows(rows: Iterable[Sequence[str]]) -> list[WorkHistoryEntry]:
    """Decode rows in order, stopping at the first bad row."""
    return [decode_row(fields, row_number) for row_number, fields in enumerate(rows, 1)]
