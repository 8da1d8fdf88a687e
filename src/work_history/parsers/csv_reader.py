"""Read the raw rows of a work history CSV file."""

from __future__ import annotations

import csv
import logging
from pathlib import Path

from work_history.errors import IoError

logger = logging.getLogger(__name__)

# Description fields can be long; the csv module default is 128 KiB.
FIELD_SIZE_LIMIT = 2**31 - 1


def read_rows(file_path: str | Path, encoding: str = "utf-8-sig") -> list[list[str]]:
    """Load every data row of a CSV file, skipping the header row.

    Fields may be double-quoted and quoted fields may span lines. Rows can
    have any number of fields; field count is checked at decode time. Blank
    lines are ignored everywhere, including before the header.
    """
    path = Path(file_path)
    csv.field_size_limit(FIELD_SIZE_LIMIT)
    try:
        with open(path, encoding=encoding, newline="") as f:
            records = (row for row in csv.reader(f) if row)
            header = next(records, None)
            rows = list(records)
    except OSError as exc:
        raise IoError("read input file", path, exc.strerror or exc) from exc
    except UnicodeDecodeError as exc:
        raise IoError("decode input file", path, exc) from exc
    except csv.Error as exc:
        raise IoError("parse input file", path, exc) from exc

    if header is None:
        logger.warning("Input file %s is empty", path)
    logger.info("Read %d data rows from %s", len(rows), path)
    return rows
