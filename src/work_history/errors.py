"""Exception hierarchy for the work history formatter.

Every error is fatal to a run. Each class carries the process exit code the
CLI uses when it reaches the user.
"""

from __future__ import annotations

from pathlib import Path


class WorkHistoryError(Exception):
    """Base exception for all work history errors."""

    exit_code: int = 1


class UsageError(WorkHistoryError):
    """Wrong number of positional arguments."""

    exit_code = 2


class PathNotFoundError(WorkHistoryError):
    """Input file or output directory does not exist."""

    exit_code = 3

    def __init__(self, kind: str, path: str | Path) -> None:
        self.kind = kind
        self.path = Path(path)
        super().__init__(f"{kind} not found: {path}")


class MalformedRecordError(WorkHistoryError):
    """A data row has fewer fields than a work history entry needs."""

    exit_code = 4

    def __init__(self, row_number: int, field_count: int, required: int) -> None:
        self.row_number = row_number
        self.field_count = field_count
        self.required = required
        super().__init__(
            f"Row {row_number}: expected at least {required} fields, found {field_count}"
        )


class DateFormatError(WorkHistoryError):
    """A date field is not a valid MM/DD/YYYY date."""

    exit_code = 5

    def __init__(
        self,
        text: str,
        role: str = "date",
        row_number: int | None = None,
    ) -> None:
        self.text = text
        self.role = role
        self.row_number = row_number
        prefix = f"Row {row_number}: " if row_number is not None else ""
        super().__init__(
            f"{prefix}Failed to parse {role} date {text!r} (expected MM/DD/YYYY)"
        )


class IoError(WorkHistoryError):
    """Opening, reading or writing a file failed."""

    exit_code = 6

    def __init__(self, action: str, path: str | Path, reason: object) -> None:
        self.action = action
        self.path = Path(path)
        super().__init__(f"Failed to {action} {path}: {reason}")
