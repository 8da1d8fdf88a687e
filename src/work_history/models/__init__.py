"""Data models for the work history pipeline."""

from work_history.models.entry import WorkHistoryEntry, WorkHistoryRow

__all__ = [
    "WorkHistoryEntry",
    "WorkHistoryRow",
]
