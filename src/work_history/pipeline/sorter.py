"""Chronological ordering of decoded entries."""

from __future__ import annotations

from collections.abc import Iterable
from operator import attrgetter

from work_history.models.entry import WorkHistoryEntry


def sort_by_end_date(entries: Iterable[WorkHistoryEntry]) -> list[WorkHistoryEntry]:
    """Return a new list, most recent end date first.

    Entries with the same end date keep their source order.
    """
    return sorted(entries, key=attrgetter("end_date"), reverse=True)
