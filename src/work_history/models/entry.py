"""Raw row and decoded entry models."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date

from pydantic import BaseModel


@dataclass(frozen=True)
class WorkHistoryRow:
    """Named view of one raw CSV row, before any conversion."""

    company: str
    position: str
    start_date: str
    end_date: str
    address: str
    supervisor: str
    description: str
    reason: str = ""

    @classmethod
    def from_fields(cls, fields: Sequence[str]) -> WorkHistoryRow:
        """Map positional fields onto names.

        Column order: Company, Job Title, Start Date, End Date, Address,
        Supervisor Name, Description, Reason. Reason is optional.
        """
        return cls(
            company=fields[0],
            position=fields[1],
            start_date=fields[2],
            end_date=fields[3],
            address=fields[4],
            supervisor=fields[5],
            description=fields[6],
            reason=fields[7] if len(fields) > 7 else "",
        )


class WorkHistoryEntry(BaseModel):
    company: str
    position: str
    start_date: date
    end_date: date
    location: str  # "City, State" or whatever the address degrades to
    responsibilities: str

    model_config = {"frozen": True}
