"""Shared test fixtures."""

from __future__ import annotations

from datetime import date
from pathlib import Path

import pytest

from work_history.models.entry import WorkHistoryEntry

HEADER = "Company,Job Title,Start Date,End Date,Address,Supervisor Name,Description,Reason\n"


@pytest.fixture
def sample_row() -> list[str]:
    return [
        "Acme Corp",
        "Backend Engineer",
        "01/15/2020",
        "06/30/2022",
        "123 Main St, Springfield, IL 62704",
        "Jane Doe",
        "Built APIs, reviewed code",
        "Relocation",
    ]


@pytest.fixture
def sample_csv_text() -> str:
    return (
        HEADER
        + '"Initech","Analyst",03/01/2015,12/31/2017,"1 Corporate Dr, Austin, TX 78701",Bill,"TPS reports",Layoff\n'
        + '"Acme Corp",Engineer,01/15/2020,06/30/2022,"San Francisco, CA",Jane,"Built APIs, reviewed code",Relocation\n'
        + '"Globex",Lead,01/02/2018,01/10/2020,Remote,Hank,"Led team\nof five",New role\n'
    )


@pytest.fixture
def write_csv(tmp_path):
    """Write CSV text to a file under tmp_path and return its path."""

    def _write(text: str, name: str = "work_history.csv") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sample_csv(write_csv, sample_csv_text) -> Path:
    return write_csv(sample_csv_text)


@pytest.fixture
def make_entry():
    """Build a WorkHistoryEntry with defaults for fields a test doesn't care about."""

    def _make(**overrides) -> WorkHistoryEntry:
        fields = {
            "company": "Acme Corp",
            "position": "Engineer",
            "start_date": date(2019, 1, 1),
            "end_date": date(2020, 1, 1),
            "location": "Springfield, IL",
            "responsibilities": "Things",
        }
        fields.update(overrides)
        return WorkHistoryEntry(**fields)

    return _make
