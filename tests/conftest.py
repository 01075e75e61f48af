import os
import sys

import openpyxl
import pytest
from sqlalchemy import create_engine

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

from models import Base

HEADERS = [
    "Metric Name", "Order", "Dashboard SQL", "Detail SQL",
    "Leaderboard SQL", "Value Type", "Group Name", "Description",
]

SAMPLE_ROWS = [
    ("Placements This Month", 1, "SELECT count(*) FROM placements", "SELECT * FROM placements",
     "SELECT owner, count(*) FROM placements GROUP BY owner", "PLAIN", "Live Metrics", "Placements made"),
    ("Revenue", 2, "SELECT sum(fee) FROM invoices", "SELECT * FROM invoices",
     None, "CURRENCY", "Permanent Job Metrics", None),
    ("Fill Rate", 3, "SELECT 0.42", "SELECT * FROM jobs",
     None, "Percentage", "Unknown Group", "Share of jobs filled"),
]


def write_workbook(path, rows, headers=HEADERS):
    """Save a workbook whose first sheet has headers on row 1 and rows below."""
    wb = openpyxl.Workbook()
    ws = wb.active
    ws.title = "Metrics"
    ws.append(list(headers))
    for row in rows:
        ws.append(list(row))
    wb.save(path)
    return str(path)


@pytest.fixture
def metrics_workbook(tmp_path):
    """Workbook with the three SAMPLE_ROWS."""
    return write_workbook(tmp_path / "metrics.xlsx", SAMPLE_ROWS)


@pytest.fixture
def db_url(tmp_path):
    return f"sqlite:///{tmp_path / 'dashboard.db'}"


@pytest.fixture
def engine(db_url):
    """SQLite engine with the reporting_dashboard table created."""
    engine = create_engine(db_url)
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()
