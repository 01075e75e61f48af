"""
Normalization of raw spreadsheet rows into MetricRecords.

Mapping rules:
    Metric Name, Order, Dashboard SQL, Detail SQL
        passed through untouched; a missing cell becomes None and is left for
        the database to reject
    Value Type
        case-sensitive lookup, anything unrecognized -> plain
    Group Name
        one of six dashboard sections, anything else -> Secondary Metrics
    Leaderboard SQL
        used when truthy, otherwise the no-op placeholder ";"
    Description
        used when truthy, otherwise None

Every record gets a fresh uuid4 and the current UTC time, so two passes over
the same rows never produce the same ids.
"""

import uuid
from datetime import datetime, timezone

from models.records import GroupName, MetricRecord, MetricValueType, SheetRow

from .config import NOOP_LEADERBOARD_QUERY


def _utcnow():
    return datetime.now(timezone.utc)


def normalize_row(row, id_factory=uuid.uuid4, clock=_utcnow):
    """
    Convert one raw row mapping into a MetricRecord.

    Args:
        row: dict of header -> cell value (absent cells simply missing)
        id_factory: callable returning a new identifier
        clock: callable returning the creation timestamp

    Returns:
        MetricRecord
    """
    sheet_row = SheetRow.from_raw(row)
    now = clock()

    return MetricRecord(
        id=id_factory(),
        created_at=now,
        updated_at=now,
        name=sheet_row.metric_name,
        order=sheet_row.order,
        metric_value_query=sheet_row.dashboard_sql,
        details_query=sheet_row.detail_sql,
        leaderboard_query=sheet_row.leaderboard_sql or NOOP_LEADERBOARD_QUERY,
        metric_value_type=MetricValueType.from_cell(sheet_row.value_type),
        group_name=GroupName.from_cell(sheet_row.group_name),
        description=sheet_row.description or None,
    )


def normalize_rows(rows, id_factory=uuid.uuid4, clock=_utcnow):
    """Normalize rows one-to-one, keeping their order."""
    return [normalize_row(row, id_factory=id_factory, clock=clock) for row in rows]
