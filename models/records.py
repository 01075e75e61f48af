"""
Typed records for the metric import.

SheetRow is the spreadsheet row with every expected column made an explicit
optional; MetricRecord is the canonical, store-ready shape. The two enumerated
fields are enums whose lookups fall back to a fixed member instead of failing.
"""

from dataclasses import asdict, dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Mapping, Optional
from uuid import UUID

from loaders.config import (
    COL_DASHBOARD_SQL,
    COL_DESCRIPTION,
    COL_DETAIL_SQL,
    COL_GROUP_NAME,
    COL_LEADERBOARD_SQL,
    COL_METRIC_NAME,
    COL_ORDER,
    COL_VALUE_TYPE,
    DEFAULT_GROUP_NAME,
    DEFAULT_VALUE_TYPE,
    GROUP_NAMES,
    VALUE_TYPE_MAPPING,
)


class MetricValueType(str, Enum):
    """Display-formatting hint for a metric's headline value."""

    PLAIN = "plain"
    CURRENCY = "currency"
    PERCENTAGE = "percentage"
    DAYS = "days"
    MONTHS = "months"

    @classmethod
    def from_cell(cls, value: Any) -> "MetricValueType":
        """Case-sensitive lookup; 'Currency', '' or None all give PLAIN."""
        if isinstance(value, str) and value in VALUE_TYPE_MAPPING:
            return cls(VALUE_TYPE_MAPPING[value])
        return cls(DEFAULT_VALUE_TYPE)


class GroupName(str, Enum):
    """Dashboard section a metric is shown under."""

    LIVE_METRICS = "Live Metrics"
    PERMANENT_JOB_METRICS = "Permanent Job Metrics"
    SECONDARY_METRICS = "Secondary Metrics"
    CONTRACT_JOBS_METRICS = "Contract Jobs Metrics"
    LEADS_METRICS = "Leads Metrics"
    RATIOS = "Ratios"

    @classmethod
    def from_cell(cls, value: Any) -> "GroupName":
        if isinstance(value, str) and value in GROUP_NAMES:
            return cls(value)
        return cls(DEFAULT_GROUP_NAME)


@dataclass(frozen=True)
class SheetRow:
    """One spreadsheet row; None means the cell was absent or empty."""

    metric_name: Optional[Any] = None
    order: Optional[Any] = None
    dashboard_sql: Optional[Any] = None
    detail_sql: Optional[Any] = None
    leaderboard_sql: Optional[Any] = None
    value_type: Optional[Any] = None
    group_name: Optional[Any] = None
    description: Optional[Any] = None

    @classmethod
    def from_raw(cls, row: Mapping[str, Any]) -> "SheetRow":
        return cls(
            metric_name=row.get(COL_METRIC_NAME),
            order=row.get(COL_ORDER),
            dashboard_sql=row.get(COL_DASHBOARD_SQL),
            detail_sql=row.get(COL_DETAIL_SQL),
            leaderboard_sql=row.get(COL_LEADERBOARD_SQL),
            value_type=row.get(COL_VALUE_TYPE),
            group_name=row.get(COL_GROUP_NAME),
            description=row.get(COL_DESCRIPTION),
        )


@dataclass
class MetricRecord:
    """A reporting_dashboard row ready to be written."""

    id: UUID
    created_at: datetime
    updated_at: datetime
    name: Optional[Any]
    order: Optional[Any]
    metric_value_query: Optional[Any]
    details_query: Optional[Any]
    leaderboard_query: Any
    metric_value_type: MetricValueType
    group_name: GroupName
    description: Optional[Any] = None
    is_top_dial: bool = False
    deleted_at: Optional[datetime] = None

    def as_row(self) -> dict:
        """Column -> value mapping, enums flattened to their stored strings."""
        row = asdict(self)
        row['metric_value_type'] = self.metric_value_type.value
        row['group_name'] = self.group_name.value
        return row
