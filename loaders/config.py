"""
Configuration constants for reporting dashboard metric imports.

This module centralizes the spreadsheet column names and the lookup tables used
during normalization, so the sheet layout can change without touching core logic.
"""

# Spreadsheet columns (first row of the first sheet)
COL_METRIC_NAME = "Metric Name"
COL_ORDER = "Order"
COL_DASHBOARD_SQL = "Dashboard SQL"
COL_DETAIL_SQL = "Detail SQL"
COL_LEADERBOARD_SQL = "Leaderboard SQL"
COL_VALUE_TYPE = "Value Type"
COL_GROUP_NAME = "Group Name"
COL_DESCRIPTION = "Description"

EXPECTED_COLUMNS = [
    COL_METRIC_NAME,
    COL_ORDER,
    COL_DASHBOARD_SQL,
    COL_DETAIL_SQL,
    COL_LEADERBOARD_SQL,
    COL_VALUE_TYPE,
    COL_GROUP_NAME,
    COL_DESCRIPTION,
]

# Case-sensitive: only these exact spellings are recognized
VALUE_TYPE_MAPPING = {
    "PLAIN": "plain",
    "plain": "plain",
    "CURRENCY": "currency",
    "PERCENTAGE": "percentage",
    "DAYS": "days",
    "MONTHS": "months",
}

GROUP_NAMES = [
    "Live Metrics",
    "Permanent Job Metrics",
    "Secondary Metrics",
    "Contract Jobs Metrics",
    "Leads Metrics",
    "Ratios",
]

DEFAULT_VALUE_TYPE = "plain"
DEFAULT_GROUP_NAME = "Secondary Metrics"

# Stored when a metric has no leaderboard; an empty statement the dashboard skips
NOOP_LEADERBOARD_QUERY = ";"

TABLE_NAME = "reporting_dashboard"
