from .database import (
    Base,
    ReportingDashboard,
    UPDATABLE_COLUMNS,
    get_engine,
    get_session_factory,
)
from .records import GroupName, MetricRecord, MetricValueType, SheetRow

__all__ = [
    'Base', 'ReportingDashboard', 'UPDATABLE_COLUMNS', 'get_engine', 'get_session_factory',
    'GroupName', 'MetricRecord', 'MetricValueType', 'SheetRow',
]
