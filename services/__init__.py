from .import_service import ImportResult, check_connection, connect_engine, run_import
from .metric_upserter import MetricUpserter

__all__ = ['ImportResult', 'MetricUpserter', 'check_connection', 'connect_engine', 'run_import']
