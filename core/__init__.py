"""
Shared runtime plumbing for the metric importer: environment settings,
logging and the error taxonomy.
"""

from .config import Settings, get_settings, mask_url
from .errors import (
    MetricImportError,
    SpreadsheetError,
    StoreConnectionError,
    StoreWriteError,
)
from .logging import get_logger

__all__ = [
    'Settings', 'get_settings', 'mask_url', 'get_logger',
    'MetricImportError', 'SpreadsheetError', 'StoreConnectionError', 'StoreWriteError',
]
