"""
Fatal error taxonomy for metric imports.

Every error here ends the run; nothing is retried. The CLI turns any of them
into a message on stderr and a nonzero exit status.
"""


class MetricImportError(Exception):
    """Base class for all import failures."""


class StoreConnectionError(MetricImportError):
    """The database could not be reached. Raised before any write."""


class SpreadsheetError(MetricImportError):
    """The input workbook is missing, unreadable or unparseable. Raised before any write."""


class StoreWriteError(MetricImportError):
    """A write inside the import transaction failed. Raised after rollback."""
