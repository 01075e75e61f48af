"""
Spreadsheet loaders for reporting dashboard metric definitions.

This package reads the metric definition workbook and turns its rows into
canonical records ready for the database.

Architecture:
    Excel → excel_loader → normalizer → reporting_dashboard

Modules:
    config: Column names and lookup tables
    excel_loader: First-sheet reading into raw row dicts
    normalizer: Field mapping and defaulting into MetricRecords
"""

from .excel_loader import read_rows
from .normalizer import normalize_row, normalize_rows

__all__ = ['read_rows', 'normalize_row', 'normalize_rows']
