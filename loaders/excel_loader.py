"""
Spreadsheet reading for metric definition imports.

Only the first sheet is read. Its first row holds the column headers; every
following non-blank row becomes a mapping of header -> cell value, with empty
cells left out entirely so that "absent" and "empty" look the same downstream.

Functions:
    read_rows: Load the raw rows of a workbook
"""

import os
import warnings

import pandas as pd

from core import get_logger
from core.errors import SpreadsheetError

# Suppress openpyxl warnings about styles/formatting (we only read data values)
warnings.filterwarnings('ignore', category=UserWarning, module='openpyxl')

logger = get_logger("excel_loader")


def read_rows(file_path):
    """
    Read the first sheet of a workbook into raw row mappings.

    Args:
        file_path: Path to an .xlsx/.xlsm workbook

    Returns:
        list of dicts, one per non-blank data row, keyed by header text.
        Cells that are empty are not present in the dict.

    Raises:
        SpreadsheetError: the file is missing or cannot be parsed as a workbook

    Examples:
        >>> rows = read_rows("metrics.xlsx")
        >>> rows[0]["Metric Name"]
        'Placements This Month'
    """
    if not os.path.exists(file_path):
        logger.error(f"File not found: {file_path}")
        raise SpreadsheetError(f"File not found: {file_path}")

    try:
        # Only truly empty cells count as missing; "NA", "NULL" etc. are kept as text
        df = pd.read_excel(file_path, sheet_name=0, dtype=object, keep_default_na=False, na_values=[])
    except Exception as e:
        logger.error(f"Error reading Excel file: {e}")
        raise SpreadsheetError(f"Error reading Excel file {file_path}: {e}") from e

    rows = []
    for record in df.to_dict(orient='records'):
        row = {str(k): v for k, v in record.items() if _has_value(v)}
        # Entirely blank rows are skipped
        if row:
            rows.append(row)

    logger.info(f"Successfully read Excel file: {file_path} ({len(rows)} rows)")
    return rows


def _has_value(value):
    # Empty cells come back as "" (or NaN); anything list-like is treated as present
    if isinstance(value, str):
        return value != ""
    try:
        return not pd.isna(value)
    except (TypeError, ValueError):
        return True
