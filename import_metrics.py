"""
Command-line entry point: import a metric definition workbook into reporting_dashboard.

    import-metrics <excel_file_path>

Database connection settings come from DB_HOST, DB_PORT, DB_NAME, DB_USER and
DB_PASSWORD (or DATABASE_URL). Exits 0 when every row was written, 1 otherwise.
"""

import sys

from core import MetricImportError, get_logger
from services import run_import

logger = get_logger("import_metrics")

USAGE = "Usage: import-metrics <excel_file_path>"


def main(argv=None):
    args = sys.argv[1:] if argv is None else argv

    if len(args) != 1:
        print(USAGE)
        return 1

    try:
        result = run_import(args[0])
    except MetricImportError as e:
        print(f"Database import failed: {e}", file=sys.stderr)
        return 1

    logger.info(f"Imported {result.records_written} of {result.rows_read} rows from {result.file_path}")
    logger.info("Database import completed successfully!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
