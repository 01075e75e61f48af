"""
End-to-end import: connect, read, normalize, upsert.

run_import never exits the process. Each failure surfaces as one of the
MetricImportError subclasses so the caller can decide what to do with it.
"""

from dataclasses import dataclass

from pydantic import ValidationError
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from core import StoreConnectionError, get_logger, get_settings, mask_url
from loaders import normalize_rows, read_rows
from models import get_engine, get_session_factory

from .metric_upserter import MetricUpserter

logger = get_logger("import_service")


@dataclass
class ImportResult:
    file_path: str
    rows_read: int
    records_written: int


def connect_engine(db_url=None):
    """Build an engine for db_url (default: from settings) and check it answers."""
    if db_url is None:
        try:
            db_url = get_settings().effective_database_url
        except ValidationError as e:
            logger.error(f"Invalid database settings: {e}")
            raise StoreConnectionError(f"Invalid database settings: {e}") from e
    try:
        engine = get_engine(db_url)
    except (SQLAlchemyError, ImportError) as e:
        logger.error(f"Error connecting to database {mask_url(db_url)}: {e}")
        raise StoreConnectionError(f"Error connecting to database: {e}") from e
    try:
        check_connection(engine)
    except StoreConnectionError:
        engine.dispose()
        raise
    return engine


def check_connection(engine):
    """Run SELECT 1; raise StoreConnectionError if the database does not answer."""
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.error(f"Error connecting to database {mask_url(str(engine.url))}: {e}")
        raise StoreConnectionError(f"Error connecting to database: {e}") from e
    logger.info(f"Successfully connected to database: {engine.url.database}")


def run_import(file_path, engine=None):
    """
    Import the metric workbook at file_path into reporting_dashboard.

    Args:
        file_path: Spreadsheet to read (first sheet only)
        engine: Optional SQLAlchemy engine; when omitted one is built from
                settings and disposed before returning

    Returns:
        ImportResult

    Raises:
        StoreConnectionError: database unreachable, nothing written
        SpreadsheetError: workbook missing or unreadable, nothing written
        StoreWriteError: a write failed, everything rolled back
    """
    owns_engine = engine is None
    if owns_engine:
        engine = connect_engine()

    try:
        if not owns_engine:
            check_connection(engine)

        rows = read_rows(file_path)
        records = normalize_rows(rows)

        upserter = MetricUpserter(get_session_factory(engine))
        written = upserter.upsert(records)
    finally:
        if owns_engine:
            engine.dispose()

    return ImportResult(file_path=str(file_path), rows_read=len(rows), records_written=written)
