from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.exc import SQLAlchemyError

from core import StoreWriteError, get_logger
from loaders.config import TABLE_NAME
from models import ReportingDashboard, UPDATABLE_COLUMNS

logger = get_logger("metric_upserter")

# Dialects with INSERT ... ON CONFLICT support
DIALECT_INSERTS = {
    'postgresql': pg_insert,
    'sqlite': sqlite_insert,
}


class MetricUpserter:
    def __init__(self, session_factory):
        self.session_factory = session_factory

    def upsert(self, records):
        """
        Write all records in one transaction; insert each, or update it if its id exists.

        On an id conflict every column except id, created_at and deleted_at is
        overwritten, updated_at included. If any write fails the whole batch is
        rolled back and StoreWriteError is raised once the rollback is done.

        Returns:
            int: number of records written
        """
        written = 0
        try:
            with self.session_factory() as session, session.begin():
                insert = self._insert_for(session)
                for record in records:
                    stmt = insert(ReportingDashboard).values(record.as_row())
                    stmt = stmt.on_conflict_do_update(
                        index_elements=[ReportingDashboard.id],
                        set_={col: stmt.excluded[col] for col in UPDATABLE_COLUMNS},
                    )
                    session.execute(stmt)
                    written += 1
        except SQLAlchemyError as e:
            logger.error(f"Error inserting data, rolled back after {written} successful writes: {e}")
            raise StoreWriteError(f"Error inserting data: {e}") from e

        logger.info(f"Successfully inserted/updated {written} records into {TABLE_NAME} table")
        return written

    def _insert_for(self, session):
        dialect = session.get_bind().dialect.name
        if dialect not in DIALECT_INSERTS:
            raise StoreWriteError(f"Upsert is not supported on the '{dialect}' dialect")
        return DIALECT_INSERTS[dialect]
