import sys
import os

# Add project root to sys.path
sys.path.append(os.getcwd())

from core import MetricImportError, mask_url
from models import Base, ReportingDashboard
from services import connect_engine


def init_db():
    """Create the reporting_dashboard table if it does not exist yet. Existing rows are kept."""
    print("Initializing Database...")
    try:
        engine = connect_engine()
    except MetricImportError as e:
        print(f"Error initializing database: {e}", file=sys.stderr)
        return 1

    try:
        print(f"Creating table {ReportingDashboard.__tablename__} on {mask_url(str(engine.url))}...")
        Base.metadata.create_all(engine, tables=[ReportingDashboard.__table__])
    finally:
        engine.dispose()

    print("Database ready.")
    return 0


if __name__ == "__main__":
    sys.exit(init_db())
