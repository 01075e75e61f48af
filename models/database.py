from sqlalchemy import Boolean, Column, DateTime, Integer, String, Text, Uuid, create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from loaders.config import TABLE_NAME

Base = declarative_base()


class ReportingDashboard(Base):
    __tablename__ = TABLE_NAME

    id = Column(Uuid, primary_key=True)
    created_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False)
    deleted_at = Column(DateTime(timezone=True), nullable=True)

    name = Column(String, nullable=False, index=True)
    order = Column(Integer, nullable=False)
    is_top_dial = Column(Boolean, nullable=False, default=False)

    # Query text is stored as-is; nothing here checks it is valid SQL
    metric_value_query = Column(Text, nullable=False)
    details_query = Column(Text, nullable=False)
    leaderboard_query = Column(Text)

    metric_value_type = Column(String)
    group_name = Column(String)
    description = Column(Text, nullable=True)


# Every column an update may overwrite; id, created_at and deleted_at are never touched
UPDATABLE_COLUMNS = [
    'updated_at',
    'name',
    'order',
    'is_top_dial',
    'metric_value_query',
    'details_query',
    'leaderboard_query',
    'metric_value_type',
    'group_name',
    'description',
]


def get_engine(db_url):
    return create_engine(db_url)


def get_session_factory(engine):
    return sessionmaker(bind=engine)
