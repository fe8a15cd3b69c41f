import logging

from sqlmodel import SQLModel, create_engine, Session
from app.core.config import settings

logger = logging.getLogger(__name__)


def build_engine(database_url: str, **kwargs):
    # check_same_thread is needed for SQLite, FastAPI runs sync routes in a threadpool
    connect_args = {"check_same_thread": False} if database_url.startswith("sqlite") else {}
    return create_engine(database_url, connect_args=connect_args, **kwargs)


engine = build_engine(settings.DATABASE_URL)


def get_session():
    with Session(engine) as session:
        yield session


def create_db_and_tables(bind=None):
    # Import models so every table is registered with SQLModel metadata
    from app import models  # noqa: F401

    SQLModel.metadata.create_all(bind or engine)
    logger.info("Database tables ready: %s", ", ".join(sorted(SQLModel.metadata.tables)))
