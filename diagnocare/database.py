import logging
from threading import Lock

from sqlalchemy import create_engine, inspect, text
from sqlalchemy.orm import declarative_base, sessionmaker

from diagnocare.core import config


logger = logging.getLogger(__name__)


def _connect_args(database_url: str) -> dict:
    # SQLite connections are handed between FastAPI's worker threads.
    if database_url.startswith("sqlite"):
        return {"check_same_thread": False}
    return {}


engine = create_engine(
    config.DATABASE_URL,
    connect_args=_connect_args(config.DATABASE_URL),
    pool_pre_ping=True,
)

SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
)

Base = declarative_base()

_schema_lock = Lock()
_user_schema_checked = False


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def ensure_user_email_index(bind=None) -> None:
    """Make sure ``users.email`` carries a unique index.

    Tables created by ``create_all`` already have it; this covers tables that
    predate the constraint.
    """
    global _user_schema_checked

    if _user_schema_checked:
        return

    bind = bind or engine

    with _schema_lock:
        if _user_schema_checked:
            return

        inspector = inspect(bind)

        if 'users' not in inspector.get_table_names():
            _user_schema_checked = True
            return

        unique_columns = {
            tuple(index['column_names'])
            for index in inspector.get_indexes('users')
            if index.get('unique')
        }
        unique_columns.update(
            tuple(constraint['column_names'])
            for constraint in inspector.get_unique_constraints('users')
        )

        if ('email',) not in unique_columns:
            logger.info('Adding unique index on users.email')
            with bind.begin() as connection:
                connection.execute(
                    text('CREATE UNIQUE INDEX IF NOT EXISTS ix_users_email_unique ON users(email)')
                )

        _user_schema_checked = True


def init_schema(bind=None) -> None:
    from diagnocare.models import banner, booking, diagnostic_test, recommendation, user  # noqa: F401

    bind = bind or engine
    Base.metadata.create_all(bind=bind)
    ensure_user_email_index(bind)
