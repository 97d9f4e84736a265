from contextlib import contextmanager

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from app.core.config import settings
from app.core.guards import install_schema_guard


def configure_engine(engine: Engine) -> Engine:
    if engine.dialect.name == "sqlite":
        @event.listens_for(engine, "connect")
        def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    install_schema_guard(engine)
    return engine


def _connect_args(url: str) -> dict:
    if url.startswith("sqlite"):
        return {"check_same_thread": False}
    return {}


engine = configure_engine(
    create_engine(
        settings.DATABASE_URL,
        pool_pre_ping=True,
        connect_args=_connect_args(settings.DATABASE_URL),
    )
)

SessionLocal = sessionmaker(
    bind=engine,
    autocommit=False,
    autoflush=False,
    expire_on_commit=False,
)

def get_db():
    db = SessionLocal()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


@contextmanager
def transaction(db: Session):
    """
    One atomic unit of work: commits when the block exits normally, rolls
    back everything written inside it when the block raises.
    """
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
