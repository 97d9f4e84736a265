import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.main import app
from app.db.base import Base
from app.db.session import configure_engine, get_db
from tests.helpers import seed_directory


@pytest.fixture()
def engine():
    """
    A private in-memory SQLite database per test, configured like the
    application engine (foreign keys on, schema gate installed).

    The schema gate refuses DROP TABLE, so tables are never dropped: the
    database simply disappears with the engine.
    """
    engine = configure_engine(
        create_engine(
            "sqlite://",
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    )
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture()
def db_session(engine):
    TestingSessionLocal = sessionmaker(
        bind=engine, autocommit=False, autoflush=False, expire_on_commit=False
    )
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def directory(db_session):
    """The sample directory: 5 departments, 15 employees."""
    seed_directory(db_session)
    return db_session


@pytest.fixture(autouse=True)
def override_get_db(db_session):
    def _get_db_override():
        yield db_session

    app.dependency_overrides[get_db] = _get_db_override
    yield
    app.dependency_overrides.clear()
