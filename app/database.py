from typing import Generator

from fastapi import Request
from sqlalchemy import create_engine, text
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from app.config import Settings

# Base class for models
Base = declarative_base()


class Database:
    """
    Owns the SQLAlchemy engine (and its connection pool) for one application.

    Created once by the application factory and kept on ``app.state.db``.
    Request handlers reach it through the ``get_db`` dependency.
    """

    def __init__(self, url: str, **engine_kwargs):
        self.url = url
        self.engine = create_engine(url, **engine_kwargs)
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        """Build a pooled database from application settings."""
        if settings.DATABASE_URL.startswith("sqlite"):
            return cls(
                settings.DATABASE_URL,
                connect_args={"check_same_thread": False},
            )
        return cls(
            settings.DATABASE_URL,
            pool_size=settings.DB_POOL_SIZE,
            max_overflow=settings.DB_MAX_OVERFLOW,
            pool_pre_ping=settings.DB_POOL_PRE_PING,
        )

    def session(self) -> Session:
        return self.SessionLocal()

    def create_all(self) -> None:
        # Models must be imported so they register on Base.metadata
        from app.models import product  # noqa: F401

        Base.metadata.create_all(bind=self.engine)

    def drop_all(self) -> None:
        Base.metadata.drop_all(bind=self.engine)

    def ping(self) -> None:
        """
        Run a trivial query against the database.

        Raises:
            sqlalchemy.exc.OperationalError: If the database cannot be reached
        """
        with self.engine.connect() as conn:
            conn.execute(text("SELECT 1"))

    def dispose(self) -> None:
        self.engine.dispose()


def get_db(request: Request) -> Generator[Session, None, None]:
    """
    Dependency to get database session.
    Yields a database session and closes it after use.
    """
    db = request.app.state.db.session()
    try:
        yield db
    finally:
        db.close()
