"""
Database connection and session management.
Provides the Database wrapper around the SQLAlchemy engine, the session
dependency, and the base class for models.
"""
from typing import Iterator, List, Type
import enum

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool

# Create base class for declarative models
Base = declarative_base()

IN_MEMORY_URLS = ("sqlite://", "sqlite:///:memory:")


def enum_values(enum_class: Type[enum.Enum]) -> List[str]:
    """Store enum members by value ("available") rather than by name."""
    return [member.value for member in enum_class]


class Database:
    """
    Owns the engine and session factory for one storage backend.

    The application receives an instance through create_app, so tests can
    build their own (for example an in-memory SQLite database) without
    touching module state.
    """

    def __init__(self, url: str, echo: bool = False):
        connect_args = {}
        engine_kwargs = {}
        if url.startswith("sqlite"):
            # Sessions are used from the worker threads of the ASGI server
            connect_args["check_same_thread"] = False
            connect_args["timeout"] = 30
            if url in IN_MEMORY_URLS:
                engine_kwargs["poolclass"] = StaticPool

        self.url = url
        self.engine = create_engine(url, echo=echo, connect_args=connect_args, **engine_kwargs)
        self.SessionLocal = sessionmaker(bind=self.engine, autoflush=False, expire_on_commit=True)

    def create_tables(self) -> None:
        """Create every table registered on Base (models must be imported first)."""
        from . import models  # noqa: F401
        Base.metadata.create_all(bind=self.engine)

    def drop_tables(self) -> None:
        from . import models  # noqa: F401
        Base.metadata.drop_all(bind=self.engine)

    def session(self) -> Session:
        return self.SessionLocal()

    def dispose(self) -> None:
        self.engine.dispose()


def get_db(request: Request) -> Iterator[Session]:
    """
    Database dependency - Creates and yields a database session.
    
    The session is automatically closed after the request is processed,
    even if an exception occurs during request handling.
    
    Yields:
        SQLAlchemy Session: Database session
    """
    db = request.app.state.database.session()
    try:
        yield db
    finally:
        db.close()
