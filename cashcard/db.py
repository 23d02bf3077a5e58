"""Database connection and initialization"""

import logging
import os
from typing import Any, Generator

from fastapi import Depends
from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker

from cashcard.config import Config, get_config
from cashcard.models.base import BaseModel

logger = logging.getLogger(__name__)


class DatabaseConnection:
    engine: Engine
    session_local: sessionmaker[Session]
    # database urls whose tables were already created in this process
    _initialized_urls: set[str] = set()

    def __init__(self, config: Config = Depends(get_config)) -> None:
        connect_args = {}
        if config.database_url.startswith("sqlite"):
            # Ensure the database folder exists.
            os.makedirs(config.database_path.parent, exist_ok=True)
            connect_args["check_same_thread"] = False
        self.engine = create_engine(config.database_url, connect_args=connect_args)
        self.session_local = sessionmaker(
            autocommit=False,
            autoflush=False,
            bind=self.engine,
        )
        if config.database_url not in self.__class__._initialized_urls:
            self.create_tables()
            self.__class__._initialized_urls.add(config.database_url)

    def create_tables(self) -> None:
        """Create all database tables defined in models."""
        logger.info("Creating database tables...")
        BaseModel.metadata.create_all(bind=self.engine)
        logger.info("Database tables created.")

    def get_session(self) -> Session:
        """Return a new SQLAlchemy session."""
        return self.session_local()


def get_db(db_conn: DatabaseConnection = Depends()) -> Generator[Session, Any, None]:
    """
    Dependency for providing a SQLAlchemy session to repositories and tests.

    Yields:
        SQLAlchemy Session.
    """
    session = db_conn.get_session()
    try:
        yield session
    finally:
        session.close()
