"""Test configuration and shared fixtures"""

import os

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from cashcard.app import app
from cashcard.config import Config, get_config
from cashcard.db import DatabaseConnection
from cashcard.models.base import BaseModel
from cashcard.repository.cash_card import CashCardRepository
from cashcard.services.cash_card import CashCardService
from cashcard.services.ownership import OwnershipGuard
from cashcard.services.token import TokenService


@pytest.fixture(scope="class")
def test_config():
    return Config(
        # overwrite application name so it will use another database file
        app_name="cashcard-test",
        secret_key="cashcard-test-secret",
    )


# each test class have it's own empty database
@pytest.fixture(scope="class")
def test_app(test_config: Config):
    app.dependency_overrides = {get_config: lambda: test_config}

    # trigger table creation
    db_conn = DatabaseConnection(config=test_config)
    db_conn.create_tables()

    client = TestClient(app)
    yield client
    app.dependency_overrides = {}
    db_conn.engine.dispose()
    # clean up test database file after tests
    if os.path.exists(test_config.database_path):
        os.remove(test_config.database_path)


@pytest.fixture(scope="class")
def token_factory(test_config: Config):
    """Get token of any owner by name"""
    token_service = TokenService(config=test_config)

    def f(owner: str) -> str:
        return token_service.generate_token(owner)

    return f


@pytest.fixture(scope="class")
def headers_factory(token_factory):
    """Request headers authenticating as the given owner"""

    def f(owner: str) -> dict[str, str]:
        return {"x-token": token_factory(owner)}

    return f


@pytest.fixture
def db_session():
    """Session bound to a fresh in-memory database"""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    BaseModel.metadata.create_all(bind=engine)
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    yield session
    session.close()
    engine.dispose()


@pytest.fixture
def cash_card_repository(db_session) -> CashCardRepository:
    return CashCardRepository(db=db_session)


@pytest.fixture
def cash_card_service(cash_card_repository: CashCardRepository) -> CashCardService:
    return CashCardService(
        repo=cash_card_repository,
        ownership_guard=OwnershipGuard(repo=cash_card_repository),
        config=Config(secret_key="cashcard-test-secret", max_page_size=100),
    )
