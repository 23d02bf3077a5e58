"""Tests for token authentication"""

import time

import jwt
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from cashcard.config import Config
from cashcard.errors.common import InfrastructureError
from cashcard.errors.token import TokenInvalid, TokenMissing
from cashcard.repository.cash_card import CashCardRepository


class TestTokenAuth:
    """Test security of protected API endpoints"""

    def test_access_protected_route_with_valid_token(self, test_app: TestClient, token_factory):
        response = test_app.get("/cashcards", headers={"x-token": token_factory("alice")})
        assert response.status_code == 200

    def test_access_protected_route_with_invalid_token(self, test_app: TestClient):
        response = test_app.get("/cashcards", headers={"x-token": "invalid-token-123"})
        assert response.status_code == 401
        assert response.json()["error_code"] == TokenInvalid.error_code

    def test_access_protected_route_without_token(self, test_app: TestClient):
        response = test_app.post("/cashcards", json={"amount": "1.00"})
        assert response.status_code == 401
        assert response.json()["error_code"] == TokenMissing.error_code

    def test_token_signed_with_another_key(self, test_app: TestClient):
        token = jwt.encode({"sub": "alice"}, "not-the-secret", algorithm="HS256")
        response = test_app.get("/cashcards", headers={"x-token": token})
        assert response.status_code == 401

    def test_expired_token(self, test_app: TestClient, test_config: Config):
        token = jwt.encode(
            {"sub": "alice", "exp": int(time.time()) - 60},
            test_config.secret_key,
            algorithm="HS256",
        )
        response = test_app.get("/cashcards", headers={"x-token": token})
        assert response.status_code == 401

    def test_token_with_empty_subject(self, test_app: TestClient, test_config: Config):
        token = jwt.encode(
            {"sub": " ", "exp": int(time.time()) + 60},
            test_config.secret_key,
            algorithm="HS256",
        )
        response = test_app.get("/cashcards", headers={"x-token": token})
        assert response.status_code == 401
        assert response.json()["error_code"] == TokenInvalid.error_code

    def test_token_without_expiry(self, test_app: TestClient, test_config: Config):
        token = jwt.encode({"sub": "alice"}, test_config.secret_key, algorithm="HS256")
        response = test_app.get("/cashcards", headers={"x-token": token})
        assert response.status_code == 401
        assert response.json()["error_code"] == TokenInvalid.error_code

    def test_token_without_subject(self, test_app: TestClient, test_config: Config):
        token = jwt.encode(
            {"exp": int(time.time()) + 60}, test_config.secret_key, algorithm="HS256"
        )
        response = test_app.get("/cashcards", headers={"x-token": token})
        assert response.status_code == 401
        assert response.json()["error_code"] == TokenInvalid.error_code


class TestStorageFailure:
    """Storage errors are reported as such, never as a missing card"""

    def test_storage_failure(self, test_app: TestClient, token_factory):
        class BrokenRepository(CashCardRepository):
            def get_by_id_and_owner(self, obj_id, owner):
                raise OperationalError("SELECT", {}, Exception("database is gone"))

        test_app.app.dependency_overrides[CashCardRepository] = BrokenRepository
        try:
            response = test_app.get("/cashcards/1", headers={"x-token": token_factory("alice")})
        finally:
            del test_app.app.dependency_overrides[CashCardRepository]
        assert response.status_code == InfrastructureError.http_code
        assert response.json()["error_code"] == InfrastructureError.error_code
