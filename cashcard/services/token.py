"""Token service. Issues signed tokens for an owner and verifies them."""

import logging
import time
from datetime import timedelta

import jwt
from fastapi import Depends

from cashcard.config import Config, get_config
from cashcard.errors.token import TokenInvalid

logger = logging.getLogger(__name__)


class TokenService:
    ALGORITHM = "HS256"

    def __init__(self, config: Config = Depends(get_config)):
        self.config = config

    def generate_token(self, owner: str) -> str:
        """Generate a new signed token with the owner name and current timestamp."""
        if not self.config.secret_key:
            raise ValueError(
                "CASHCARD_SECRET_KEY is missing in the configuration. Please set a valid secret key."
            )
        now = int(time.time())
        data = {
            "sub": owner,
            "iat": now,
            "exp": now + int(timedelta(hours=self.config.token_ttl_hours).total_seconds()),
        }
        return jwt.encode(data, self.config.secret_key, algorithm=self.ALGORITHM)

    def get_owner_from_token(self, token: str) -> str:
        """Verify the token and return the owner name stored in it."""
        if not self.config.secret_key:
            logger.error("TokenService: no secret key configured, rejecting token")
            raise TokenInvalid
        try:
            payload = jwt.decode(
                token,
                self.config.secret_key,
                algorithms=[self.ALGORITHM],
                options={"require": ["exp", "sub"]},
            )
        except jwt.InvalidTokenError as exc:
            logger.info("TokenService: rejected token: %s", exc)
            raise TokenInvalid
        owner = payload.get("sub")
        if not isinstance(owner, str) or not owner.strip():
            raise TokenInvalid("no subject")
        return owner
