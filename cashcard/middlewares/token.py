"""Middleware for caller authentication, resolves the owner name from X-Token header"""

from fastapi import Depends, Header

from cashcard.errors.token import TokenMissing
from cashcard.services.token import TokenService


def get_caller_from_token(
    x_token: str | None = Header(
        default=None,
        description="API token identifying the calling owner",
    ),
    token_service: TokenService = Depends(),
) -> str:
    if not x_token:
        raise TokenMissing
    return token_service.get_owner_from_token(x_token)
