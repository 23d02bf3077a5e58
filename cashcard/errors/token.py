"""Caller authentication errors"""

from cashcard.errors.base import ApplicationError


class CallerUnauthenticated(ApplicationError):
    http_code = 401
    error_code = 3000
    error = "Caller identity is missing"


class TokenInvalid(ApplicationError):
    http_code = 401
    error_code = 3001
    error = "Token is invalid"


class TokenMissing(ApplicationError):
    http_code = 401
    error_code = 3002
    error = "Token is missing"
