"""Common application errors, may be raised from several services"""

from cashcard.errors.base import ApplicationError


class NotFoundError(ApplicationError):
    http_code = 404
    error_code = 1404
    error = "Not found"


class ValidationError(ApplicationError):
    http_code = 400
    error_code = 1400
    error = "Request validation failed"


class InfrastructureError(ApplicationError):
    http_code = 500
    error_code = 1500
    error = "Storage is unavailable"
