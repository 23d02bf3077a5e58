"""CashCard usage errors"""

from cashcard.errors.common import ValidationError


class PageParametersInvalid(ValidationError):
    error_code = 2001
    error = "Page index must be >= 0 and page size must be between 1 and the maximum page size"


class SortFieldInvalid(ValidationError):
    error_code = 2002
    error = "Unknown sort field"


class SortDirectionInvalid(ValidationError):
    error_code = 2003
    error = "Sort direction must be 'asc' or 'desc'"
