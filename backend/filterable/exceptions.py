"""
Exceptions raised when filters are applied to a query.

Validation problems with user input are never raised from here; they are
collected on each filter's ``errors()``.
"""

from django.core.exceptions import ValidationError


class FilterableError(Exception):
    """Base exception for filterable misuse."""

    pass


class FilterMethodNotFound(FilterableError, AttributeError):
    """Raised when a query object has no method matching a filter's method name."""

    def __init__(self, query, method):
        self.query = query
        self.method = method
        super().__init__(f"{type(query).__name__} has no filter method '{method}'")


class UnknownFilterCollection(ValidationError):
    """Exception raised when a requested filter collection is not declared."""

    pass
