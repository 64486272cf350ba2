"""
==========================================
Application exceptions with status codes.
==========================================

Exceptions raised by the service layer. Each carries an HTTP-like status
code so an outer API layer can turn it into a response without inspecting
the message.

Classes:
    ApplicationError: Base class carrying ``status_code``
    BadRequest (400): Validation failure or constraint violation
    Forbidden (403): Operation not permitted
    NotFound (404): No row with the requested primary key
    Conflict (409): Optimistic-lock version mismatch
    InternalServerError (500): Unexpected persistence or server failure

Example:
    >>> try:
    ...     raise NotFound("customers: id=42")
    ... except ApplicationError as e:
    ...     print(e.status_code, e)
    404 customers: id=42
"""

from typing import Optional


class ApplicationError(Exception):
    """Base exception for errors reported to callers of the service layer.

    Attributes:
        status_code: HTTP-like status code describing the failure
    """

    status_code = 500

    def __init__(self, message: Optional[str] = None, status_code: Optional[int] = None):
        super().__init__(message)
        if status_code is not None:
            self.status_code = status_code


class BadRequest(ApplicationError):
    """Exception raised when input validation or a database constraint fails."""
    status_code = 400


class Forbidden(ApplicationError):
    """Exception raised when the caller may not perform the operation."""
    status_code = 403


class NotFound(ApplicationError):
    """Exception raised when a requested row does not exist."""
    status_code = 404


class Conflict(ApplicationError):
    """Exception raised when an update is based on a stale version."""
    status_code = 409


class InternalServerError(ApplicationError):
    """Exception raised for unexpected persistence or server failures."""
    status_code = 500
