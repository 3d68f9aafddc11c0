"""
Error types raised by the service layer.

Services never return ad hoc failure flags; instead they raise one of
the exceptions below and the HTTP layer picks a status code from the
exception type.
"""

from typing import Iterable, List


class ServiceError(Exception):
    """Base class for recoverable service failures."""


class ValidationError(ServiceError):
    """The client sent a payload that breaks one or more rules.

    ``errors`` holds every violated rule, in field order.
    """

    def __init__(self, errors: Iterable[str]) -> None:
        self.errors: List[str] = list(errors)
        super().__init__("Validation failed")


class PersistenceError(ServiceError):
    """The database was unavailable or rejected the operation.

    ``message`` is safe to show to clients; the underlying database
    error is only logged.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)
