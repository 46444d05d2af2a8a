"""
Error types raised by the user management service.

The service reports exactly two kinds of domain failure, enumerated
by ``ErrorKind``.  Each failure is a ``UserServiceError`` tagged with
its kind; the HTTP layer translates the kind into a status code (see
``api/errors.py``) so the service itself stays transport agnostic.

Field-level problems found before the service is invoked are carried
by ``RequestValidationFailed`` together with the list of violations.
"""

from enum import Enum
from typing import List
from uuid import UUID

from ..schemas.error import FieldViolation


class ErrorKind(str, Enum):
    AGE_RESTRICTION = "age_restriction"
    NOT_FOUND = "not_found"


class UserServiceError(Exception):
    """Base class for failures signalled by ``UserService``."""

    kind: ErrorKind

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class UserAgeRestrictionError(UserServiceError):
    """The birth date does not satisfy the minimum-age rule today."""

    kind = ErrorKind.AGE_RESTRICTION

    def __init__(self, minimum_age: int):
        self.minimum_age = minimum_age
        super().__init__(f"User must be more than {minimum_age} age")


class UserNotFoundError(UserServiceError):
    kind = ErrorKind.NOT_FOUND

    def __init__(self, user_id: UUID):
        self.user_id = user_id
        super().__init__(f"user with id {user_id} is not found")


class RequestValidationFailed(Exception):
    """Raised by the endpoints when field validation reports violations."""

    def __init__(self, violations: List[FieldViolation]):
        self.violations = violations
        super().__init__("; ".join(f"{v.field}: {v.message}" for v in violations))
