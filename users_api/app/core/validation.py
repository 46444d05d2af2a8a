"""
Field-level validation for inbound payloads.

Each function checks one rule (or one payload) and returns a list of
``FieldViolation`` objects; an empty list means the input is valid.
Nothing here raises, so the endpoints can collect every problem of a
request before deciding how to answer.  These checks run before the
user service is called; the service assumes they have passed.

Email addresses are checked with pydantic's ``EmailStr`` (backed by
``email-validator``), without DNS lookups.
"""

from datetime import date
from typing import List, Optional

from pydantic import EmailStr, TypeAdapter, ValidationError

from ..schemas.error import FieldViolation
from ..schemas.user import UserBirthDateRangeFilter, UserModificationRequest

_email_adapter = TypeAdapter(EmailStr)


def validate_email(value: Optional[str], field: str = "email") -> List[FieldViolation]:
    if value is None:
        return [FieldViolation(field=field, message="must not be null")]
    try:
        _email_adapter.validate_python(value)
    except ValidationError:
        return [FieldViolation(field=field, message="must be a well-formed email address")]
    return []


def validate_not_blank(value: Optional[str], field: str) -> List[FieldViolation]:
    if value is None or not value.strip():
        return [FieldViolation(field=field, message="must not be blank")]
    return []


def validate_past_date(
    value: Optional[date], field: str, today: Optional[date] = None
) -> List[FieldViolation]:
    """Require ``value`` to be set and strictly before ``today``."""
    if value is None:
        return [FieldViolation(field=field, message="must not be null")]
    if value >= (today or date.today()):
        return [FieldViolation(field=field, message="must be a past date")]
    return []


def validate_modification_request(
    request: UserModificationRequest, today: Optional[date] = None
) -> List[FieldViolation]:
    """Check a create/update payload.

    ``address`` and ``phone`` are free-form and may be absent.
    """
    violations: List[FieldViolation] = []
    violations += validate_email(request.email)
    violations += validate_not_blank(request.first_name, "firstName")
    violations += validate_not_blank(request.last_name, "lastName")
    violations += validate_past_date(request.birth_date, "birthDate", today)
    return violations


def validate_birth_date_range(
    range_filter: UserBirthDateRangeFilter, today: Optional[date] = None
) -> List[FieldViolation]:
    """Check a range search: both bounds in the past, ``fromDate`` first.

    The ordering rule is only evaluated once both bounds are present.
    """
    violations: List[FieldViolation] = []
    violations += validate_past_date(range_filter.from_date, "fromDate", today)
    violations += validate_past_date(range_filter.to_date, "toDate", today)
    if range_filter.from_date is not None and range_filter.to_date is not None:
        if not range_filter.from_date < range_filter.to_date:
            violations.append(FieldViolation(field="dateRange", message="Date range is not valid"))
    return violations
