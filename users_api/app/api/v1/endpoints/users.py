"""
User endpoints for API v1.

Provide birth date range search, registration, full update, email
update and deletion of users.  Every handler validates its input with
the functions from ``core.validation`` before calling ``UserService``;
violations are raised as ``RequestValidationFailed`` and answered with
HTTP 400 by the handlers in ``api.errors``.
"""

from datetime import date
from typing import Annotated, List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Path, Query, Request, Response, status

from users_api.app.core.exceptions import RequestValidationFailed
from users_api.app.core.validation import (
    validate_birth_date_range,
    validate_email,
    validate_modification_request,
)
from users_api.app.schemas.error import ErrorMessageResponse, FieldViolation
from users_api.app.schemas.user import (
    UserBirthDateRangeFilter,
    UserEmailUpdate,
    UserModificationRequest,
    UserRecord,
)
from users_api.app.services.user_service import UserService

router = APIRouter(
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorMessageResponse},
        status.HTTP_404_NOT_FOUND: {"model": ErrorMessageResponse},
    }
)


def get_user_service(request: Request) -> UserService:
    """Return the service instance built by ``create_app``."""
    return request.app.state.user_service


def _raise_for_violations(violations: List[FieldViolation]) -> None:
    if violations:
        raise RequestValidationFailed(violations)


@router.get("", response_model=List[UserRecord])
async def find_users_by_birth_date_range(
    from_date: Optional[date] = Query(None, alias="fromDate"),
    to_date: Optional[date] = Query(None, alias="toDate"),
    service: UserService = Depends(get_user_service),
) -> List[UserRecord]:
    """Return users whose birth date lies in ``[fromDate, toDate]``.

    Both dates are required, must be in the past, and ``fromDate`` must
    come before ``toDate``.
    """
    range_filter = UserBirthDateRangeFilter(from_date=from_date, to_date=to_date)
    _raise_for_violations(validate_birth_date_range(range_filter))
    return await service.find_by_birth_date_range(range_filter.from_date, range_filter.to_date)


@router.post("", response_model=UserRecord, status_code=status.HTTP_201_CREATED)
async def create_user(
    user: UserModificationRequest,
    service: UserService = Depends(get_user_service),
) -> UserRecord:
    """Register a new user and return the stored record with its id."""
    _raise_for_violations(validate_modification_request(user))
    return await service.create_user(user)


@router.put("/{id}", response_class=Response)
async def update_user(
    user_id: Annotated[UUID, Path(alias="id")],
    user: UserModificationRequest,
    service: UserService = Depends(get_user_service),
) -> Response:
    """Replace all fields of an existing user.  Empty body on success."""
    _raise_for_violations(validate_modification_request(user))
    await service.update_user(user_id, user)
    return Response(status_code=status.HTTP_200_OK)


@router.put("/{id}/email", response_class=Response)
async def update_user_email(
    user_id: Annotated[UUID, Path(alias="id")],
    payload: UserEmailUpdate,
    service: UserService = Depends(get_user_service),
) -> Response:
    """Change the email of an existing user.  Empty body on success."""
    _raise_for_violations(validate_email(payload.email))
    await service.update_user_email(user_id, payload.email)
    return Response(status_code=status.HTTP_200_OK)


@router.delete("/{id}", response_class=Response)
async def delete_user(
    user_id: Annotated[UUID, Path(alias="id")],
    service: UserService = Depends(get_user_service),
) -> Response:
    await service.delete_user_by_id(user_id)
    return Response(status_code=status.HTTP_200_OK)
