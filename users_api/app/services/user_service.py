"""
Business logic for users.

``UserService`` decides whether a record may be created or changed and
turns modification requests into stored records.  Two rules apply:

* age eligibility: the person's ``minimum_age``-th birthday must fall on
  or before today (checked on create and on full update);
* existence: update, email update and delete require a stored record
  with the given id.

Payloads reaching the service have already passed field validation
(``core.validation``).  Rules are checked before any write, so a
rejected call never touches the store.

There is no locking: two concurrent updates of the same id race and
the later save wins.
"""

import logging
from datetime import date
from typing import Callable, List
from uuid import UUID

from ..core.exceptions import UserAgeRestrictionError, UserNotFoundError
from ..repositories.user_repository import UserRepository
from ..schemas.user import UserModificationRequest, UserRecord

logger = logging.getLogger(__name__)


def add_years(value: date, years: int) -> date:
    """Shift ``value`` by whole calendar years.

    29 February maps to 28 February when the target year is not a leap
    year.
    """
    try:
        return value.replace(year=value.year + years)
    except ValueError:
        return value.replace(year=value.year + years, day=28)


class UserService:
    """Validate and orchestrate operations on user records."""

    def __init__(
        self,
        repository: UserRepository,
        minimum_age: int,
        today: Callable[[], date] = date.today,
    ):
        """
        Args:
            repository: Storage for user records.
            minimum_age: Age in whole years required to create or update
                a user.
            today: Returns the current date; called on every age check.
        """
        self.repository = repository
        self.minimum_age = minimum_age
        self.today = today

    async def create_user(self, request: UserModificationRequest) -> UserRecord:
        """Create a new user and return it with its generated id.

        Raises ``UserAgeRestrictionError`` if the person is too young.
        """
        self._check_age(request.birth_date)
        user = self.repository.save(self._to_record(request))
        logger.info("Created user %s", user.id)
        return user

    async def update_user(self, user_id: UUID, request: UserModificationRequest) -> None:
        """Replace every field of an existing user.

        The age rule is checked before existence, so a too-young birth
        date is reported even for an unknown id.  Fields omitted from the
        request are cleared.

        Raises ``UserAgeRestrictionError`` or ``UserNotFoundError``.
        """
        self._check_age(request.birth_date)
        self._get_existing(user_id)
        user = self._to_record(request)
        user.id = user_id
        self.repository.save(user)
        logger.info("Updated user %s", user_id)

    async def update_user_email(self, user_id: UUID, email: str) -> None:
        """Change only the email of an existing user."""
        user = self._get_existing(user_id)
        user.email = email
        self.repository.save(user)
        logger.info("Updated email of user %s", user_id)

    async def delete_user_by_id(self, user_id: UUID) -> None:
        self._get_existing(user_id)
        self.repository.delete_by_id(user_id)
        logger.info("Deleted user %s", user_id)

    async def find_by_birth_date_range(self, from_date: date, to_date: date) -> List[UserRecord]:
        """Return users born between ``from_date`` and ``to_date`` inclusive."""
        return self.repository.find_by_birth_date_range(from_date, to_date)

    def _check_age(self, birth_date: date) -> None:
        if add_years(birth_date, self.minimum_age) > self.today():
            logger.info("Rejected birth date %s: younger than %s", birth_date, self.minimum_age)
            raise UserAgeRestrictionError(self.minimum_age)

    def _get_existing(self, user_id: UUID) -> UserRecord:
        user = self.repository.find_by_id(user_id)
        if user is None:
            logger.info("User %s not found", user_id)
            raise UserNotFoundError(user_id)
        return user

    @staticmethod
    def _to_record(request: UserModificationRequest) -> UserRecord:
        return UserRecord(
            email=request.email,
            first_name=request.first_name,
            last_name=request.last_name,
            birth_date=request.birth_date,
            address=request.address,
            phone=request.phone,
        )
