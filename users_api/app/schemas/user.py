"""
Pydantic models for user data.

``UserRecord`` is the persisted entity.  ``UserModificationRequest`` is
the transient input for create and full update; every field is optional
at the parsing stage so that missing values are reported by the field
validators in ``core.validation`` as structured violations instead of
parser errors.  ``UserBirthDateRangeFilter`` drives the range search.
"""

from datetime import date
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model exposing camelCase aliases on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class UserModificationRequest(CamelModel):
    """Schema for creating or replacing a user.

    ``address`` and ``phone`` may be omitted.  On update, an omitted
    field clears the stored value: an update is a replace, not a patch.
    """

    email: Optional[str] = Field(None, examples=["user@example.com"])
    first_name: Optional[str] = Field(None, examples=["Nadiia"])
    last_name: Optional[str] = Field(None, examples=["Rubants"])
    birth_date: Optional[date] = Field(None, examples=["1997-01-01"])
    address: Optional[str] = Field(None, examples=["Kyiv, Khreshchatyk 1"])
    phone: Optional[str] = Field(None, examples=["+380501234567"])


class UserEmailUpdate(CamelModel):
    email: Optional[str] = Field(None, examples=["new@example.com"])


class UserBirthDateRangeFilter(CamelModel):
    """Inclusive birth date range used to search users."""

    from_date: Optional[date] = None
    to_date: Optional[date] = None


class UserRecord(CamelModel):
    """Schema for a stored user.

    ``id`` is ``None`` until the repository assigns one on first save.
    """

    id: Optional[UUID] = None
    email: str
    first_name: str
    last_name: str
    birth_date: date
    address: Optional[str] = None
    phone: Optional[str] = None
