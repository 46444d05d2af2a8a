"""
Pydantic schemas for error payloads.

Every failed request is answered with an ``ErrorMessageResponse``:
the error message, the request path and the HTTP method.  Field
validation failures also list the individual violations.
"""

from datetime import datetime
from typing import List

from pydantic import BaseModel, Field


class FieldViolation(BaseModel):
    """A single failed field rule."""

    field: str = Field(..., examples=["email"])
    message: str = Field(..., examples=["must be a well-formed email address"])


class ErrorMessageResponse(BaseModel):
    error: str
    path: str
    method: str
    violations: List[FieldViolation] = Field(default_factory=list)

    def __str__(self) -> str:
        at = datetime.now().time().isoformat(timespec="seconds")
        return f"API error: {self.error}. At {at}. Path: {self.path}. Method: {self.method}."
