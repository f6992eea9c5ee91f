from datetime import datetime
from typing import List, Optional
from pydantic import ConfigDict, EmailStr, Field, computed_field, field_validator

from roster.core.config import MAX_AGE, MIN_AGE
from roster.schemas.base import CamelModel
from roster.services.statistics import completion_percentage
from roster.utils.phone import is_valid_phone

PHONE_MESSAGE = (
    "Please enter a valid Australian phone number "
    "(e.g., +61 412 345 678 or 0412 345 678)"
)


def _blank_to_none(v):
    if isinstance(v, str):
        v = v.strip()
        return v or None
    return v


def _check_phone(v):
    if v is not None and not is_valid_phone(v):
        raise ValueError(PHONE_MESSAGE)
    return v


def _dedupe(ids):
    if ids is None:
        return ids
    return list(dict.fromkeys(ids))


class ParticipantCreate(CamelModel):
    full_name: str = Field(..., min_length=1, max_length=200, examples=["Alex Smith"])
    parent_email: Optional[EmailStr] = Field(None, description="Optional contact email")
    phone_number: Optional[str] = Field(None, max_length=30, examples=["0412 345 678"])
    age: int = Field(..., ge=MIN_AGE, le=MAX_AGE)
    program_ids: List[str] = Field(
        default_factory=list,
        description="Programs to enroll the participant in"
    )

    @field_validator("full_name", mode="before")
    @classmethod
    def strip_name(cls, v):
        return v.strip() if isinstance(v, str) else v

    @field_validator("parent_email", "phone_number", mode="before")
    @classmethod
    def blank_contact_is_absent(cls, v):
        return _blank_to_none(v)

    @field_validator("phone_number")
    @classmethod
    def validate_phone(cls, v):
        return _check_phone(v)

    @field_validator("program_ids")
    @classmethod
    def unique_program_ids(cls, v):
        return _dedupe(v)


class ParticipantUpdate(CamelModel):
    """Partial update.

    ``program_ids``, when supplied, is the complete desired set of programs
    (an empty list removes every enrollment). Leave it out to keep
    enrollments as they are.
    """
    full_name: Optional[str] = Field(None, min_length=1, max_length=200)
    parent_email: Optional[EmailStr] = None
    phone_number: Optional[str] = Field(None, max_length=30)
    age: Optional[int] = Field(None, ge=MIN_AGE, le=MAX_AGE)
    program_ids: Optional[List[str]] = None

    @field_validator("full_name", mode="before")
    @classmethod
    def strip_name(cls, v):
        return v.strip() if isinstance(v, str) else v

    @field_validator("parent_email", "phone_number", mode="before")
    @classmethod
    def blank_contact_is_absent(cls, v):
        return _blank_to_none(v)

    @field_validator("phone_number")
    @classmethod
    def validate_phone(cls, v):
        return _check_phone(v)

    @field_validator("full_name", "age", "program_ids")
    @classmethod
    def not_null(cls, v):
        if v is None:
            raise ValueError("may not be null")
        return v

    @field_validator("program_ids")
    @classmethod
    def unique_program_ids(cls, v):
        return _dedupe(v)


class Enrollment(CamelModel):
    program_id: str
    program_name: Optional[str] = None
    attendance: List[bool] = Field(default_factory=list)

    @computed_field
    def completion(self) -> int:
        return completion_percentage(self.attendance)

    model_config = ConfigDict(from_attributes=True)


class Participant(CamelModel):
    id: str
    full_name: str
    parent_email: Optional[str] = None
    phone_number: Optional[str] = None
    age: int
    created_at: datetime
    enrollments: List[Enrollment] = Field(default_factory=list)

    @computed_field(alias="programIds")
    def program_ids(self) -> List[str]:
        return [e.program_id for e in self.enrollments]

    model_config = ConfigDict(from_attributes=True)
