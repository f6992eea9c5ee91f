from datetime import datetime
from typing import Optional
from pydantic import ConfigDict, Field, field_validator

from roster.core.config import DEFAULT_ATTENDANCE_WEEKS, MAX_ATTENDANCE_WEEKS
from roster.schemas.base import CamelModel


def _strip(v):
    return v.strip() if isinstance(v, str) else v


class ProgramBase(CamelModel):
    name: str = Field(..., min_length=1, max_length=200, examples=["Monday Soccer"])

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, v):
        return _strip(v)


class ProgramCreate(ProgramBase):
    attendance_weeks: int = Field(
        DEFAULT_ATTENDANCE_WEEKS,
        ge=1,
        le=MAX_ATTENDANCE_WEEKS,
        description="Number of weeks attendance is tracked for"
    )


class ProgramUpdate(CamelModel):
    """Partial update; only supplied fields are replaced."""
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    attendance_weeks: Optional[int] = Field(None, ge=1, le=MAX_ATTENDANCE_WEEKS)

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, v):
        return _strip(v)

    @field_validator("name", "attendance_weeks")
    @classmethod
    def not_null(cls, v):
        if v is None:
            raise ValueError("may not be null")
        return v


class Program(ProgramBase):
    id: str
    attendance_weeks: int
    created_at: datetime

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": "0b6f8a52-8d0e-4f0e-9a55-0d7f5c1e2a11",
                "name": "Monday Soccer",
                "attendanceWeeks": 10,
                "createdAt": "2024-02-05T09:00:00"
            }
        }
    )
