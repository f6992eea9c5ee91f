from typing import Annotated, List
from pydantic import Field

from roster.schemas.base import CamelModel

WeekIndex = Annotated[int, Field(ge=0)]


class AttendanceUpdate(CamelModel):
    """Replaces the whole attendance vector of one enrollment."""
    program_id: str = Field(..., min_length=1)
    attendance: List[bool]


class BulkAttendanceItem(CamelModel):
    participant_id: str = Field(..., min_length=1)
    program_id: str = Field(..., min_length=1)
    week_indices: List[WeekIndex] = Field(..., description="Zero-based weeks to flip")
    present: bool = True


class BulkAttendanceRequest(CamelModel):
    updates: List[BulkAttendanceItem] = Field(..., min_length=1)


class AttendancePair(CamelModel):
    participant_id: str
    program_id: str


class BulkAttendanceFailure(AttendancePair):
    error: str


class BulkAttendanceResult(CamelModel):
    applied: List[AttendancePair] = Field(default_factory=list)
    failed: List[BulkAttendanceFailure] = Field(default_factory=list)
