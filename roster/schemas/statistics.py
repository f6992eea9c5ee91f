from typing import List, Optional
from pydantic import ConfigDict

from roster.schemas.base import CamelModel


class WeekStat(CamelModel):
    week: int
    present: int
    total: int
    rate: int

    model_config = ConfigDict(from_attributes=True)


class ProgramStat(CamelModel):
    program_id: str
    program_name: str
    count: int
    avg_attendance: int

    model_config = ConfigDict(from_attributes=True)


class PerfectAttendee(CamelModel):
    id: str
    full_name: str

    model_config = ConfigDict(from_attributes=True)


class StatisticsSummary(CamelModel):
    total_participants: int
    total_attended: int
    max_possible: int
    overall_attendance_rate: int
    best_week: Optional[WeekStat] = None
    weekly: List[WeekStat]
    programs: List[ProgramStat]
    perfect_attendance: List[PerfectAttendee]

    model_config = ConfigDict(from_attributes=True)
