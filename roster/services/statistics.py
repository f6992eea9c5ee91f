"""
Attendance statistics.

Pure functions over enrollment (association) data. Nothing here touches the
database; inputs are recomputed on every call.

An enrollment's attendance vector may be shorter or longer than its program's
current week count. A week index at or beyond the vector length means "not
applicable" for that enrollment: it is left out of both the present count and
the eligible count, never treated as an absence.
"""
import math
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence


@dataclass
class WeekStat:
    week: int  # 1-based
    present: int
    total: int
    rate: int


@dataclass
class ProgramStat:
    program_id: str
    program_name: str
    count: int
    avg_attendance: int


@dataclass
class StatisticsSummary:
    total_participants: int
    total_attended: int
    max_possible: int
    overall_attendance_rate: int
    best_week: Optional[WeekStat]
    weekly: List[WeekStat] = field(default_factory=list)
    programs: List[ProgramStat] = field(default_factory=list)
    perfect_attendance: list = field(default_factory=list)


def _vector(item) -> Sequence[bool]:
    # Accept enrollment objects or bare attendance lists
    return getattr(item, "attendance", item) or []


def percent(part: int, whole: int) -> int:
    """Whole-number percentage, halves rounded up. 0 when ``whole`` is 0."""
    if whole <= 0:
        return 0
    return int(math.floor(100 * part / whole + 0.5))


def count_present(attendance: Sequence[bool]) -> int:
    return sum(1 for present in attendance if present)


def completion_percentage(attendance: Sequence[bool]) -> int:
    return percent(count_present(attendance), len(attendance))


def weekly_breakdown(associations: Iterable, week_index: int) -> WeekStat:
    eligible = [_vector(a) for a in associations if week_index < len(_vector(a))]
    present = sum(1 for vector in eligible if vector[week_index])
    return WeekStat(
        week=week_index + 1,
        present=present,
        total=len(eligible),
        rate=percent(present, len(eligible)),
    )


def weekly_stats(associations: Iterable, weeks: Optional[int] = None) -> List[WeekStat]:
    """Breakdown for every week, up to the longest vector unless ``weeks`` is given."""
    associations = list(associations)
    if weeks is None:
        weeks = max((len(_vector(a)) for a in associations), default=0)
    return [weekly_breakdown(associations, i) for i in range(weeks)]


def best_week(stats: Sequence[WeekStat]) -> Optional[WeekStat]:
    best = None
    for week in stats:
        if best is None or week.rate > best.rate:
            best = week
    return best


def has_perfect_attendance(participant) -> bool:
    for link in participant.enrollments:
        vector = _vector(link)
        if vector and count_present(vector) == len(vector):
            return True
    return False


def perfect_attendance(participants: Iterable) -> list:
    """Participants with every week present in at least one of their programs."""
    return [p for p in participants if has_perfect_attendance(p)]


def program_average(program, associations: Iterable) -> int:
    attended = 0
    possible = 0
    for link in associations:
        if link.program_id != program.id:
            continue
        attended += count_present(link.attendance)
        possible += len(link.attendance)
    return percent(attended, possible)


def program_stats(programs: Iterable, associations: Iterable) -> List[ProgramStat]:
    """Per-program count and average, for programs with at least one enrollment."""
    associations = list(associations)
    stats = []
    for program in programs:
        count = sum(1 for link in associations if link.program_id == program.id)
        if count == 0:
            continue
        stats.append(ProgramStat(
            program_id=program.id,
            program_name=program.name,
            count=count,
            avg_attendance=program_average(program, associations),
        ))
    return stats


def summarize(participants: Sequence, programs: Sequence) -> StatisticsSummary:
    associations = [link for p in participants for link in p.enrollments]

    total_attended = sum(count_present(link.attendance) for link in associations)
    max_possible = sum(len(link.attendance) for link in associations)

    weeks = max(
        [program.attendance_weeks for program in programs]
        + [len(link.attendance) for link in associations],
        default=0,
    )
    weekly = weekly_stats(associations, weeks)

    return StatisticsSummary(
        total_participants=len(participants),
        total_attended=total_attended,
        max_possible=max_possible,
        overall_attendance_rate=percent(total_attended, max_possible),
        best_week=best_week(weekly),
        weekly=weekly,
        programs=program_stats(programs, associations),
        perfect_attendance=perfect_attendance(participants),
    )
