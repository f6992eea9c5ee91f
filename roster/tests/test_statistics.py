from dataclasses import dataclass, field
from typing import List

from roster.services.statistics import (
    WeekStat,
    best_week,
    completion_percentage,
    perfect_attendance,
    program_average,
    program_stats,
    summarize,
    weekly_breakdown,
    weekly_stats,
)


@dataclass
class Link:
    program_id: str
    attendance: List[bool]
    program_name: str = ""


@dataclass
class Person:
    id: str
    full_name: str
    enrollments: List[Link] = field(default_factory=list)


@dataclass
class Prog:
    id: str
    name: str
    attendance_weeks: int


def test_completion_percentage_example():
    attendance = [True, True, False, True, False, False, False, False, False, False]
    assert completion_percentage(attendance) == 30


def test_completion_percentage_empty_vector_is_zero():
    assert completion_percentage([]) == 0


def test_completion_percentage_rounds_half_up():
    # 1/8 = 12.5%
    assert completion_percentage([True] + [False] * 7) == 13
    assert completion_percentage([True, True, False]) == 67


def test_weekly_breakdown_counts_eligible_only():
    links = [
        Link("a", [False, False, False, True]),
        Link("b", [False, False, False, False, True]),
    ]
    stat = weekly_breakdown(links, 3)
    assert (stat.present, stat.total, stat.rate) == (1, 2, 50)
    assert stat.week == 4


def test_weekly_breakdown_excludes_short_vectors():
    short = Link("a", [True] * 8)
    full = Link("b", [False] * 9 + [True])
    stat = weekly_breakdown([short, full], 9)
    assert stat.total == 1
    assert stat.present == 1


def test_weekly_breakdown_no_eligible_is_zero_rate():
    stat = weekly_breakdown([Link("a", [True])], 5)
    assert (stat.present, stat.total, stat.rate) == (0, 0, 0)


def test_weekly_stats_spans_longest_vector():
    stats = weekly_stats([[True], [False, True, True]])
    assert [s.week for s in stats] == [1, 2, 3]
    assert [s.total for s in stats] == [2, 1, 1]


def test_best_week_keeps_first_maximum():
    stats = [
        WeekStat(week=1, present=1, total=2, rate=50),
        WeekStat(week=2, present=2, total=2, rate=100),
        WeekStat(week=3, present=2, total=2, rate=100),
    ]
    assert best_week(stats).week == 2


def test_best_week_of_nothing():
    assert best_week([]) is None


def test_perfect_attendance_any_program_qualifies():
    all_in = Person("1", "All In", [Link("a", [True, True]), Link("b", [False, True])])
    partial = Person("2", "Partial", [Link("a", [True, False])])
    empty = Person("3", "Empty Vector", [Link("a", [])])
    nobody = Person("4", "Not Enrolled")

    assert perfect_attendance([all_in, partial, empty, nobody]) == [all_in]


def test_program_average_only_counts_that_program():
    soccer = Prog("a", "Soccer", 4)
    links = [
        Link("a", [True, True, False, False]),
        Link("a", [True, True]),
        Link("b", [False, False, False, False]),
    ]
    # 4 present of 6 recorded weeks
    assert program_average(soccer, links) == 67


def test_program_average_without_enrollments():
    assert program_average(Prog("a", "Soccer", 4), []) == 0


def test_program_stats_skip_empty_programs():
    programs = [Prog("a", "Soccer", 2), Prog("b", "Netball", 2)]
    stats = program_stats(programs, [Link("a", [True, False])])
    assert len(stats) == 1
    assert stats[0].program_name == "Soccer"
    assert stats[0].count == 1
    assert stats[0].avg_attendance == 50


def test_summarize_overall_figures():
    programs = [Prog("a", "Soccer", 4), Prog("b", "Netball", 2)]
    people = [
        Person("1", "Alex", [Link("a", [True, True, True, True]), Link("b", [False, False])]),
        Person("2", "Sam", [Link("a", [True, False, False, False])]),
    ]
    summary = summarize(people, programs)

    assert summary.total_participants == 2
    assert summary.total_attended == 5
    assert summary.max_possible == 10
    assert summary.overall_attendance_rate == 50
    assert len(summary.weekly) == 4
    assert summary.best_week.week == 1
    assert [p.full_name for p in summary.perfect_attendance] == ["Alex"]


def test_summarize_empty_roster():
    summary = summarize([], [])
    assert summary.weekly == []
    assert summary.best_week is None
    assert summary.overall_attendance_rate == 0
