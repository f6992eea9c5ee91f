"""
CSV export and printable attendance grid.

Week cells read ``"✓"`` for present, ``""`` for absent and ``"-"`` where the
week lies beyond that enrollment's attendance vector.
"""
import csv
from typing import List, Sequence, Tuple

import pandas as pd

from roster.services.statistics import count_present, percent
from roster.utils.phone import format_phone

ROSTER_COLUMNS = ["Name", "Email", "Phone", "Age", "Program(s)", "Weeks Attended", "Attendance %"]

PRESENT_MARK = "✓"
ABSENT_MARK = ""
NOT_APPLICABLE_MARK = "-"


def _to_csv(frame: pd.DataFrame) -> str:
    return frame.to_csv(index=False, quoting=csv.QUOTE_ALL, lineterminator="\n")


def roster_rows(participants: Sequence) -> List[List[str]]:
    rows = []
    for p in participants:
        links = list(p.enrollments)
        attended = sum(count_present(link.attendance) for link in links)
        possible = sum(len(link.attendance) for link in links)
        rows.append([
            p.full_name,
            p.parent_email or "",
            format_phone(p.phone_number or ""),
            str(p.age),
            "; ".join(link.program_name or "Unknown" for link in links),
            f"{attended}/{possible}",
            f"{percent(attended, possible)}%",
        ])
    return rows


def roster_csv(participants: Sequence) -> str:
    """One row per participant, totals summed across their programs."""
    return _to_csv(pd.DataFrame(roster_rows(participants), columns=ROSTER_COLUMNS))


def week_cell(attendance: Sequence[bool], week_index: int) -> str:
    if week_index >= len(attendance):
        return NOT_APPLICABLE_MARK
    return PRESENT_MARK if attendance[week_index] else ABSENT_MARK


def attendance_grid(participants: Sequence, programs: Sequence) -> Tuple[List[str], List[List[str]]]:
    """Header and rows for the attendance sheet, one row per enrollment."""
    links = [(p, link) for p in participants for link in p.enrollments]
    weeks = max(
        [program.attendance_weeks for program in programs]
        + [len(link.attendance) for _, link in links],
        default=0,
    )

    header = ["Name", "Age", "Program"] + [f"Week {i + 1}" for i in range(weeks)] + ["Total", "%"]
    rows = []
    for participant, link in links:
        attended = count_present(link.attendance)
        rows.append(
            [participant.full_name, str(participant.age), link.program_name or "Unknown"]
            + [week_cell(link.attendance, i) for i in range(weeks)]
            + [f"{attended}/{len(link.attendance)}", f"{percent(attended, len(link.attendance))}%"]
        )
    return header, rows


def attendance_csv(participants: Sequence, programs: Sequence) -> str:
    header, rows = attendance_grid(participants, programs)
    return _to_csv(pd.DataFrame(rows, columns=header))
