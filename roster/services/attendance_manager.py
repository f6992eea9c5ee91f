# roster/services/attendance_manager.py
"""
Attendance association manager.

The only code that creates, removes or rewrites ``ParticipantProgram`` rows.
Single-pair operations only flush; the caller owns the transaction. Bulk
updates commit pair by pair so one failing pair never undoes the others.
"""
import logging
from typing import Iterable, List, Optional, Set

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from roster.core.exceptions import IntegrityViolation, NotFound, PartialBulkFailure
from roster.models.associations import ParticipantProgram
from roster.models.participant import Participant
from roster.models.program import Program

logger = logging.getLogger(__name__)


class AttendanceManager:
    def __init__(self, db: Session):
        self.db = db

    # Lookups

    def _require_participant(self, participant_id: str) -> Participant:
        participant = self.db.get(Participant, participant_id)
        if not participant:
            raise NotFound("Participant", participant_id)
        return participant

    def _require_program(self, program_id: str) -> Program:
        program = self.db.get(Program, program_id)
        if not program:
            raise NotFound("Program", program_id)
        return program

    def get_link(self, participant_id: str, program_id: str) -> Optional[ParticipantProgram]:
        return self.db.get(ParticipantProgram, (participant_id, program_id))

    def _require_link(self, participant_id: str, program_id: str) -> ParticipantProgram:
        self._require_participant(participant_id)
        self._require_program(program_id)
        link = self.get_link(participant_id, program_id)
        if not link:
            raise IntegrityViolation(
                f"Participant {participant_id} is not enrolled in program {program_id}"
            )
        return link

    # Enrollment

    def enroll(self, participant_id: str, program_id: str) -> ParticipantProgram:
        """Create an all-absent attendance vector sized to the program's current week count."""
        participant = self._require_participant(participant_id)
        program = self._require_program(program_id)

        if self.get_link(participant_id, program_id):
            raise IntegrityViolation(
                f"Participant {participant_id} is already enrolled in program {program_id}"
            )

        link = ParticipantProgram(
            participant_id=participant.id,
            program_id=program.id,
            attendance=[False] * program.attendance_weeks,
        )
        link.program = program
        participant.enrollments.append(link)
        self.db.flush()
        logger.info(
            f"Enrolled participant {participant_id} in program {program_id} "
            f"({program.attendance_weeks} weeks)"
        )
        return link

    def unenroll(self, participant_id: str, program_id: str) -> None:
        """Remove an enrollment. Its attendance is gone for good."""
        participant = self._require_participant(participant_id)
        link = self.get_link(participant_id, program_id)
        if not link:
            raise NotFound("Enrollment", f"{participant_id}/{program_id}")
        participant.enrollments.remove(link)
        self.db.flush()
        logger.info(f"Removed participant {participant_id} from program {program_id}")

    def replace_enrollments(self, participant_id: str, program_ids: Iterable[str]) -> List[ParticipantProgram]:
        """Make the participant's programs exactly ``program_ids``.

        Kept programs retain their attendance, dropped ones lose it and new
        ones start all absent. An empty set removes every enrollment.
        """
        participant = self._require_participant(participant_id)
        wanted: List[str] = list(dict.fromkeys(program_ids))

        missing = [pid for pid in wanted if self.db.get(Program, pid) is None]
        if missing:
            raise NotFound("Program", ", ".join(missing))

        current: Set[str] = {link.program_id for link in participant.enrollments}
        to_remove = current - set(wanted)
        to_add = [pid for pid in wanted if pid not in current]

        for program_id in to_remove:
            self.unenroll(participant_id, program_id)
        for program_id in to_add:
            self.enroll(participant_id, program_id)

        logger.info(
            f"Replaced enrollments for participant {participant_id}: "
            f"+{len(to_add)} -{len(to_remove)} ={len(current) - len(to_remove)}"
        )
        return list(participant.enrollments)

    # Attendance

    def set_attendance(self, participant_id: str, program_id: str, attendance: Iterable[bool]) -> ParticipantProgram:
        """Replace the whole vector. Its length is taken as given."""
        link = self._require_link(participant_id, program_id)
        link.attendance = [bool(present) for present in attendance]
        self.db.flush()
        logger.info(
            f"Attendance set for participant {participant_id} in program {program_id} "
            f"({len(link.attendance)} weeks)"
        )
        return link

    def mark_weeks(self, participant_id: str, program_id: str, week_indices: Iterable[int], present: bool) -> ParticipantProgram:
        """Set the given weeks to ``present``, leaving other weeks untouched.

        Weeks beyond the vector are not applicable to this enrollment and are skipped.
        """
        link = self._require_link(participant_id, program_id)
        attendance = list(link.attendance)
        for index in week_indices:
            if 0 <= index < len(attendance):
                attendance[index] = present
        link.attendance = attendance
        self.db.flush()
        return link

    def bulk_set_attendance(self, updates: Iterable) -> List[dict]:
        """Apply ``mark_weeks`` to many pairs, committing each pair on its own.

        Returns the applied pairs. If any pair fails, raises
        ``PartialBulkFailure`` after every pair has been attempted; pairs
        already applied stay committed.
        """
        applied = []
        failures = []
        for item in updates:
            pair = {"participant_id": item.participant_id, "program_id": item.program_id}
            try:
                self.mark_weeks(item.participant_id, item.program_id, item.week_indices, item.present)
                self.db.commit()
                applied.append(pair)
            except (NotFound, IntegrityViolation, SQLAlchemyError) as e:
                self.db.rollback()
                logger.warning(
                    f"Bulk attendance failed for participant {item.participant_id} "
                    f"in program {item.program_id}: {e}"
                )
                failures.append({**pair, "error": str(e)})

        if failures:
            raise PartialBulkFailure(applied, failures)
        return applied
