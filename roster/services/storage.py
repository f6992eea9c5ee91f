# roster/services/storage.py
"""
Roster repository.

Built per request around one SQLAlchemy session (see ``get_repository``),
so there is no module-level storage object. Every mutating method commits on
success and rolls back before re-raising on failure.
"""
import logging
from contextlib import contextmanager
from typing import List, Optional

from fastapi import Depends
from sqlalchemy.orm import Session

from roster.core.exceptions import NotFound
from roster.database import get_db
from roster.models.participant import Participant
from roster.models.program import Program
from roster.schemas.participant import ParticipantCreate, ParticipantUpdate
from roster.schemas.program import ProgramCreate, ProgramUpdate
from roster.services.attendance_manager import AttendanceManager

logger = logging.getLogger(__name__)


class RosterRepository:
    def __init__(self, db: Session):
        self.db = db
        self.attendance = AttendanceManager(db)

    @contextmanager
    def _transaction(self):
        try:
            yield
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

    # Programs

    def get_programs(self) -> List[Program]:
        return self.db.query(Program).order_by(Program.created_at, Program.name).all()

    def get_program_by_id(self, program_id: str) -> Optional[Program]:
        return self.db.get(Program, program_id)

    def _require_program(self, program_id: str) -> Program:
        program = self.get_program_by_id(program_id)
        if not program:
            raise NotFound("Program", program_id)
        return program

    def create_program(self, data: ProgramCreate) -> Program:
        with self._transaction():
            program = Program(name=data.name, attendance_weeks=data.attendance_weeks)
            self.db.add(program)
        self.db.refresh(program)
        logger.info(f"Created program {program.id} '{program.name}'")
        return program

    def update_program(self, program_id: str, patch: ProgramUpdate) -> Program:
        # Changing attendance_weeks leaves existing attendance vectors as they are
        with self._transaction():
            program = self._require_program(program_id)
            for field, value in patch.model_dump(exclude_unset=True).items():
                setattr(program, field, value)
        self.db.refresh(program)
        return program

    def delete_program(self, program_id: str) -> None:
        with self._transaction():
            program = self._require_program(program_id)
            enrolled = len(program.enrollments)
            self.db.delete(program)
        logger.info(f"Deleted program {program_id} and {enrolled} enrollment(s)")

    # Participants

    def get_participants(self) -> List[Participant]:
        return self.db.query(Participant).order_by(Participant.created_at, Participant.full_name).all()

    def get_participant_by_id(self, participant_id: str) -> Optional[Participant]:
        return self.db.get(Participant, participant_id)

    def _require_participant(self, participant_id: str) -> Participant:
        participant = self.get_participant_by_id(participant_id)
        if not participant:
            raise NotFound("Participant", participant_id)
        return participant

    def create_participant(self, data: ParticipantCreate) -> Participant:
        with self._transaction():
            participant = Participant(
                full_name=data.full_name,
                parent_email=data.parent_email,
                phone_number=data.phone_number,
                age=data.age,
            )
            self.db.add(participant)
            self.db.flush()  # Get ID before enrolling
            self.attendance.replace_enrollments(participant.id, data.program_ids)
        self.db.refresh(participant)
        logger.info(f"Created participant {participant.id} in {len(data.program_ids)} program(s)")
        return participant

    def update_participant(self, participant_id: str, patch: ParticipantUpdate) -> Participant:
        changes = patch.model_dump(exclude_unset=True)
        program_ids = changes.pop("program_ids", None)

        with self._transaction():
            participant = self._require_participant(participant_id)
            for field, value in changes.items():
                setattr(participant, field, value)
            if program_ids is not None:
                self.attendance.replace_enrollments(participant_id, program_ids)
        self.db.refresh(participant)
        return participant

    def delete_participant(self, participant_id: str) -> None:
        with self._transaction():
            participant = self._require_participant(participant_id)
            self.db.delete(participant)
        logger.info(f"Deleted participant {participant_id}")

    # Attendance

    def set_attendance(self, participant_id: str, program_id: str, attendance: List[bool]) -> Participant:
        with self._transaction():
            self.attendance.set_attendance(participant_id, program_id, attendance)
        participant = self._require_participant(participant_id)
        self.db.refresh(participant)
        return participant

    def bulk_set_attendance(self, updates) -> List[dict]:
        return self.attendance.bulk_set_attendance(updates)


def get_repository(db: Session = Depends(get_db)) -> RosterRepository:
    return RosterRepository(db)
