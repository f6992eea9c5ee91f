# roster/models/associations.py
from sqlalchemy import Column, String, ForeignKey, JSON
from sqlalchemy.orm import relationship
from roster.models.base import Base


class ParticipantProgram(Base):
    """One participant enrolled in one program, with its own attendance vector.

    ``attendance[i]`` is week ``i + 1``. Its length is fixed at enrollment time
    and is NOT kept in step with ``Program.attendance_weeks``.
    """
    __tablename__ = "participant_programs"

    participant_id = Column(
        String(36),
        ForeignKey("participants.id", ondelete="CASCADE"),
        primary_key=True
    )
    program_id = Column(
        String(36),
        ForeignKey("programs.id", ondelete="CASCADE"),
        primary_key=True,
        index=True
    )
    attendance = Column(JSON, nullable=False, default=list)

    participant = relationship("Participant", back_populates="enrollments")
    program = relationship("Program", back_populates="enrollments", lazy="joined")

    @property
    def program_name(self):
        return self.program.name if self.program else None
