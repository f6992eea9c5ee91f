# roster/models/program.py
from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import relationship
from roster.core.config import DEFAULT_ATTENDANCE_WEEKS
from roster.models.base import Base, new_id, utc_now


class Program(Base):
    __tablename__ = "programs"

    id = Column(String(36), primary_key=True, default=new_id)
    name = Column(String(200), nullable=False)
    attendance_weeks = Column(Integer, nullable=False, default=DEFAULT_ATTENDANCE_WEEKS)
    created_at = Column(DateTime, default=utc_now, nullable=False)

    # Relationships
    enrollments = relationship(
        "ParticipantProgram",
        back_populates="program",
        cascade="all, delete-orphan"
    )
