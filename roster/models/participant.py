# roster/models/participant.py
from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import relationship
from roster.models.base import Base, new_id, utc_now


class Participant(Base):
    __tablename__ = "participants"

    id = Column(String(36), primary_key=True, default=new_id)
    full_name = Column(String(200), nullable=False)
    parent_email = Column(String(255), nullable=True)
    phone_number = Column(String(30), nullable=True)
    age = Column(Integer, nullable=False)
    created_at = Column(DateTime, default=utc_now, nullable=False)

    # Relationships
    enrollments = relationship(
        "ParticipantProgram",
        back_populates="participant",
        cascade="all, delete-orphan",
        lazy="selectin"  # Always load enrollments with the participant
    )

    @property
    def program_ids(self):
        return [link.program_id for link in self.enrollments]
