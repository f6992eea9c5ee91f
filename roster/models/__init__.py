# Import all models here so they can be imported elsewhere with a single import
# The order of imports is important here - import base first
from roster.models.base import Base
from roster.models.program import Program
from roster.models.participant import Participant
from roster.models.associations import ParticipantProgram

__all__ = ['Base', 'Program', 'Participant', 'ParticipantProgram']
