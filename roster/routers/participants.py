from fastapi import APIRouter, Depends, HTTPException, status
from typing import List
import logging

from roster.core.exceptions import RosterError
from roster.schemas.attendance import AttendanceUpdate, BulkAttendanceRequest, BulkAttendanceResult
from roster.schemas.participant import Participant, ParticipantCreate, ParticipantUpdate
from roster.services.storage import RosterRepository, get_repository

router = APIRouter(prefix="/api/participants", tags=["participants"])
logger = logging.getLogger(__name__)


@router.post("", response_model=Participant, status_code=status.HTTP_201_CREATED)
def create_participant(participant: ParticipantCreate, repo: RosterRepository = Depends(get_repository)):
    try:
        return repo.create_participant(participant)
    except RosterError:
        raise
    except Exception as e:
        logger.error(f"Error creating participant: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create participant"
        )


@router.get("", response_model=List[Participant])
def read_participants(repo: RosterRepository = Depends(get_repository)):
    try:
        return repo.get_participants()
    except Exception as e:
        logger.error(f"Error fetching participants: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch participants"
        )


@router.post("/attendance/bulk", response_model=BulkAttendanceResult)
def bulk_update_attendance(request: BulkAttendanceRequest, repo: RosterRepository = Depends(get_repository)):
    """Mark the chosen weeks for many participant/program pairs.

    Pairs are written independently; a 207 response lists the ones that failed
    alongside the ones that were saved.
    """
    try:
        applied = repo.bulk_set_attendance(request.updates)
        return BulkAttendanceResult(applied=applied)
    except RosterError:
        raise
    except Exception as e:
        logger.error(f"Error in bulk attendance update: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update attendance"
        )


@router.get("/{participant_id}", response_model=Participant)
def read_participant(participant_id: str, repo: RosterRepository = Depends(get_repository)):
    participant = repo.get_participant_by_id(participant_id)
    if not participant:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Participant not found"
        )
    return participant


@router.patch("/{participant_id}", response_model=Participant)
def update_participant(
    participant_id: str,
    participant_update: ParticipantUpdate,
    repo: RosterRepository = Depends(get_repository)
):
    try:
        return repo.update_participant(participant_id, participant_update)
    except RosterError:
        raise
    except Exception as e:
        logger.error(f"Error updating participant: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update participant"
        )


@router.delete("/{participant_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_participant(participant_id: str, repo: RosterRepository = Depends(get_repository)):
    try:
        repo.delete_participant(participant_id)
        return None
    except RosterError:
        raise
    except Exception as e:
        logger.error(f"Error deleting participant: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete participant"
        )


@router.post("/{participant_id}/attendance", response_model=Participant)
def update_attendance(
    participant_id: str,
    update: AttendanceUpdate,
    repo: RosterRepository = Depends(get_repository)
):
    try:
        return repo.set_attendance(participant_id, update.program_id, update.attendance)
    except RosterError:
        raise
    except Exception as e:
        logger.error(f"Error updating attendance: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update attendance"
        )
