from fastapi import APIRouter, Depends, HTTPException, status
from typing import List
import logging

from roster.core.exceptions import RosterError
from roster.schemas.program import Program, ProgramCreate, ProgramUpdate
from roster.services.storage import RosterRepository, get_repository

router = APIRouter(prefix="/api/programs", tags=["programs"])
logger = logging.getLogger(__name__)


# 1. CREATE PROGRAM
@router.post("", response_model=Program, status_code=status.HTTP_201_CREATED)
def create_program(program: ProgramCreate, repo: RosterRepository = Depends(get_repository)):
    try:
        return repo.create_program(program)
    except RosterError:
        raise
    except Exception as e:
        logger.error(f"Error creating program: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create program"
        )


# 2. READ ALL PROGRAMS
@router.get("", response_model=List[Program])
def read_programs(repo: RosterRepository = Depends(get_repository)):
    try:
        return repo.get_programs()
    except Exception as e:
        logger.error(f"Error fetching programs: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch programs"
        )


# 3. READ SINGLE PROGRAM
@router.get("/{program_id}", response_model=Program)
def read_program(program_id: str, repo: RosterRepository = Depends(get_repository)):
    program = repo.get_program_by_id(program_id)
    if not program:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Program not found"
        )
    return program


# 4. UPDATE PROGRAM (existing attendance vectors keep their length)
@router.patch("/{program_id}", response_model=Program)
def update_program(
    program_id: str,
    program_update: ProgramUpdate,
    repo: RosterRepository = Depends(get_repository)
):
    try:
        return repo.update_program(program_id, program_update)
    except RosterError:
        raise
    except Exception as e:
        logger.error(f"Error updating program: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update program"
        )


# 5. DELETE PROGRAM (cascades to enrollments)
@router.delete("/{program_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_program(program_id: str, repo: RosterRepository = Depends(get_repository)):
    try:
        repo.delete_program(program_id)
        return None
    except RosterError:
        raise
    except Exception as e:
        logger.error(f"Error deleting program: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete program"
        )
