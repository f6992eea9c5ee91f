from fastapi import APIRouter, Depends, HTTPException, status
import logging

from roster.schemas.statistics import StatisticsSummary
from roster.services import statistics
from roster.services.storage import RosterRepository, get_repository

router = APIRouter(prefix="/api/statistics", tags=["statistics"])
logger = logging.getLogger(__name__)


@router.get("", response_model=StatisticsSummary)
def read_statistics(repo: RosterRepository = Depends(get_repository)):
    """Overall, weekly and per-program attendance figures."""
    try:
        summary = statistics.summarize(repo.get_participants(), repo.get_programs())
        return StatisticsSummary.model_validate(summary, from_attributes=True)
    except Exception as e:
        logger.error(f"Error computing statistics: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to compute statistics"
        )
