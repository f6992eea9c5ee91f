from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import Response
import logging

from roster.services import export
from roster.services.storage import RosterRepository, get_repository

router = APIRouter(prefix="/api", tags=["export"])
logger = logging.getLogger(__name__)


def _csv_response(content: str, filename: str) -> Response:
    return Response(
        content=content,
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'}
    )


@router.get("/export/participants.csv")
def export_participants(repo: RosterRepository = Depends(get_repository)):
    try:
        return _csv_response(export.roster_csv(repo.get_participants()), "participants.csv")
    except Exception as e:
        logger.error(f"Error exporting participants: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to export participants"
        )


@router.get("/export/attendance.csv")
def export_attendance(repo: RosterRepository = Depends(get_repository)):
    try:
        content = export.attendance_csv(repo.get_participants(), repo.get_programs())
        return _csv_response(content, "attendance.csv")
    except Exception as e:
        logger.error(f"Error exporting attendance: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to export attendance"
        )


@router.get("/print/attendance")
def print_attendance(repo: RosterRepository = Depends(get_repository)):
    header, rows = export.attendance_grid(repo.get_participants(), repo.get_programs())
    return {"columns": header, "rows": rows}
