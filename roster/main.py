from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import logging

from roster.core.config import settings
from roster.core.exceptions import IntegrityViolation, NotFound, PartialBulkFailure, ValidationError
from roster.database import engine
from roster.models import Base
from roster.routers import exports, participants, programs, statistics
from roster.schemas.attendance import BulkAttendanceResult
from roster.schemas.base import format_errors

logger = logging.getLogger(__name__)

app = FastAPI(title="Roster & Attendance Tracker")

# CORS setup
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(programs.router)
app.include_router(participants.router)
app.include_router(statistics.router)
app.include_router(exports.router)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": format_errors(exc.errors())},
    )


@app.exception_handler(ValidationError)
async def validation_handler(request: Request, exc: ValidationError):
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": exc.errors})


@app.exception_handler(NotFound)
async def not_found_handler(request: Request, exc: NotFound):
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)})


@app.exception_handler(IntegrityViolation)
async def integrity_handler(request: Request, exc: IntegrityViolation):
    return JSONResponse(status_code=status.HTTP_409_CONFLICT, content={"detail": str(exc)})


@app.exception_handler(PartialBulkFailure)
async def partial_bulk_handler(request: Request, exc: PartialBulkFailure):
    result = BulkAttendanceResult(applied=exc.applied, failed=exc.failures)
    return JSONResponse(
        status_code=status.HTTP_207_MULTI_STATUS,
        content=result.model_dump(by_alias=True),
    )


@app.on_event("startup")
def create_tables():
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables ready")


@app.get("/")
async def root():
    return {
        "message": "Welcome to the Roster & Attendance Tracker API",
        "endpoints": {
            "programs": "/api/programs",
            "participants": "/api/participants",
            "statistics": "/api/statistics",
            "export": "/api/export/participants.csv"
        }
    }
