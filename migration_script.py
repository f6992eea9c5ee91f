# migration_script.py
# Moves enrollments stored on the participants table (one program per
# participant, attendance array on the same row) into participant_programs.
import json
import logging

from sqlalchemy import MetaData, create_engine, select
from sqlalchemy.orm import sessionmaker

from roster.core.config import settings
from roster.models import Base, ParticipantProgram

# Configure logging
logging.basicConfig(level=logging.INFO,
                    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)

LEGACY_COLUMNS = ("program_id", "attendance")


def _as_vector(value):
    if value is None:
        return []
    if isinstance(value, str):
        value = json.loads(value)
    return [bool(v) for v in value]


def run_migration(engine=None):
    """
    Create participant_programs if needed and copy every legacy
    (participant, program, attendance) triple into it. Pairs that already
    have an association row are left alone.

    Returns the number of associations created.
    """
    engine = engine or create_engine(settings.DATABASE_URL)
    logger.info("Starting migration of legacy participant enrollments")

    Base.metadata.create_all(bind=engine, tables=[ParticipantProgram.__table__])

    metadata = MetaData()
    metadata.reflect(bind=engine, only=["participants", "programs"])
    participants_table = metadata.tables["participants"]

    if not all(column in participants_table.c for column in LEGACY_COLUMNS):
        logger.info("participants table has no legacy program columns, nothing to migrate")
        return 0

    Session = sessionmaker(bind=engine)
    session = Session()
    created = 0

    try:
        program_ids = {
            row.id for row in session.execute(select(metadata.tables["programs"].c.id))
        }
        rows = session.execute(
            select(
                participants_table.c.id,
                participants_table.c.program_id,
                participants_table.c.attendance,
            ).where(participants_table.c.program_id.isnot(None))
        ).fetchall()

        for row in rows:
            if row.program_id not in program_ids:
                logger.warning(f"Participant {row.id} references missing program {row.program_id}, skipped")
                continue
            if session.get(ParticipantProgram, (row.id, row.program_id)):
                continue

            session.add(ParticipantProgram(
                participant_id=row.id,
                program_id=row.program_id,
                attendance=_as_vector(row.attendance),
            ))
            created += 1

        session.commit()
        logger.info(f"Migration completed successfully: {created} enrollment(s) created")
        return created

    except Exception as e:
        session.rollback()
        logger.error(f"Migration failed: {str(e)}")
        raise
    finally:
        session.close()


if __name__ == "__main__":
    run_migration()
