import json

from sqlalchemy import create_engine, text
from sqlalchemy.orm import sessionmaker

from migration_script import run_migration
from roster.models import Base, ParticipantProgram


def _legacy_engine(tmp_path):
    engine = create_engine(f"sqlite:///{tmp_path / 'legacy.db'}")
    Base.metadata.create_all(bind=engine, tables=[
        Base.metadata.tables["programs"],
        Base.metadata.tables["participants"],
    ])
    with engine.begin() as connection:
        connection.execute(text("ALTER TABLE participants ADD COLUMN program_id VARCHAR(36)"))
        connection.execute(text("ALTER TABLE participants ADD COLUMN attendance TEXT"))
        connection.execute(text(
            "INSERT INTO programs (id, name, attendance_weeks, created_at) "
            "VALUES ('prog-1', 'Monday Soccer', 4, '2024-01-01 00:00:00')"
        ))
        for pid, program_id, attendance in [
            ("kid-1", "prog-1", [True, False, True, True]),
            ("kid-2", "gone", [True]),
            ("kid-3", None, None),
        ]:
            connection.execute(
                text(
                    "INSERT INTO participants (id, full_name, age, created_at, program_id, attendance) "
                    "VALUES (:id, :name, 8, '2024-01-01 00:00:00', :program_id, :attendance)"
                ),
                {
                    "id": pid,
                    "name": pid,
                    "program_id": program_id,
                    "attendance": json.dumps(attendance) if attendance is not None else None,
                },
            )
    return engine


def test_migration_copies_legacy_enrollments(tmp_path):
    engine = _legacy_engine(tmp_path)

    assert run_migration(engine) == 1

    session = sessionmaker(bind=engine)()
    try:
        links = session.query(ParticipantProgram).all()
        assert [(l.participant_id, l.program_id, l.attendance) for l in links] == [
            ("kid-1", "prog-1", [True, False, True, True])
        ]
    finally:
        session.close()
        engine.dispose()


def test_migration_is_repeatable(tmp_path):
    engine = _legacy_engine(tmp_path)
    run_migration(engine)
    assert run_migration(engine) == 0
    engine.dispose()


def test_migration_skips_current_schema(tmp_path):
    engine = create_engine(f"sqlite:///{tmp_path / 'current.db'}")
    Base.metadata.create_all(bind=engine)
    assert run_migration(engine) == 0
    engine.dispose()
