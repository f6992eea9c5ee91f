# roster/seeder.py
from sqlalchemy.orm import Session
from roster.database import SessionLocal, engine
from roster.models import Base, Program

DEMO_PROGRAMS = [
    {"name": "Monday Soccer", "attendance_weeks": 10},
    {"name": "Saturday Junior League", "attendance_weeks": 8},
]


def create_tables(bind=None):
    """Create all tables"""
    Base.metadata.create_all(bind=bind or engine)
    print("✅ Database tables created")


def seed_programs(db: Session):
    """Add the demo programs that are not there yet"""
    existing_names = {name for (name,) in db.query(Program.name).all()}

    created = 0
    for program_data in DEMO_PROGRAMS:
        if program_data["name"] not in existing_names:
            db.add(Program(**program_data))
            created += 1

    db.commit()
    print(f"✅ Programs seeded ({created} new)")
    return created


def run_seeder():
    """Main seeder function"""
    print("🌱 Starting database seeding...")

    db = SessionLocal()

    try:
        create_tables()
        seed_programs(db)
        print("🎉 Database seeding completed successfully!")

    except Exception as e:
        print(f"❌ Error during seeding: {e}")
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    run_seeder()
